"""
Image upload endpoint
"""
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from typing import Optional

from storefront.api.deps import get_current_user, get_settings
from storefront.config import Settings
from storefront.exceptions import UploadRejectedError
from storefront.services.upload_service import UploadService
from storefront.schemas.upload import UploadResponse

router = APIRouter(tags=["upload"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    dependencies=[Depends(get_current_user)],
    summary="Upload image"
)
def upload_image(
    image: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings)
):
    """
    Store a product image (max MAX_UPLOAD_SIZE bytes)
    
    - **image**: multipart file field
    """
    if image is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    
    try:
        file_path = UploadService(settings).save_image(image)
    except UploadRejectedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UploadResponse(file_path=file_path)
