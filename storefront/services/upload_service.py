"""
Upload Service - stores product images on local disk
"""
import logging
import os
import uuid

from fastapi import UploadFile

from storefront.config import Settings
from storefront.exceptions import UploadRejectedError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024
PUBLIC_PREFIX = "/uploads"


class UploadService:
    """Service for persisting uploaded images"""
    
    def __init__(self, settings: Settings):
        self.upload_dir = settings.UPLOAD_DIR
        self.max_size = settings.MAX_UPLOAD_SIZE
    
    def save_image(self, upload: UploadFile) -> str:
        """
        Save an uploaded image and return its public path
        
        Raises:
            UploadRejectedError: If the file is not an image or exceeds the size limit
        """
        if not upload.content_type or not upload.content_type.startswith("image/"):
            raise UploadRejectedError("Only image files are allowed")
        
        os.makedirs(self.upload_dir, exist_ok=True)
        extension = os.path.splitext(upload.filename or "")[1].lower()
        filename = f"{uuid.uuid4().hex}{extension}"
        destination = os.path.join(self.upload_dir, filename)
        
        written = 0
        try:
            with open(destination, "wb") as out:
                while True:
                    chunk = upload.file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    written += len(chunk)
                    if written > self.max_size:
                        raise UploadRejectedError("File too large")
                    out.write(chunk)
        except Exception:
            # No partial files left behind
            if os.path.exists(destination):
                os.remove(destination)
            raise
        
        logger.info("Stored upload %s (%d bytes)", filename, written)
        return f"{PUBLIC_PREFIX}/{filename}"
