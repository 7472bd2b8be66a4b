from storefront.schemas.base import CamelModel


class UploadResponse(CamelModel):
    """Public path of a stored upload"""
    file_path: str
