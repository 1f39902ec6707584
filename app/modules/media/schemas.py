from app.core.schemas import ApiModel

class MediaUploadOut(ApiModel):
    key: str
    url: str
    content_type: str
    size_bytes: int
