import hashlib
import logging
from fastapi import UploadFile
from app.core.clock import Clock
from app.core.config import settings
from app.core.errors import InvalidArgument
from app.modules.media.schemas import MediaUploadOut
from app.platform.ports.object_storage import ObjectStoragePort

logger = logging.getLogger(__name__)

class MediaService:
    def __init__(self, storage: ObjectStoragePort, clock: Clock):
        self.storage = storage
        self.clock = clock

    def object_key(self, data: bytes, filename: str | None, *, prefix: str = "uploads/") -> str:
        """uploads/YYYY/MM/DD/<sha256>.<ext>; identical bytes on the same day share a key."""
        sha = hashlib.sha256(data).hexdigest()
        ext = ""
        if filename and "." in filename:
            ext = filename.rsplit(".", 1)[1].lower()
        day = self.clock.today()
        return f"{prefix}{day:%Y/%m/%d}/{sha}{('.' + ext) if ext else ''}"

    async def upload_file(self, file: UploadFile) -> MediaUploadOut:
        # Read file fully (for production consider streaming + multipart direct-to-S3)
        data = await file.read()
        size = len(data)
        if size == 0:
            raise InvalidArgument("Uploaded file is empty")
        if size > settings.MAX_UPLOAD_BYTES:
            raise InvalidArgument(
                "Uploaded file is too large",
                details={"maxBytes": settings.MAX_UPLOAD_BYTES},
            )
        content_type = file.content_type or "application/octet-stream"
        key = self.object_key(data, file.filename)
        self.storage.put_bytes(key, data, content_type=content_type)
        logger.info(f"Stored upload {key} ({size} bytes)")
        return MediaUploadOut(key=key, url=self.storage.url_for(key), content_type=content_type, size_bytes=size)

    def delete(self, key: str) -> None:
        key = (key or "").strip()
        if not key.startswith("uploads/"):
            raise InvalidArgument("Unknown media key")
        self.storage.delete(key)
        logger.info(f"Deleted upload {key}")
