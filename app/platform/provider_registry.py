import logging
from app.core.config import settings
from app.platform.ports.object_storage import ObjectStoragePort
from app.platform.adapters.storage_local import LocalFilesystemStorage
from app.platform.adapters.storage_s3 import S3Storage
from app.platform.ports.text_responder import TextResponderPort
from app.platform.adapters.responder_keyword import KeywordResponder

log = logging.getLogger(__name__)

class ProviderRegistry:
    _object_storage: ObjectStoragePort | None = None
    _text_responder: TextResponderPort | None = None

    @classmethod
    def object_storage(cls) -> ObjectStoragePort:
        if cls._object_storage is None:
            if settings.OBJECT_STORAGE_PROVIDER == "s3":
                cls._object_storage = S3Storage()
            else:
                cls._object_storage = LocalFilesystemStorage(settings.LOCAL_STORAGE_ROOT)
        return cls._object_storage

    @classmethod
    def text_responder(cls) -> TextResponderPort:
        if cls._text_responder is None:
            prov = (settings.TEXT_RESPONDER_PROVIDER or "keyword").lower()
            if prov != "keyword":
                log.warning(f"Unknown text responder provider '{prov}', using keyword responder")
            cls._text_responder = KeywordResponder()
        return cls._text_responder

registry = ProviderRegistry()

def get_object_storage() -> ObjectStoragePort:
    return registry.object_storage()

def get_text_responder() -> TextResponderPort:
    return registry.text_responder()
