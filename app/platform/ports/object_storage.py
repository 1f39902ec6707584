from typing import Protocol, runtime_checkable

@runtime_checkable
class ObjectStoragePort(Protocol):
    def put_bytes(self, key: str, data: bytes, content_type: str) -> None: ...
    def url_for(self, key: str) -> str: ...
    def delete(self, key: str) -> None: ...
