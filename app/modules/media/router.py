from fastapi import APIRouter, UploadFile, File, Depends
from app.core.clock import Clock, get_clock
from app.modules.media.schemas import MediaUploadOut
from app.modules.media.service import MediaService
from app.platform.ports.object_storage import ObjectStoragePort
from app.platform.provider_registry import get_object_storage

router = APIRouter()

def svc(storage: ObjectStoragePort = Depends(get_object_storage), clock: Clock = Depends(get_clock)) -> MediaService:
    return MediaService(storage, clock)

@router.post("/upload", response_model=MediaUploadOut, status_code=201)
async def upload_media(file: UploadFile = File(...), service: MediaService = Depends(svc)):
    return await service.upload_file(file)

@router.delete("", status_code=204)
async def delete_media(key: str, service: MediaService = Depends(svc)):
    service.delete(key)
