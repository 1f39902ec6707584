from fastapi import APIRouter
from app.modules.users.router import router as users_router
from app.modules.children.router import router as children_router
from app.modules.medical_records.router import router as medical_records_router
from app.modules.hospitals.router import router as hospitals_router
from app.modules.appointments.router import router as appointments_router
from app.modules.community.router import router as community_router
from app.modules.chatbot.router import router as chatbot_router
from app.modules.media.router import router as media_router

api_router = APIRouter()
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(children_router, prefix="/children", tags=["children"])
api_router.include_router(medical_records_router, prefix="/medical-records", tags=["medical-records"])
api_router.include_router(hospitals_router, prefix="/hospitals", tags=["hospitals"])
api_router.include_router(appointments_router, prefix="/appointments", tags=["appointments"])
api_router.include_router(community_router, prefix="/community", tags=["community"])
api_router.include_router(chatbot_router, prefix="/chatbot", tags=["chatbot"])
api_router.include_router(media_router, prefix="/media", tags=["media"])

@api_router.get("/health", tags=["health"])
async def health():
    return {"status": "ok"}
