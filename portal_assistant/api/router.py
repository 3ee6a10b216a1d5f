from fastapi import APIRouter

from portal_assistant.api.routes import chat

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(chat.router, prefix="/chat", tags=["chat"])
