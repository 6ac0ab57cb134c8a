from fastapi import APIRouter
from bloodwise.api.endpoints import chat, history, knowledge, predictions, reports

api_router = APIRouter()

# Register the endpoints
api_router.include_router(predictions.router, tags=["Predictions"])
api_router.include_router(knowledge.router, tags=["Knowledge Base"])
api_router.include_router(chat.router, tags=["Assistant"])
api_router.include_router(reports.router, tags=["Reports"])
api_router.include_router(history.router, tags=["History"])
