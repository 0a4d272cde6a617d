"""
API routers package.
"""
from prep_assistant.routers.events import router as events_router
from prep_assistant.routers.generate import router as generate_router
from prep_assistant.routers.pages import router as pages_router

__all__ = [
    "events_router",
    "generate_router",
    "pages_router",
]
