"""
Controllers Package - The 'C' in MVC

Controllers handle HTTP requests and hand back Pydantic schemas
(app/models) built from the results of services (app/services).

Each controller is a FastAPI APIRouter that defines endpoints
for a specific feature area.
"""

from app.controllers.greeting import router as greeting_router
from app.controllers.random_text import router as random_text_router

__all__ = ["greeting_router", "random_text_router"]
