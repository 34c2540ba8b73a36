"""REST API presentation layer for the users service.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # ApplicationError -> HTTP status mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from users_service.presentation.api.app import create_app

__all__ = ["create_app"]
