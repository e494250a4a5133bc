"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import get_db_session
from repositories import MealPlanRepository, RecipeRepository
from services.meal_plan_service import MealPlanService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_meal_plan_service(db: Session = Depends(get_db)) -> MealPlanService:
    """Meal plan service wired to the SQL repositories of the request's session"""
    return MealPlanService(MealPlanRepository(db), RecipeRepository(db))


def get_current_user_id(
    user_id: Optional[str] = Header(None, alias=settings.user_id_header),
) -> UUID:
    """
    Identity of the caller.

    Token verification happens upstream; this only reads the user id the
    gateway forwards and rejects requests without a usable one.
    """
    if not user_id:
        raise UnauthorizedError("Missing caller identity", code="MISSING_USER")
    try:
        return UUID(user_id)
    except ValueError:
        raise UnauthorizedError("Malformed caller identity", code="INVALID_USER")
