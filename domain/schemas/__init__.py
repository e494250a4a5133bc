"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.plan_schemas import (
    MealPlanCreate,
    MealPlanItemCreate,
    MealPlanResponse,
    MealPlanDetailResponse,
    MealPlanItemResponse,
    MessageResponse,
)

__all__ = [
    # Meal plan schemas
    "MealPlanCreate",
    "MealPlanItemCreate",
    "MealPlanResponse",
    "MealPlanDetailResponse",
    "MealPlanItemResponse",
    "MessageResponse",
]
