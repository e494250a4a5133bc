from __future__ import annotations

from datetime import date as date_type, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from domain.enums import DayOfWeek, MealType


class MealPlanItemCreate(BaseModel):
    """One meal assignment in a create request"""

    meal_type: MealType
    day_of_week: DayOfWeek
    date: date_type
    recipe_id: int = Field(..., ge=1, description="Recipe to serve in this slot")


class MealPlanCreate(BaseModel):
    """
    Schema for creating a meal plan.

    The name, the item count and the date ordering are checked by the
    aggregator so they surface as service validation errors. Totals are
    never accepted.
    """

    name: str = Field(..., max_length=255)
    start_date: date_type
    end_date: date_type
    meals: List[MealPlanItemCreate] = Field(default_factory=list)


class MealPlanItemResponse(BaseModel):
    id: UUID
    meal_plan_id: UUID
    recipe_id: int
    meal_type: MealType
    day_of_week: DayOfWeek
    date: date_type
    created_at: Optional[datetime] = None
    recipe_title: Optional[str] = None
    recipe_image: Optional[str] = None

    model_config = {"from_attributes": True}


class MealPlanResponse(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    start_date: date_type
    end_date: date_type
    total_calories: float = 0
    total_protein: float = 0
    total_carbs: float = 0
    total_fat: float = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MealPlanDetailResponse(MealPlanResponse):
    """Plan header together with its items"""

    items: List[MealPlanItemResponse] = Field(default_factory=list)


class MessageResponse(BaseModel):
    message: str
