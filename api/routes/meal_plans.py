"""Meal plan routes"""

from __future__ import annotations

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from api.dependencies import get_current_user_id, get_meal_plan_service
from api.responses import ErrorResponse
from domain.schemas.plan_schemas import (
    MealPlanCreate,
    MealPlanDetailResponse,
    MealPlanItemCreate,
    MealPlanItemResponse,
    MealPlanResponse,
    MessageResponse,
)
from services.meal_plan_service import MealPlanService

router = APIRouter(
    prefix="/meal-plans",
    tags=["Meal Plans"],
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)
logger = logging.getLogger("nutriplan.api.meal_plans")


@router.post(
    "",
    response_model=MealPlanDetailResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def create_meal_plan(
    body: MealPlanCreate,
    user_id: UUID = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    """
    Create a meal plan with its initial items.

    The header and every item are written in one transaction. The returned
    plan already carries its nutrition totals, and its items come back in
    the same order and with the same recipe details as the items listing.
    """
    logger.info(
        "Creating plan '%s' for user %s: %s..%s, %d meals",
        body.name,
        user_id,
        body.start_date,
        body.end_date,
        len(body.meals),
    )
    plan = service.create(body, user_id)
    items = service.list_items(plan.id)
    return MealPlanDetailResponse(
        **MealPlanResponse.model_validate(plan).model_dump(),
        items=[MealPlanItemResponse.model_validate(i) for i in items],
    )


@router.get("/user", response_model=List[MealPlanResponse])
def list_user_meal_plans(
    user_id: UUID = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    """List the caller's meal plans, most recent start date first."""
    plans = service.list_for_owner(user_id)
    return [MealPlanResponse.model_validate(p) for p in plans]


@router.get("/{plan_id}", response_model=MealPlanResponse)
def get_meal_plan(
    plan_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    return MealPlanResponse.model_validate(service.get(plan_id))


@router.get("/{plan_id}/items", response_model=List[MealPlanItemResponse])
def list_meal_plan_items(
    plan_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    """
    Items of a plan ordered by date and meal, each with the recipe's title
    and image when the recipe still exists.
    """
    items = service.list_items(plan_id)
    return [MealPlanItemResponse.model_validate(i) for i in items]


@router.post(
    "/{plan_id}/items",
    response_model=MealPlanItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_403_FORBIDDEN: {"model": ErrorResponse}},
)
def add_meal_plan_item(
    plan_id: UUID,
    body: MealPlanItemCreate,
    user_id: UUID = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    """Add a meal to one of the caller's plans; totals are refreshed with it."""
    item = service.add_item(plan_id, body, user_id)
    return MealPlanItemResponse.model_validate(item)


@router.delete(
    "/{plan_id}/items/{item_id}",
    response_model=MessageResponse,
    responses={status.HTTP_403_FORBIDDEN: {"model": ErrorResponse}},
)
def remove_meal_plan_item(
    plan_id: UUID,
    item_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    service.remove_item(plan_id, item_id, user_id)
    return MessageResponse(message="Meal removed from plan")


@router.delete(
    "/{plan_id}",
    response_model=MessageResponse,
    responses={status.HTTP_403_FORBIDDEN: {"model": ErrorResponse}},
)
def delete_meal_plan(
    plan_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    """Delete a plan and all of its items. Only the owner may do this."""
    service.delete(plan_id, user_id)
    return MessageResponse(message="Meal plan deleted successfully")


@router.put("/{plan_id}/nutrition", response_model=MessageResponse)
def recompute_nutrition_totals(
    plan_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    service: MealPlanService = Depends(get_meal_plan_service),
):
    """Recompute the plan's cached nutrition totals from its current items."""
    service.recompute_totals(plan_id)
    return MessageResponse(message="Nutrition totals updated successfully")
