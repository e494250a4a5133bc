from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional
from uuid import UUID

from app.exceptions import NotFoundError, ServiceValidationError
from domain.models import MealPlan, MealPlanItem
from domain.nutrition import NutritionFacts, NutritionTotals
from domain.schemas.plan_schemas import MealPlanCreate
from repositories.meal_plan_repository import MealPlanStore
from repositories.recipe_repository import RecipeCatalog


logger = logging.getLogger("nutriplan.aggregator")


class MealPlanAggregator:
    """
    Builds meal plans and keeps their cached nutrition totals in sync:
    - validates the shape of a creation request
    - writes the header and every item in one transaction
    - sums calories/protein/carbohydrates/fat of the items' recipes onto the header

    Items whose recipe has no nutrition record (or whose recipe is gone)
    contribute zero.
    """

    def __init__(self, plans: MealPlanStore, recipes: RecipeCatalog):
        self.plans = plans
        self.recipes = recipes

    # ---------- validation ----------

    @staticmethod
    def validate_creation(request: MealPlanCreate) -> None:
        if not request.name or not request.name.strip():
            raise ServiceValidationError("Meal plan name must not be empty", code="EMPTY_NAME")

        if not request.meals:
            raise ServiceValidationError("At least one meal required", code="NO_MEALS")

        if request.start_date > request.end_date:
            raise ServiceValidationError(
                "start_date must not be after end_date",
                details={
                    "start_date": request.start_date.isoformat(),
                    "end_date": request.end_date.isoformat(),
                },
                code="INVALID_DATE_RANGE",
            )

    # ---------- aggregation ----------

    def compute_totals(self, items: Iterable[MealPlanItem]) -> NutritionTotals:
        totals = NutritionTotals()
        seen: Dict[int, Optional[NutritionFacts]] = {}

        for item in items:
            rid = item.recipe_id
            if rid not in seen:
                seen[rid] = self.recipes.get_nutrition(rid)
                if seen[rid] is None:
                    logger.debug("Recipe %s has no nutrition record, counting as zero", rid)
            totals = totals.add(seen[rid])

        return totals

    def refresh_totals(self, plan_id: UUID) -> MealPlan:
        """
        Recompute and store the totals of a plan inside the caller's transaction.

        The plan row is locked before the items are read so the totals written
        match the item set they were computed from.
        """
        plan = self.plans.get_plan(plan_id, for_update=True)
        if plan is None:
            raise NotFoundError(f"Meal plan {plan_id} not found")

        items = self.plans.list_items(plan_id)
        totals = self.compute_totals(items)
        self.plans.save_totals(plan, totals)

        logger.info(
            "Plan %s totals: %d items, calories=%s protein=%s carbs=%s fat=%s",
            plan_id,
            len(items),
            totals.calories,
            totals.protein,
            totals.carbs,
            totals.fat,
        )
        return plan

    def recompute_totals(self, plan_id: UUID) -> None:
        with self.plans.transaction():
            self.refresh_totals(plan_id)

    # ---------- creation ----------

    def create_plan(self, request: MealPlanCreate, owner_id: UUID) -> MealPlan:
        self.validate_creation(request)

        with self.plans.transaction():
            plan = self.plans.add_plan(
                owner_id=owner_id,
                name=request.name.strip(),
                start_date=request.start_date,
                end_date=request.end_date,
            )
            plan_id = plan.id
            for meal in request.meals:
                self.plans.add_item(
                    plan_id=plan_id,
                    meal_type=meal.meal_type,
                    day_of_week=meal.day_of_week,
                    item_date=meal.date,
                    recipe_id=meal.recipe_id,
                )

        logger.info(
            "Created plan %s for user %s with %d items", plan_id, owner_id, len(request.meals)
        )

        self.recompute_totals(plan_id)
        return self.plans.get_plan(plan_id)
