from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from app.exceptions import AuthorizationError, NotFoundError
from domain.enums import DayOfWeek, MealType
from domain.models import MealPlan, MealPlanItem
from domain.schemas.plan_schemas import MealPlanCreate, MealPlanItemCreate
from repositories.meal_plan_repository import MealPlanStore
from repositories.recipe_repository import RecipeCatalog, RecipeSummary
from services.meal_plan_aggregator import MealPlanAggregator


logger = logging.getLogger("nutriplan.meal_plans")


@dataclass
class PlanItemView:
    """A plan item plus the recipe's display data, when the recipe resolves"""

    id: UUID
    meal_plan_id: UUID
    recipe_id: int
    meal_type: MealType
    day_of_week: DayOfWeek
    date: date
    created_at: Optional[datetime] = None
    recipe_title: Optional[str] = None
    recipe_image: Optional[str] = None

    @classmethod
    def from_item(cls, item: MealPlanItem, recipe: Optional[RecipeSummary]) -> "PlanItemView":
        return cls(
            id=item.id,
            meal_plan_id=item.meal_plan_id,
            recipe_id=item.recipe_id,
            meal_type=item.meal_type,
            day_of_week=item.day_of_week,
            date=item.date,
            created_at=item.created_at,
            recipe_title=recipe.title if recipe else None,
            recipe_image=recipe.image_url if recipe else None,
        )


class MealPlanService:
    """Meal plan use cases exposed to the transport layer"""

    def __init__(
        self,
        plans: MealPlanStore,
        recipes: RecipeCatalog,
        aggregator: Optional[MealPlanAggregator] = None,
    ):
        self.plans = plans
        self.recipes = recipes
        self.aggregator = aggregator or MealPlanAggregator(plans, recipes)

    def create(self, request: MealPlanCreate, owner_id: UUID) -> MealPlan:
        return self.aggregator.create_plan(request, owner_id)

    def get(self, plan_id: UUID) -> MealPlan:
        # Any authenticated caller may read any plan
        plan = self.plans.get_plan(plan_id)
        if plan is None:
            raise NotFoundError(f"Meal plan {plan_id} not found")
        return plan

    def list_for_owner(self, owner_id: UUID) -> List[MealPlan]:
        return self.plans.list_plans_for_owner(owner_id)

    def delete(self, plan_id: UUID, requesting_user_id: UUID) -> None:
        with self.plans.transaction():
            plan = self._get_owned_plan(plan_id, requesting_user_id)
            self.plans.delete_plan(plan)
        logger.info("Deleted plan %s for user %s", plan_id, requesting_user_id)

    def list_items(self, plan_id: UUID) -> List[PlanItemView]:
        self.get(plan_id)
        return [self._enrich(item) for item in self.plans.list_items(plan_id)]

    def recompute_totals(self, plan_id: UUID) -> None:
        self.aggregator.recompute_totals(plan_id)

    def add_item(
        self, plan_id: UUID, meal: MealPlanItemCreate, requesting_user_id: UUID
    ) -> PlanItemView:
        with self.plans.transaction():
            plan = self._get_owned_plan(plan_id, requesting_user_id, for_update=True)
            item = self.plans.add_item(
                plan_id=plan.id,
                meal_type=meal.meal_type,
                day_of_week=meal.day_of_week,
                item_date=meal.date,
                recipe_id=meal.recipe_id,
            )
            view = self._enrich(item)
            self.aggregator.refresh_totals(plan_id)

        logger.info("Added item %s (recipe %s) to plan %s", view.id, meal.recipe_id, plan_id)
        return view

    def remove_item(self, plan_id: UUID, item_id: UUID, requesting_user_id: UUID) -> None:
        with self.plans.transaction():
            self._get_owned_plan(plan_id, requesting_user_id, for_update=True)
            item = self.plans.get_item(plan_id, item_id)
            if item is None:
                raise NotFoundError(f"Item {item_id} not found in meal plan {plan_id}")
            self.plans.remove_item(item)
            self.aggregator.refresh_totals(plan_id)

        logger.info("Removed item %s from plan %s", item_id, plan_id)

    # ---------- helpers ----------

    def _get_owned_plan(
        self, plan_id: UUID, user_id: UUID, for_update: bool = False
    ) -> MealPlan:
        plan = self.plans.get_plan(plan_id, for_update=for_update)
        if plan is None:
            raise NotFoundError(f"Meal plan {plan_id} not found")
        if plan.user_id != user_id:
            logger.warning("User %s attempted to modify plan %s owned by %s", user_id, plan_id, plan.user_id)
            raise AuthorizationError("Unauthorized to modify this meal plan")
        return plan

    def _enrich(self, item: MealPlanItem) -> PlanItemView:
        try:
            recipe = self.recipes.get_recipe(item.recipe_id)
        except Exception as e:
            logger.warning("Recipe lookup failed for item %s (recipe %s): %s", item.id, item.recipe_id, e)
            recipe = None
        return PlanItemView.from_item(item, recipe)
