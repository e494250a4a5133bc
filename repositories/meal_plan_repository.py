"""
Meal Plan Repository - Data access layer for meal plan operations
"""

import uuid
from abc import ABC, abstractmethod
from datetime import date, datetime, timezone
from typing import ContextManager, List, Optional
from uuid import UUID

from sqlalchemy import case, select
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.enums import DayOfWeek, MealType, MEAL_TYPE_ORDER
from domain.models import MealPlan, MealPlanItem
from domain.nutrition import NutritionTotals


class MealPlanStore(ABC):
    """
    Port the aggregator and the service depend on.

    Implementations must make every write performed inside ``transaction()``
    visible all together or not at all.
    """

    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        """Unit of work scope: commit on success, roll back on error"""

    @abstractmethod
    def add_plan(self, owner_id: UUID, name: str, start_date: date, end_date: date) -> MealPlan:
        """Insert a plan header with zeroed totals"""

    @abstractmethod
    def add_item(
        self,
        plan_id: UUID,
        meal_type: MealType,
        day_of_week: DayOfWeek,
        item_date: date,
        recipe_id: int,
    ) -> MealPlanItem:
        """Insert one item into a plan"""

    @abstractmethod
    def get_plan(self, plan_id: UUID, for_update: bool = False) -> Optional[MealPlan]:
        """Fetch a plan header; ``for_update`` locks the row until the transaction ends"""

    @abstractmethod
    def list_plans_for_owner(self, owner_id: UUID) -> List[MealPlan]:
        """All plans of a user, newest start date first"""

    @abstractmethod
    def list_items(self, plan_id: UUID) -> List[MealPlanItem]:
        """Items of a plan ordered by date, then breakfast/lunch/dinner/snack"""

    @abstractmethod
    def get_item(self, plan_id: UUID, item_id: UUID) -> Optional[MealPlanItem]:
        """Fetch one item, only if it belongs to the given plan"""

    @abstractmethod
    def remove_item(self, item: MealPlanItem) -> None:
        """Delete a single item"""

    @abstractmethod
    def save_totals(self, plan: MealPlan, totals: NutritionTotals) -> None:
        """Write cached totals onto the header and advance ``updated_at``"""

    @abstractmethod
    def delete_plan(self, plan: MealPlan) -> None:
        """Hard delete a plan together with all of its items"""


class MealPlanRepository(BaseRepository[MealPlan], MealPlanStore):
    """Repository for meal plan data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlan)

    def add_plan(self, owner_id: UUID, name: str, start_date: date, end_date: date) -> MealPlan:
        plan = MealPlan(
            id=uuid.uuid4(),
            user_id=owner_id,
            name=name,
            start_date=start_date,
            end_date=end_date,
            total_calories=0,
            total_protein=0,
            total_carbs=0,
            total_fat=0,
        )
        return self.add(plan)

    def add_item(
        self,
        plan_id: UUID,
        meal_type: MealType,
        day_of_week: DayOfWeek,
        item_date: date,
        recipe_id: int,
    ) -> MealPlanItem:
        item = MealPlanItem(
            id=uuid.uuid4(),
            meal_plan_id=plan_id,
            meal_type=meal_type,
            day_of_week=day_of_week,
            date=item_date,
            recipe_id=recipe_id,
        )
        return self.add(item)

    def get_plan(self, plan_id: UUID, for_update: bool = False) -> Optional[MealPlan]:
        stmt = select(MealPlan).where(MealPlan.id == plan_id)
        if for_update:
            # Ignored by backends without row locks (SQLite)
            stmt = stmt.with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def list_plans_for_owner(self, owner_id: UUID) -> List[MealPlan]:
        stmt = (
            select(MealPlan)
            .where(MealPlan.user_id == owner_id)
            .order_by(MealPlan.start_date.desc(), MealPlan.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_items(self, plan_id: UUID) -> List[MealPlanItem]:
        meal_order = case(
            *[(MealPlanItem.meal_type == meal_type, idx) for meal_type, idx in MEAL_TYPE_ORDER.items()],
            else_=len(MEAL_TYPE_ORDER),
        )
        stmt = (
            select(MealPlanItem)
            .where(MealPlanItem.meal_plan_id == plan_id)
            .order_by(MealPlanItem.date, meal_order, MealPlanItem.created_at)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_item(self, plan_id: UUID, item_id: UUID) -> Optional[MealPlanItem]:
        stmt = select(MealPlanItem).where(
            MealPlanItem.id == item_id, MealPlanItem.meal_plan_id == plan_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def remove_item(self, item: MealPlanItem) -> None:
        self.remove(item)

    def save_totals(self, plan: MealPlan, totals: NutritionTotals) -> None:
        plan.total_calories = totals.calories
        plan.total_protein = totals.protein
        plan.total_carbs = totals.carbs
        plan.total_fat = totals.fat
        plan.updated_at = datetime.now(timezone.utc)
        self.db.flush()

    def delete_plan(self, plan: MealPlan) -> None:
        self.remove(plan)
