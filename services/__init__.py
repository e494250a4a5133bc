"""Services package - Business logic layer"""

from services.meal_plan_aggregator import MealPlanAggregator
from services.meal_plan_service import MealPlanService, PlanItemView

__all__ = [
    "MealPlanAggregator",
    "MealPlanService",
    "PlanItemView",
]
