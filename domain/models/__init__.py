"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.meal_plan import MealPlan, MealPlanItem
from domain.models.recipe import Recipe, RecipeNutrition

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Meal plan models
    "MealPlan",
    "MealPlanItem",
    # Recipe models (read-only)
    "Recipe",
    "RecipeNutrition",
]
