"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.meal_plan_repository import MealPlanStore, MealPlanRepository
from repositories.recipe_repository import RecipeCatalog, RecipeRepository, RecipeSummary

__all__ = [
    "BaseRepository",
    "MealPlanStore",
    "MealPlanRepository",
    "RecipeCatalog",
    "RecipeRepository",
    "RecipeSummary",
]
