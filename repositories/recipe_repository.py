"""
Recipe Repository - read access to the recipe subsystem's tables.

The meal plan core only needs two things from recipes: a nutrition record
for aggregation and a title/image for display. Both lookups may come back
empty; callers treat that as "no data", never as an error.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from domain.models import Recipe, RecipeNutrition
from domain.nutrition import NutritionFacts


@dataclass(frozen=True)
class RecipeSummary:
    """Display data attached to plan items"""

    id: int
    title: str
    image_url: Optional[str] = None


class RecipeCatalog(ABC):
    """Read-only port onto the recipe store"""

    @abstractmethod
    def get_nutrition(self, recipe_id: int) -> Optional[NutritionFacts]:
        """Return the recipe's nutrition facts, or None when it has none"""

    @abstractmethod
    def get_recipe(self, recipe_id: int) -> Optional[RecipeSummary]:
        """Return title and image for a recipe, or None when it does not exist"""


class RecipeRepository(RecipeCatalog):
    """SQL implementation of the recipe catalog"""

    def __init__(self, db: Session):
        self.db = db

    def get_nutrition(self, recipe_id: int) -> Optional[NutritionFacts]:
        record = self.db.execute(
            select(RecipeNutrition).where(RecipeNutrition.recipe_id == recipe_id)
        ).scalar_one_or_none()
        if record is None:
            return None
        return NutritionFacts.from_record(record)

    def get_recipe(self, recipe_id: int) -> Optional[RecipeSummary]:
        # Savepoint: a failed lookup must not abort the caller's transaction
        with self.db.begin_nested():
            recipe = self.db.get(Recipe, recipe_id)
        if recipe is None:
            return None
        return RecipeSummary(id=recipe.id, title=recipe.title, image_url=recipe.image_url)
