"""
Recipe tables owned by the recipe subsystem.
The meal plan core only reads from them.
"""

from sqlalchemy import Column, Integer, Numeric, Text, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Recipe(Base):
    """Recipe header (only the fields used for display are mapped)"""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    image_url = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    nutrition = relationship(
        "RecipeNutrition", back_populates="recipe", uselist=False
    )


class RecipeNutrition(Base):
    """Per-recipe nutrition facts; every field is optional"""

    __tablename__ = "recipe_nutrition"

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    calories = Column(Numeric(10, 2))
    protein = Column(Numeric(8, 2))
    carbohydrates = Column(Numeric(8, 2))
    fat = Column(Numeric(8, 2))
    fiber = Column(Numeric(8, 2))
    sugar = Column(Numeric(8, 2))
    sodium = Column(Numeric(8, 2))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    recipe = relationship("Recipe", back_populates="nutrition")
