#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the schema and seeds a sample recipe with nutrition facts so a
fresh install can build a meal plan straight away.
"""

import logging
import os
import sys

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from sqlalchemy import select

from app.config import settings
from domain.models import Recipe, RecipeNutrition, SessionLocal, init_database

logger = logging.getLogger("nutriplan.scripts.init_db")

SAMPLE_RECIPES = [
    {
        "title": "Grilled Chicken Salad",
        "image_url": None,
        "nutrition": {
            "calories": 350,
            "protein": 35,
            "carbohydrates": 15,
            "fat": 18,
            "fiber": 8,
        },
    },
]


def seed_recipes(db) -> int:
    """Insert sample recipes that are not there yet. Returns how many were added."""
    added = 0
    for sample in SAMPLE_RECIPES:
        exists = db.execute(
            select(Recipe.id).where(Recipe.title == sample["title"])
        ).first()
        if exists:
            logger.info("Recipe '%s' already present, skipping", sample["title"])
            continue

        recipe = Recipe(title=sample["title"], image_url=sample["image_url"])
        db.add(recipe)
        db.flush()
        db.add(RecipeNutrition(recipe_id=recipe.id, **sample["nutrition"]))
        added += 1
    db.commit()
    return added


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    try:
        init_database()
        with SessionLocal() as db:
            added = seed_recipes(db)
        logger.info("Seeded %d sample recipes", added)
        return 0
    except Exception:
        logger.exception("Database initialization failed")
        return 1


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("NutriPlan Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    print("\n" + "=" * 60)
    print("SUCCESS! Your database is ready to use." if exit_code == 0 else "FAILED! Check the errors above.")
    print("=" * 60 + "\n")

    sys.exit(exit_code)
