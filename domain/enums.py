"""
Domain enums for NutriPlan.
Contains the enumeration types used by the meal plan models and schemas.
"""

import enum


class MealType(str, enum.Enum):
    """Meal slot within a day"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class DayOfWeek(str, enum.Enum):
    """Weekday label attached to a plan item (not checked against the item date)"""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


# Order in which meals of the same day are listed
MEAL_TYPE_ORDER = {meal_type: idx for idx, meal_type in enumerate(MealType)}
