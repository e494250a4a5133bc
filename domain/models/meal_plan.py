"""
Meal planning models.
"""

from sqlalchemy import (
    Column,
    Date,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    Numeric,
    Text,
    TIMESTAMP,
    Uuid,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base
from domain.enums import DayOfWeek, MealType


class MealPlan(Base):
    """Meal plan header with cached nutrition totals"""

    __tablename__ = "meal_plans"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    name = Column(Text, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    # Derived from the items; only the aggregator writes these
    total_calories = Column(Numeric(10, 2), nullable=False, default=0)
    total_protein = Column(Numeric(10, 2), nullable=False, default=0)
    total_carbs = Column(Numeric(10, 2), nullable=False, default=0)
    total_fat = Column(Numeric(10, 2), nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    items = relationship(
        "MealPlanItem",
        back_populates="plan",
        cascade="all, delete-orphan",
    )

    @property
    def owner_id(self):
        return self.user_id


class MealPlanItem(Base):
    """A single (day, meal type, date, recipe) assignment in a meal plan"""

    __tablename__ = "meal_plan_items"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    meal_plan_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("meal_plans.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_id = Column(Integer, nullable=False)  # weak reference, may not resolve
    meal_type = Column(SQLEnum(MealType, name="meal_type"), nullable=False)
    day_of_week = Column(SQLEnum(DayOfWeek, name="day_of_week"), nullable=False)
    date = Column(Date, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    plan = relationship("MealPlan", back_populates="items")
