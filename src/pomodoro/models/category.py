"""
Category ORM model.

A category groups a user's tasks and schedules; both collections are owned
by the category and removed together with it.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from pomodoro.core.constants import CATEGORY_NAME_MAX_LENGTH, CATEGORY_DESCRIPTION_MAX_LENGTH
from pomodoro.models.base import Base, OwnedMixin, TimestampMixin


class Category(OwnedMixin, TimestampMixin, Base):
    """User category with nested tasks and schedules."""

    __tablename__ = "categories"

    name = Column(String(CATEGORY_NAME_MAX_LENGTH), nullable=False)
    description = Column(String(CATEGORY_DESCRIPTION_MAX_LENGTH), nullable=True)

    tasks = relationship(
        "AppTask",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="AppTask.created_at",
    )
    schedules = relationship(
        "Schedule",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="Schedule.start_dt",
    )
