"""Exercise model - reference data with MET value and input type."""

from __future__ import annotations

import uuid

from sqlalchemy import Enum, Float, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import InputType, MuscleGroup
from app.db.base import Base


class Exercise(Base):
    """Exercise definition: MET for calorie estimation, input type for how sets are logged."""

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name_ja: Mapped[str | None] = mapped_column(String(255), nullable=True)
    muscle_group: Mapped[MuscleGroup] = mapped_column(Enum(MuscleGroup), nullable=False, index=True)
    met: Mapped[float] = mapped_column(Float, nullable=False)
    input_type: Mapped[InputType] = mapped_column(
        Enum(InputType), default=InputType.REPS_WEIGHT, nullable=False
    )
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    workout_sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet", back_populates="exercise", cascade="all, delete-orphan"
    )
