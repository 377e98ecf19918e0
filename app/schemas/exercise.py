"""Exercise schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import InputType, MuscleGroup


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    name_ja: str | None = Field(None, max_length=255)
    muscle_group: MuscleGroup
    met: float = Field(..., gt=0, description="Metabolic equivalent of task")
    input_type: InputType = InputType.REPS_WEIGHT
    description: str | None = None


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
