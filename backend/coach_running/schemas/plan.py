"""Training plan: weeks of sessions, as produced by Gemini or the fallback provider."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Session(BaseModel):
    """One scheduled workout. `description` may carry an "ERROR: ..." message from the model."""

    model_config = ConfigDict(frozen=True)

    day: str
    type: str
    description: str
    completed: bool = False


class Week(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1)
    sessions: list[Session] = Field(..., min_length=1)


class Plan(BaseModel):
    """Weeks ordered by number, starting at 1, no gaps."""

    model_config = ConfigDict(frozen=True)

    weeks: list[Week] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _contiguous_numbering(self) -> "Plan":
        numbers = [w.number for w in self.weeks]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(f"week numbers must be 1..{len(numbers)} in order, got {numbers}")
        return self

    def with_progress_reset(self) -> "Plan":
        """Copy of the plan with every session marked not completed."""
        return Plan(
            weeks=[
                Week(
                    number=w.number,
                    sessions=[s.model_copy(update={"completed": False}) for s in w.sessions],
                )
                for w in self.weeks
            ]
        )
