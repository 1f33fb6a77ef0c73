from enum import Enum

from pydantic import BaseModel

from coach_running.schemas.goal import GoalInput
from coach_running.schemas.plan import Plan


class Tab(str, Enum):
    FORM = "form"
    PLAN = "plan"


class TabUpdate(BaseModel):
    """Body for PUT /state/tab."""

    tab: Tab


class AppStateResponse(BaseModel):
    active_tab: Tab
    goal: GoalInput | None = None
    plan: Plan | None = None
    generating: bool = False
