"""
Per-client application state (active tab, current goal, current plan, generation flag).
State values are immutable; every update is a pure function returning a new AppState,
and StateStore swaps the whole value (last write wins). Kept in memory only.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from coach_running.schemas.goal import GoalInput
from coach_running.schemas.plan import Plan
from coach_running.schemas.state import AppStateResponse, Tab


@dataclass(frozen=True)
class AppState:
    active_tab: Tab = Tab.FORM
    goal: GoalInput | None = None
    plan: Plan | None = None
    generating: bool = False

    def to_response(self) -> AppStateResponse:
        return AppStateResponse(
            active_tab=self.active_tab,
            goal=self.goal,
            plan=self.plan,
            generating=self.generating,
        )


def set_tab(state: AppState, tab: Tab) -> AppState:
    return replace(state, active_tab=tab)


def set_goal(state: AppState, goal: GoalInput | None) -> AppState:
    return replace(state, goal=goal)


def set_plan(state: AppState, plan: Plan | None) -> AppState:
    """Store plan and clear the generating flag."""
    return replace(state, plan=plan, generating=False)


def begin_generation(state: AppState, goal: GoalInput) -> AppState:
    """Submission: switch to the plan tab, remember the goal, drop the old plan."""
    return replace(state, active_tab=Tab.PLAN, goal=goal, plan=None, generating=True)


class StateStore:
    """In-memory AppState per client id."""

    def __init__(self) -> None:
        self._states: dict[str, AppState] = {}

    def get(self, client_id: str) -> AppState:
        return self._states.get(client_id) or AppState()

    def put(self, client_id: str, state: AppState) -> AppState:
        self._states[client_id] = state
        return state

    def clear(self) -> None:
        self._states.clear()
