"""Tests for the fallback plan."""

import json

from coach_running.schemas.plan import Plan
from coach_running.services.mock_plan import provide_mock_plan


def test_mock_plan_is_deterministic():
    assert provide_mock_plan() == provide_mock_plan()
    assert provide_mock_plan() is not provide_mock_plan()


def test_mock_plan_shape():
    plan = provide_mock_plan()
    assert [w.number for w in plan.weeks] == [1, 2, 3]
    assert all(len(w.sessions) == 3 for w in plan.weeks)
    assert all(s.completed is False for w in plan.weeks for s in w.sessions)
    types = {s.type for w in plan.weeks for s in w.sessions}
    assert {"Repos", "Endurance", "Fractionné", "Sortie Longue"} <= types


def test_mock_plan_json_round_trip():
    plan = provide_mock_plan()
    raw = json.dumps(plan.model_dump())
    data = json.loads(raw)
    assert set(data) == {"weeks"}
    assert set(data["weeks"][0]) == {"number", "sessions"}
    assert set(data["weeks"][0]["sessions"][0]) == {"day", "type", "description", "completed"}
    assert Plan.model_validate(data) == plan
    assert Plan.model_validate_json(plan.model_dump_json()) == plan
