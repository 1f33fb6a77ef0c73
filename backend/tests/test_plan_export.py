"""Tests for plan export: share text, CSV, best-effort session detail extraction."""

import csv
import io

import pytest

from coach_running.schemas.goal import GoalInput
from coach_running.services.mock_plan import provide_mock_plan
from coach_running.services.plan_export import parse_session_details, plan_to_csv, plan_to_text


@pytest.mark.parametrize("description,expected", [
    ("45 min allure fondamentale", {"duration": "45 min", "pace": "allure fondamentale", "recovery": ""}),
    ("1h15 allure libre", {"duration": "1h15", "pace": "allure libre", "recovery": ""}),
    ("1h30 avec 2x10 min allure course", {"duration": "1h30", "pace": "allure course", "recovery": ""}),
    ("6x1000m à 4:30/km, récup 2' trot", {"duration": "", "pace": "4:30/km", "recovery": "récup 2' trot"}),
    ("40 min easy pace then 5x200m, recovery 90s", {"duration": "40 min", "pace": "easy pace", "recovery": "recovery 90s"}),
    ("Repos complet", {"duration": "", "pace": "", "recovery": ""}),
    ("", {"duration": "", "pace": "", "recovery": ""}),
])
def test_parse_session_details(description, expected):
    assert parse_session_details(description) == expected


def test_plan_to_text_with_goal():
    goal = GoalInput(
        distance="half_marathon",
        target_time="1h45",
        weeks=10,
        sessions_per_week=3,
        training_days=["monday", "wednesday", "saturday"],
        level="regular",
        language="fr",
    )
    text = plan_to_text(provide_mock_plan(), goal)
    lines = text.splitlines()
    assert lines[0] == "🏃 Plan Semi-marathon - 1h45"
    assert lines[1] == "📅 10 semaines - 3 séances/sem"
    assert lines[2] == ""
    assert lines[3] == "Semaine 1 :"
    assert lines[4] == "- Lundi : Repos"
    assert lines[5] == "  Repos complet"
    assert "Semaine 3 :" in lines


def test_plan_to_text_without_goal_english():
    text = plan_to_text(provide_mock_plan(), None, "en")
    assert text.startswith("🏃 Training Plan\n\nWeek 1:\n- Lundi : Repos\n")


def test_plan_to_text_custom_distance_without_target():
    goal = GoalInput(
        distance="OTHER",
        custom_distance="Trail 30km",
        training_days=["sunday"],
        level="expert",
        language="en",
    )
    text = plan_to_text(provide_mock_plan(), goal)
    assert text.splitlines()[0] == "🏃 Plan Trail 30km"
    assert text.splitlines()[1] == "📅 8 weeks - 3 sessions/week"


def test_plan_to_csv():
    rows = list(csv.reader(io.StringIO(plan_to_csv(provide_mock_plan(), "en"))))
    assert rows[0] == ["Week", "Day", "Type", "Description", "Duration", "Pace", "Recovery", "Completed"]
    assert len(rows) == 1 + 9
    assert rows[2] == ["1", "Mercredi", "Endurance", "45 min allure fondamentale", "45 min", "allure fondamentale", "", "No"]


def test_plan_to_csv_french_headers():
    rows = list(csv.reader(io.StringIO(plan_to_csv(provide_mock_plan(), "fr-FR"))))
    assert rows[0][0] == "Semaine"
    assert rows[1][-1] == "Non"
