"""
Display labels for goal tags (level, distance, weekday) in French and English.
Plan acquisition receives this as a collaborator; it never reads the tables directly.
"""
from __future__ import annotations

from typing import Callable

from coach_running.schemas.goal import Distance, GoalInput, Level, Weekday

# (language, key) -> label
Localizer = Callable[[str, str], str]

LABELS: dict[str, dict[str, str]] = {
    "fr": {
        Level.BEGINNER.value: "Débutant (reprise ou 1ère fois)",
        Level.OCCASIONAL.value: "Occasionnel (1-2 sorties/sem)",
        Level.REGULAR.value: "Régulier (2-3 sorties/sem)",
        Level.CONFIRMED.value: "Confirmé (3-4 sorties/sem + compétitions)",
        Level.EXPERT.value: "Expert (5+ sorties/sem)",
        Distance.FIVE_K.value: "5km",
        Distance.TEN_K.value: "10km",
        Distance.HALF_MARATHON.value: "Semi-marathon",
        Distance.MARATHON.value: "Marathon",
        Distance.OTHER.value: "Autre",
        Weekday.MONDAY.value: "Lundi",
        Weekday.TUESDAY.value: "Mardi",
        Weekday.WEDNESDAY.value: "Mercredi",
        Weekday.THURSDAY.value: "Jeudi",
        Weekday.FRIDAY.value: "Vendredi",
        Weekday.SATURDAY.value: "Samedi",
        Weekday.SUNDAY.value: "Dimanche",
    },
    "en": {
        Level.BEGINNER.value: "Beginner (returning or first time)",
        Level.OCCASIONAL.value: "Occasional (1-2 runs/week)",
        Level.REGULAR.value: "Regular (2-3 runs/week)",
        Level.CONFIRMED.value: "Experienced (3-4 runs/week + races)",
        Level.EXPERT.value: "Expert (5+ runs/week)",
        Distance.FIVE_K.value: "5km",
        Distance.TEN_K.value: "10km",
        Distance.HALF_MARATHON.value: "Half marathon",
        Distance.MARATHON.value: "Marathon",
        Distance.OTHER.value: "Other",
        Weekday.MONDAY.value: "Monday",
        Weekday.TUESDAY.value: "Tuesday",
        Weekday.WEDNESDAY.value: "Wednesday",
        Weekday.THURSDAY.value: "Thursday",
        Weekday.FRIDAY.value: "Friday",
        Weekday.SATURDAY.value: "Saturday",
        Weekday.SUNDAY.value: "Sunday",
    },
}


def translate(language: str, key: str) -> str:
    """Label for key in language ("fr" or "en"); unknown keys come back unchanged."""
    table = LABELS.get(language) or LABELS["en"]
    return table.get(key, key)


def goal_labels(goal: GoalInput, language: str, localizer: Localizer = translate) -> dict:
    """Human-readable level, distance and day labels for the prompt and the export header."""
    if goal.distance is Distance.OTHER:
        distance = goal.custom_distance or localizer(language, Distance.OTHER.value)
    else:
        distance = localizer(language, goal.distance.value)
    return {
        "level": localizer(language, goal.level.value),
        "distance": distance,
        "days": [localizer(language, d.value) for d in goal.training_days],
    }
