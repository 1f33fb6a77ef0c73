"""
Plan export: share text (what the app copies to the clipboard) and CSV.
CSV columns duration/pace/recovery are pulled out of free-text descriptions on a best-effort basis.
"""
from __future__ import annotations

import csv
import io
import re

from coach_running.schemas.goal import GoalInput, normalize_language
from coach_running.schemas.plan import Plan
from coach_running.services.localization import goal_labels

TEXT_STRINGS = {
    "fr": {
        "title": "🏃 Plan {distance}{target}",
        "summary": "📅 {weeks} semaines - {sessions} séances/sem",
        "generic_title": "🏃 Plan d'Entraînement",
        "week": "Semaine {number} :",
    },
    "en": {
        "title": "🏃 Plan {distance}{target}",
        "summary": "📅 {weeks} weeks - {sessions} sessions/week",
        "generic_title": "🏃 Training Plan",
        "week": "Week {number}:",
    },
}

CSV_HEADERS = {
    "fr": ["Semaine", "Jour", "Type", "Description", "Durée", "Allure", "Récupération", "Terminé"],
    "en": ["Week", "Day", "Type", "Description", "Duration", "Pace", "Recovery", "Completed"],
}
CSV_YES_NO = {"fr": ("Oui", "Non"), "en": ("Yes", "No")}

# 1h15, 2 h 30, 45 min, 90mn, 30 minutes
_DURATION_RE = re.compile(r"\b(\d{1,2}\s?h(?:\s?\d{2})?|\d{1,3}\s?(?:minutes?|min|mn))(?![a-z])", re.IGNORECASE)
# 5:30/km, 5'30 min/km, 12 km/h, allure fondamentale, easy pace
_PACE_RE = re.compile(
    r"(\d{1,2}[:'’]\d{2}\s?(?:min)?\s?/\s?km"
    r"|\d{1,2}(?:[.,]\d)?\s?km/h"
    r"|allure\s+(?!de\b|du\b|à\b)[\w-]+"
    r"|\b(?:easy|race|tempo|marathon|threshold|steady)\s+pace)",
    re.IGNORECASE,
)
# récup 1 min, récupération : 90s, recovery 2'
_RECOVERY_RE = re.compile(
    r"((?:r[ée]cup(?:[ée]ration)?|recovery)\s*:?\s*\d+\s?(?:secondes?|seconds?|sec|s|minutes?|min|mn|')?(?:\s+(?:trot|jog|walk|marche))?)",
    re.IGNORECASE,
)


def parse_session_details(description: str) -> dict[str, str]:
    """Best-effort {"duration", "pace", "recovery"} from a session description; "" means not found."""
    out = {"duration": "", "pace": "", "recovery": ""}
    if not description:
        return out
    for key, pattern in (("duration", _DURATION_RE), ("pace", _PACE_RE), ("recovery", _RECOVERY_RE)):
        m = pattern.search(description)
        if m:
            out[key] = m.group(1).strip()
    return out


def plan_to_text(plan: Plan, goal: GoalInput | None = None, language: str | None = None) -> str:
    """Plain-text plan for sharing; language defaults to the goal's, else French."""
    if language is None:
        language = goal.resolved_language if goal is not None else "fr"
    strings = TEXT_STRINGS[normalize_language(language)]
    lines: list[str] = []
    if goal is not None:
        labels = goal_labels(goal, normalize_language(language))
        target = f" - {goal.target_time}" if goal.target_time else ""
        lines.append(strings["title"].format(distance=labels["distance"], target=target))
        lines.append(strings["summary"].format(weeks=goal.weeks, sessions=goal.sessions_per_week))
    else:
        lines.append(strings["generic_title"])
    lines.append("")
    for week in plan.weeks:
        lines.append(strings["week"].format(number=week.number))
        for s in week.sessions:
            lines.append(f"- {s.day} : {s.type}")
            lines.append(f"  {s.description}")
        lines.append("")
    return "\n".join(lines)


def plan_to_csv(plan: Plan, language: str = "fr") -> str:
    """One row per session with localized headers."""
    language = normalize_language(language)
    yes, no = CSV_YES_NO[language]
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_HEADERS[language])
    for week in plan.weeks:
        for s in week.sessions:
            details = parse_session_details(s.description)
            writer.writerow([
                week.number,
                s.day,
                s.type,
                s.description,
                details["duration"],
                details["pace"],
                details["recovery"],
                yes if s.completed else no,
            ])
    return output.getvalue()
