"""
Prompt for Gemini: runner profile, realism check, strict JSON output rules, progressive plan content.
"""
from coach_running.schemas.goal import GoalInput, normalize_language

PROMPT_FR = """Tu es un coach de course à pied expert.
Profil du coureur :
- Niveau : {level}
- Objectif : {distance}
{target_line}- Disponibilités : {sessions} séances par semaine, les {days}.
- Durée du plan : {weeks} semaines.

RÈGLES STRICTES :
1. ANALYSE DE COHÉRENCE : Vérifie d'abord si l'objectif est réaliste pour le niveau déclaré.
   - Exemple irréaliste : Débutant visant un Marathon en 2h30.
   - Exemple irréaliste : 5km en 3h (trop lent).
   - Si l'objectif est irréaliste ou dangereux, génère un JSON avec une seule semaine et une seule séance dont la description est : "ERREUR : [Explication du problème et conseil pour une saisie réaliste]".

2. FORMAT DE RÉPONSE : Réponds UNIQUEMENT avec un JSON valide (pas de markdown, pas de texte avant ou après) suivant cette structure EXACTE :
{{
  "weeks": [
    {{
      "number": 1,
      "sessions": [
        {{
          "day": "Lundi",
          "type": "Repos",
          "description": "Repos complet",
          "completed": false
        }},
        {{
          "day": "Mercredi",
          "type": "Endurance",
          "description": "45 min allure fondamentale",
          "completed": false
        }}
      ]
    }}
  ]
}}

3. CONTENU DU PLAN :
   - Si l'objectif est réaliste, construis un plan progressif sur {weeks} semaines.
   - Respecte scrupuleusement les jours d'entraînement : {days}.
   - Intègre le temps visé ({target}) dans les allures des séances spécifiques."""

PROMPT_EN = """You are an expert running coach.
Runner profile:
- Level: {level}
- Goal: {distance}
{target_line}- Availability: {sessions} sessions per week, on {days}.
- Plan length: {weeks} weeks.

STRICT RULES:
1. CONSISTENCY CHECK: First check whether the goal is realistic for the declared level.
   - Unrealistic example: Beginner aiming for a Marathon in 2h30.
   - Unrealistic example: 5km in 3h (too slow).
   - If the goal is unrealistic or dangerous, return a JSON with a single week and a single session whose description is: "ERROR: [Explanation of the problem and advice for a realistic entry]".

2. RESPONSE FORMAT: Reply ONLY with valid JSON (no markdown, no text before or after) following this EXACT structure:
{{
  "weeks": [
    {{
      "number": 1,
      "sessions": [
        {{
          "day": "Monday",
          "type": "Rest",
          "description": "Full rest",
          "completed": false
        }},
        {{
          "day": "Wednesday",
          "type": "Endurance",
          "description": "45 min easy pace",
          "completed": false
        }}
      ]
    }}
  ]
}}

3. PLAN CONTENT:
   - If the goal is realistic, build a progressive plan over {weeks} weeks.
   - Strictly respect the training days: {days}.
   - Use the target time ({target}) to set the paces of the specific sessions."""

TEMPLATES = {"fr": PROMPT_FR, "en": PROMPT_EN}
TARGET_LINE = {"fr": "- Temps visé : {}\n", "en": "- Target time: {}\n"}
NO_TARGET = {"fr": "finir la course", "en": "finish the race"}


def build_prompt(goal: GoalInput, labels: dict, language: str | None = None) -> str:
    """
    Render the instruction for Gemini. labels holds "level", "distance" and "days"
    already translated into the goal's language.
    """
    language = normalize_language(language) if language else goal.resolved_language
    template = TEMPLATES[language]
    target_line = TARGET_LINE[language].format(goal.target_time) if goal.target_time else ""
    days = ", ".join(labels["days"])
    return template.format(
        level=labels["level"],
        distance=labels["distance"],
        target_line=target_line,
        sessions=goal.sessions_per_week,
        days=days,
        weeks=goal.weeks,
        target=goal.target_time or NO_TARGET[language],
    )
