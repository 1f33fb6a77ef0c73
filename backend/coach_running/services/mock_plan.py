"""Fixed three-week plan returned whenever Gemini is not configured or the call fails."""

from coach_running.schemas.plan import Plan, Session, Week

_MOCK_WEEKS = [
    (
        1,
        [
            ("Lundi", "Repos", "Repos complet"),
            ("Mercredi", "Endurance", "45 min allure fondamentale"),
            ("Samedi", "Sortie Longue", "1h15 allure libre"),
        ],
    ),
    (
        2,
        [
            ("Lundi", "Repos", "Repos complet"),
            ("Mercredi", "Fractionné", "20 min échauffement + 10x30/30 + 10 min retour au calme"),
            ("Samedi", "Sortie Longue", "1h30 avec 2x10 min allure course"),
        ],
    ),
    (
        3,
        [
            ("Lundi", "Repos", "Repos complet"),
            ("Mercredi", "Endurance", "50 min allure fondamentale"),
            ("Samedi", "Sortie Longue", "1h45 allure libre"),
        ],
    ),
]


def provide_mock_plan() -> Plan:
    """New Plan instance on every call; all calls compare equal."""
    return Plan(
        weeks=[
            Week(
                number=number,
                sessions=[Session(day=day, type=kind, description=desc, completed=False) for day, kind, desc in sessions],
            )
            for number, sessions in _MOCK_WEEKS
        ]
    )
