"""
Coach Prompts and local fallback texts
"""
from ..schemas.coach import CoachContext, Goal


COACH_SYSTEM = """Tu es un coach nutrition motivant, concret, bienveillant.
Réponds en français, en JSON strict avec les clés:
- coachMessage: string (2-3 phrases max)
- recipes: string[] (3 idées rapides)
Pas de conseils médicaux. Pas de texte hors JSON."""


def build_coach_user_prompt(context: CoachContext) -> str:
    return (
        f"Repas: {context.meal}\n"
        f"Objectif: {context.goal}\n"
        f"Estimation kcal: {context.kcal}\n"
        f"Verdict: {context.verdict}"
    )


def build_coach_messages(context: CoachContext) -> list[dict]:
    return [
        {"role": "system", "content": COACH_SYSTEM},
        {"role": "user", "content": build_coach_user_prompt(context)},
    ]


# ============================================================================
# Local fallback
# ============================================================================

FALLBACK_RECIPES: tuple[str, ...] = (
    "Bowl poulet, quinoa, légumes croquants",
    "Omelette légumes + salade + fruit",
    "Saumon au four, riz complet, brocoli",
)

LOSE_LIGHT_MESSAGE = (
    "Super repas pour ton objectif. Garde une bonne source de protéines "
    "et ajoute des légumes pour la satiété."
)
LOSE_MEDIUM_MESSAGE = (
    "Pas mal du tout. Pour optimiser la perte de poids, réduis un peu les "
    "aliments denses en calories ou augmente les légumes."
)
LOSE_HEAVY_MESSAGE = (
    "Repas un peu riche pour sécher. Tu peux alléger avec une portion plus "
    "petite de féculents et une protéine maigre."
)
MAINTAIN_MESSAGE = (
    "Repas globalement cohérent. Vise surtout la régularité et un bon "
    "équilibre protéines, fibres et glucides."
)
GAIN_MESSAGE = (
    "Bonne base pour prise de masse propre. Ajoute une collation protéinée "
    "si besoin pour atteindre ton total journalier."
)


def fallback_coach_message(kcal: int, goal: Goal) -> str:
    if goal == "perdre":
        if kcal <= 550:
            return LOSE_LIGHT_MESSAGE
        if kcal <= 800:
            return LOSE_MEDIUM_MESSAGE
        return LOSE_HEAVY_MESSAGE

    if goal == "maintenir":
        return MAINTAIN_MESSAGE

    return GAIN_MESSAGE
