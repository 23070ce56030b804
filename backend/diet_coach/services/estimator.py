"""
Estimator - keyword-based calorie estimate and verdict for a meal description
"""
import logging
import math

from ..schemas.coach import EstimateResult, Verdict
from .nutrition import NUTRITION_TABLE, portion_kcal


logger = logging.getLogger(__name__)

DEFAULT_MEAL_KCAL = 550
VERY_GOOD_MAX_KCAL = 550
CORRECT_MAX_KCAL = 800


def classify_verdict(kcal: int) -> Verdict:
    if kcal <= VERY_GOOD_MAX_KCAL:
        return "Très bien"
    if kcal <= CORRECT_MAX_KCAL:
        return "Correct"
    return "À équilibrer"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def estimate_meal_kcal(meal_text: str) -> EstimateResult:
    """
    Estimate the calories of a free-text meal.

    Every table keyword found as a substring of the lower-cased text adds one
    default portion; quantities written by the user are ignored. A meal with
    no known keyword is counted as DEFAULT_MEAL_KCAL.
    """
    normalized = meal_text.lower()
    matched = [keyword for keyword in NUTRITION_TABLE if keyword in normalized]

    total = sum(portion_kcal(NUTRITION_TABLE[keyword]) for keyword in matched)
    if not matched:
        total = DEFAULT_MEAL_KCAL

    kcal = _round_half_up(total)
    logger.debug("Estimated %s kcal from keywords %s", kcal, matched)

    return EstimateResult(
        kcal=kcal,
        verdict=classify_verdict(kcal),
        matched_keyword_count=len(matched),
        matched_keywords=matched,
    )
