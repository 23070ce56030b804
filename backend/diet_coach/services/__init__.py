from .estimator import estimate_meal_kcal, classify_verdict
from .coach_chain import CoachChain, build_coach_chain

__all__ = ["estimate_meal_kcal", "classify_verdict", "CoachChain", "build_coach_chain"]
