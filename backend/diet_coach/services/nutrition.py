"""
Nutrition Table - static keyword -> macros/kcal lookup with default portions
"""
from types import MappingProxyType

from ..schemas.coach import NutritionEntry


# keyword: (kcal/100g, protein, carbs, fat, default portion in grams)
_RAW_TABLE = {
    "poulet": (165, 31, 0, 3.6, 150),
    "riz": (130, 2.7, 28, 0.3, 150),
    "saumon": (208, 20, 0, 13, 140),
    "thon": (132, 29, 0, 1, 120),
    "oeuf": (143, 13, 1.1, 9.5, 60),
    "avocat": (160, 2, 9, 15, 100),
    "pain": (265, 9, 49, 3.2, 60),
    "fromage": (330, 20, 1.5, 27, 40),
    "yaourt": (63, 5.3, 7, 1.5, 125),
    "pomme": (52, 0.3, 14, 0.2, 150),
    "banane": (89, 1.1, 23, 0.3, 120),
    "salade": (18, 1.5, 3, 0.2, 80),
    "tomate": (18, 0.9, 3.9, 0.2, 100),
    "pates": (131, 5, 25, 1.1, 180),
    "pizza": (266, 11, 33, 10, 250),
    "burger": (295, 17, 30, 12, 220),
    "frites": (312, 3.4, 41, 15, 180),
    "chocolat": (546, 4.9, 61, 31, 30),
}

NUTRITION_TABLE: MappingProxyType = MappingProxyType({
    keyword: NutritionEntry(
        keyword=keyword,
        kcal_per_100g=kcal,
        protein=protein,
        carbs=carbs,
        fat=fat,
        default_portion_grams=portion,
    )
    for keyword, (kcal, protein, carbs, fat, portion) in _RAW_TABLE.items()
})


def portion_kcal(entry: NutritionEntry) -> float:
    """Calories of one default portion of the entry"""
    return entry.kcal_per_100g * entry.default_portion_grams / 100
