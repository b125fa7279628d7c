"""
tests/test_classifiers.py

Unit tests for the heuristic text classifiers: diet, state inference,
sweetness detection and ingredient tokenizing.
"""

from __future__ import annotations

import pytest

from regiondiet.classifiers import (
    classify_diet,
    infer_region,
    is_sweet,
    normalize_ingredient,
    normalize_region_text,
    tokenize_ingredients,
)
from regiondiet.regions import CANONICAL_REGIONS
from regiondiet.taxonomy import (
    CUISINE_REGION_RULES,
    NON_VEGETARIAN,
    UNKNOWN_DIET,
    VEGETARIAN,
)


# ---------------------------------------------------------------------------
# Diet
# ---------------------------------------------------------------------------


class TestClassifyDiet:
    def test_non_vegetarian_is_not_vegetarian(self) -> None:
        assert classify_diet("non-vegetarian") == NON_VEGETARIAN

    def test_egg_is_non_vegetarian(self) -> None:
        assert classify_diet("egg") == NON_VEGETARIAN
        assert classify_diet("Eggetarian") == NON_VEGETARIAN

    def test_vegetarian(self) -> None:
        assert classify_diet("Vegetarian") == VEGETARIAN

    @pytest.mark.parametrize("raw", [None, "", "Diabetic Friendly"])
    def test_unknown(self, raw) -> None:
        assert classify_diet(raw) == UNKNOWN_DIET


# ---------------------------------------------------------------------------
# State inference
# ---------------------------------------------------------------------------


class TestInferRegion:
    def test_normalizes_label_noise(self) -> None:
        assert normalize_region_text("Mangalorean Recipes!") == "mangalorean"
        assert normalize_region_text("  Kerala   Cuisine ") == "kerala"

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("Kerala Recipes", "Kerala"),
            ("Goan Recipes", "Goa"),
            ("Chettinad", "Tamil Nadu"),
            ("Udupi Recipes", "Karnataka"),
        ],
    )
    def test_known_labels(self, label, expected) -> None:
        assert infer_region(label) == expected

    def test_first_matching_rule_wins(self) -> None:
        # "hyderabadi" also contains "adi", which a later rule maps elsewhere.
        assert infer_region("Hyderabadi Recipes") == "Telangana"

    @pytest.mark.parametrize("label", [None, "", "Recipes", "Continental", "Italian Recipes"])
    def test_unresolvable(self, label) -> None:
        assert infer_region(label) is None

    def test_rule_regions_are_canonical(self) -> None:
        assert {rule.region for rule in CUISINE_REGION_RULES} <= CANONICAL_REGIONS


# ---------------------------------------------------------------------------
# Sweetness
# ---------------------------------------------------------------------------


class TestIsSweet:
    def test_course_mentions_dessert(self) -> None:
        assert is_sweet("Anything", "Dessert", [], "")

    def test_name_keyword(self) -> None:
        assert is_sweet("Gulab Jamun", "Snack", [], "")

    def test_raw_ingredient_keyword(self) -> None:
        assert is_sweet("Pongal", None, [], "Rice, Jaggery")

    def test_token_keyword(self) -> None:
        assert is_sweet("Pongal", None, ["brown sugar"], "")

    def test_plain_dish(self) -> None:
        assert not is_sweet("Plain Rice", "Main Course", ["rice", "salt"], "rice, salt")

    def test_multi_word_keyword_only_checked_against_raw_text(self) -> None:
        assert is_sweet("Toffee", None, [], "condensed milk")
        assert not is_sweet("Toffee", None, ["condensed milk"], "")


# ---------------------------------------------------------------------------
# Ingredients
# ---------------------------------------------------------------------------


class TestTokenizeIngredients:
    def test_splits_and_cleans(self) -> None:
        raw = "Onion (finely chopped), 2 Tomatoes, Salt to taste,, "
        assert tokenize_ingredients(raw) == ["onion", "tomatoes", "salt to taste"]

    def test_keeps_duplicates(self) -> None:
        assert tokenize_ingredients("salt, Salt") == ["salt", "salt"]

    @pytest.mark.parametrize("raw", [None, "", " , ( ) ,"])
    def test_empty(self, raw) -> None:
        assert tokenize_ingredients(raw) == []


class TestNormalizeIngredient:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("finely chopped onions", "onion"),
            ("turmeric powder", "turmeric"),
            ("haldi", "turmeric"),
            ("salt to taste", "salt"),
            ("coconut", "coconut"),
        ],
    )
    def test_strips_modifiers_and_folds_synonyms(self, token, expected) -> None:
        assert normalize_ingredient(token) == expected

    def test_all_modifiers_gives_empty(self) -> None:
        assert normalize_ingredient("finely chopped") == ""
