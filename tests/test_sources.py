"""
tests/test_sources.py

Row adapters for the incidence table and the three recipe table shapes.
"""

from __future__ import annotations

import json
import math

import pandas as pd
import pytest

from regiondiet.errors import SourceTableError
from regiondiet.sources import (
    incidence_row,
    legacy_dish_observation,
    load_manual_recipes,
    load_optional_table,
    load_table,
    manual_recipe_observation,
    scraped_recipe_observation,
    to_number,
)
from regiondiet.taxonomy import NON_VEGETARIAN, VEGETARIAN


class TestToNumber:
    @pytest.mark.parametrize(
        "raw, expected",
        [("12", 12), (" 7 ", 7), ("1.5", 1.5), (3, 3), (2.0, 2)],
    )
    def test_numbers(self, raw, expected) -> None:
        assert to_number(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "  ", "n/a", math.nan, "inf", True])
    def test_absent(self, raw) -> None:
        assert to_number(raw) is None

    def test_integral_values_become_int(self) -> None:
        assert isinstance(to_number("12"), int)


class TestIncidenceRow:
    def test_parses_years(self) -> None:
        row = incidence_row({"State/UT": " Orissa ", "2019": "10", "2020": "", "2021": "x", "2022": "13"})
        assert row.region == "Orissa"
        assert row.counts == {2019: 10, 2020: None, 2021: None, 2022: 13}

    def test_blank_state(self) -> None:
        assert incidence_row({"State/UT": "  ", "2019": "10"}) is None


class TestScrapedRecipe:
    def test_region_from_cuisine_label(self) -> None:
        observation = scraped_recipe_observation(
            {
                "recipe_name": "Chettinad Chicken Curry",
                "cuisine": "Chettinad",
                "diet": "Non Vegeterian",
                "prep_time_mins": "10",
                "cook_time_mins": "",
                "course": "Main Course",
                "translated_ingredients": "Chicken, Turmeric powder (haldi)",
            }
        )
        assert observation.region == "Tamil Nadu"
        assert observation.diet == NON_VEGETARIAN
        assert observation.prep_minutes == 10
        assert observation.cook_minutes is None
        assert observation.tokens == ("chicken", "turmeric powder")
        assert observation.sweet is False

    def test_falls_back_to_recipe_name(self) -> None:
        observation = scraped_recipe_observation(
            {"recipe_name": "Kerala Style Payasam", "cuisine": "Indian", "diet": "Vegetarian"}
        )
        assert observation.region == "Kerala"
        assert observation.sweet is True

    def test_unresolvable_region_dropped(self) -> None:
        row = {"recipe_name": "Pasta", "cuisine": "Continental", "course": "Dinner"}
        assert scraped_recipe_observation(row) is None

    def test_empty_name_dropped(self) -> None:
        assert scraped_recipe_observation({"recipe_name": "  ", "cuisine": "Kerala Recipes"}) is None


class TestLegacyDish:
    def test_flavor_profile_forces_sweet(self) -> None:
        observation = legacy_dish_observation(
            {
                "name": "Boondi",
                "ingredients": "Gram flour, ghee",
                "diet": "vegetarian",
                "flavor_profile": "sweet",
                "prep_time": "-1",
                "cook_time": "30",
                "state": "Rajasthan",
                "course": "snack",
            }
        )
        assert observation.sweet is True
        assert observation.diet == VEGETARIAN
        assert observation.prep_minutes == -1
        assert observation.cook_minutes == 30

    def test_sentinel_state_dropped(self) -> None:
        assert legacy_dish_observation({"name": "Dal", "state": "-1"}) is None

    def test_state_spelling_is_canonical(self) -> None:
        assert legacy_dish_observation({"name": "Dalma", "state": " Orissa "}).region == "Odisha"

    def test_negative_timings_are_kept(self) -> None:
        observation = legacy_dish_observation({"name": "Dal", "state": "Bihar", "prep_time": "-1", "cook_time": "-1"})
        assert observation.prep_minutes == -1
        assert observation.cook_minutes == -1

    def test_missing_state(self) -> None:
        assert legacy_dish_observation({"name": "Dal", "state": ""}) is None


class TestManualRecipe:
    def test_explicit_flag_overrides_detection(self) -> None:
        observation = manual_recipe_observation(
            {"state": "Lakshadweep", "recipe_name": "Kheer", "diet": "vegetarian", "is_sweet": False, "ingredients": ["rice", "sugar"]}
        )
        assert observation.sweet is False
        assert observation.tokens == ("rice", "sugar")

    def test_detection_without_flag(self) -> None:
        observation = manual_recipe_observation(
            {"state": "Ladakh", "recipe_name": "Khambir", "diet": "vegetarian", "ingredients": ["wheat flour", "honey"]}
        )
        assert observation.sweet is True
        assert observation.prep_minutes is None


class TestLoaders:
    def test_missing_required_table(self, tmp_path) -> None:
        with pytest.raises(SourceTableError):
            load_table(tmp_path / "absent.csv")

    def test_missing_column(self, tmp_path) -> None:
        path = tmp_path / "incidence.csv"
        pd.DataFrame({"State": ["Goa"]}).to_csv(path, index=False)
        with pytest.raises(SourceTableError) as excinfo:
            load_table(path, ["State/UT"])
        assert excinfo.value.missing_columns == ["State/UT"]

    def test_blank_cells_are_empty_strings(self, tmp_path) -> None:
        path = tmp_path / "incidence.csv"
        pd.DataFrame({"State/UT": ["Goa"], "2019": [None]}).to_csv(path, index=False)
        df = load_table(path, ["State/UT"])
        assert df.to_dict("records") == [{"State/UT": "Goa", "2019": ""}]

    def test_optional_table_absent(self, tmp_path) -> None:
        assert load_optional_table(tmp_path / "absent.csv") is None

    def test_manual_recipes(self, tmp_path) -> None:
        path = tmp_path / "manual.json"
        path.write_text(json.dumps([{"state": "Goa", "recipe_name": "X", "diet": "", "ingredients": []}]))
        assert len(load_manual_recipes(path)) == 1
        assert load_manual_recipes(tmp_path / "absent.json") == []

    def test_manual_recipes_must_be_a_list(self, tmp_path) -> None:
        path = tmp_path / "manual.json"
        path.write_text(json.dumps({"state": "Goa"}))
        with pytest.raises(SourceTableError):
            load_manual_recipes(path)
