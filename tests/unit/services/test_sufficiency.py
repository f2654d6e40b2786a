"""Tests for stock sufficiency evaluation."""

from decimal import Decimal

import pytest

from src.core.entities import BottleStock, IngredientStock
from src.core.services.aggregator import BottleTally, MaterialTally
from src.core.services.sufficiency import SufficiencyEvaluator, is_sufficient, shortage


class TestHelpers:
    @pytest.mark.parametrize(
        "required, on_hand, expected",
        [
            ("10", "10", True),
            ("10.01", "10", False),
            ("9.99", "10", True),
            ("0", "0", True),
        ],
    )
    def test_is_sufficient_boundary(self, required, on_hand, expected):
        assert is_sufficient(Decimal(required), Decimal(on_hand)) is expected

    def test_shortage_never_negative(self):
        assert shortage(Decimal("3"), Decimal("5")) == 0
        assert shortage(Decimal("5"), Decimal("3")) == Decimal("2")


class TestEvaluateMaterials:
    def test_priced_from_stock(self, ingredient_stock):
        tallies = {"I1": MaterialTally(ingredient_id="I1", total_quantity=Decimal("2.0"))}

        [material] = SufficiencyEvaluator().evaluate_materials(tallies, ingredient_stock)

        assert material.name == "Tea Leaves"
        assert material.unit == "kg"
        assert material.total_cost == Decimal("200")
        assert material.is_sufficient is False
        assert material.shortage == Decimal("0.5")

    def test_exact_stock_is_sufficient(self):
        stock = {
            "I1": IngredientStock(ingredient_id="I1", current_stock=2, average_unit_price=1)
        }
        tallies = {"I1": MaterialTally(ingredient_id="I1", total_quantity=Decimal("2"))}

        [material] = SufficiencyEvaluator().evaluate_materials(tallies, stock)

        assert material.is_sufficient is True
        assert material.shortage == 0

    def test_missing_record_is_zero_stock_and_price(self):
        tallies = {
            "I9": MaterialTally(ingredient_id="I9", total_quantity=Decimal("1"), units={"g"})
        }

        [material] = SufficiencyEvaluator().evaluate_materials(tallies, {"I9": None})

        assert material.name == "I9"
        assert material.unit == "g"
        assert material.average_price == 0
        assert material.total_cost == 0
        assert material.is_sufficient is False
        assert material.shortage == Decimal("1")


class TestEvaluateBottles:
    def test_priced_from_stock(self, bottle_stock):
        tallies = {
            "B250": BottleTally(
                bottle_type_id="B250", size="250 ml", capacity_ml=Decimal("250"), total_quantity=12
            )
        }

        [bottle] = SufficiencyEvaluator().evaluate_bottles(tallies, bottle_stock)

        assert bottle.total_cost == Decimal("24")
        assert bottle.current_stock == Decimal("10")
        assert bottle.is_sufficient is False
        assert bottle.shortage == Decimal("2")

    def test_missing_record_is_insufficient_even_for_zero_need(self):
        tallies = {"BX": BottleTally(bottle_type_id="BX", total_quantity=0)}

        [bottle] = SufficiencyEvaluator().evaluate_bottles(tallies, {})

        assert bottle.is_sufficient is False
        assert bottle.unit_price == 0

    def test_sufficient_stock(self):
        stock = {"B1": BottleStock(bottle_type_id="B1", current_stock=5, unit_price=1)}
        tallies = {"B1": BottleTally(bottle_type_id="B1", total_quantity=5)}

        [bottle] = SufficiencyEvaluator().evaluate_bottles(tallies, stock)

        assert bottle.is_sufficient is True
