"""Tests for shipment aggregation and the flat shipping fee configuration."""

import pytest
from pos.checkout.shipping import (
    DEFAULT_FLAT_SHIPPING_FEE,
    ShipmentItem,
    ShipmentLine,
    ShippingService,
    get_flat_shipping_fee,
)


class TestShipmentItem:
    def test_items_compare_by_value(self):
        assert ShipmentItem(name="Cheese", weight_kg=0.2) == ShipmentItem(name="Cheese", weight_kg=0.2)


class TestBuildShipmentSummary:
    def test_one_line_per_item(self):
        items = [
            ShipmentItem(name="Cheese", weight_kg=0.2),
            ShipmentItem(name="Cheese", weight_kg=0.2),
            ShipmentItem(name="TV", weight_kg=7.5),
        ]
        report = ShippingService().build_shipment_summary(items)
        assert report.lines == (
            ShipmentLine(name="Cheese", grams=200),
            ShipmentLine(name="Cheese", grams=200),
            ShipmentLine(name="TV", grams=7500),
        )

    def test_every_line_is_a_single_unit(self):
        report = ShippingService().build_shipment_summary([ShipmentItem(name="Biscuits", weight_kg=0.7)])
        assert report.lines[0].quantity == 1

    def test_grams_rounded_to_nearest_integer(self):
        report = ShippingService().build_shipment_summary([ShipmentItem(name="Tea", weight_kg=0.1237)])
        assert report.lines[0].grams == 124

    def test_grams_round_half_up_on_ties(self):
        report = ShippingService().build_shipment_summary([ShipmentItem(name="Spice", weight_kg=0.0625)])
        assert report.lines[0].grams == 63

    def test_total_weight_rounds_half_up_on_ties(self):
        report = ShippingService().build_shipment_summary([ShipmentItem(name="Jar", weight_kg=0.25)])
        assert report.total_weight_kg == 0.3

    def test_total_weight_rounded_to_one_decimal(self):
        items = [ShipmentItem(name="Cheese", weight_kg=0.2), ShipmentItem(name="Biscuits", weight_kg=0.7)]
        report = ShippingService().build_shipment_summary(items)
        assert report.total_weight_kg == 0.9

    def test_empty_input(self):
        report = ShippingService().build_shipment_summary([])
        assert report.lines == ()
        assert report.total_weight_kg == 0.0


class TestFlatShippingFeeConfig:
    def test_default_fee(self, monkeypatch):
        monkeypatch.delenv("FLAT_SHIPPING_FEE", raising=False)
        assert get_flat_shipping_fee() == DEFAULT_FLAT_SHIPPING_FEE == 30.0

    def test_fee_from_environment(self, monkeypatch):
        monkeypatch.setenv("FLAT_SHIPPING_FEE", "45.5")
        assert get_flat_shipping_fee() == 45.5

    def test_invalid_fee_rejected(self, monkeypatch):
        monkeypatch.setenv("FLAT_SHIPPING_FEE", "cheap")
        with pytest.raises(ValueError):
            get_flat_shipping_fee()

    def test_negative_fee_rejected(self, monkeypatch):
        monkeypatch.setenv("FLAT_SHIPPING_FEE", "-1")
        with pytest.raises(ValueError):
            get_flat_shipping_fee()
