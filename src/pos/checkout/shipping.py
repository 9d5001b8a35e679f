"""Shipment aggregation: turns per-unit shippable items into a shipment notice.

Configuration:
    FLAT_SHIPPING_FEE   fee charged once per checkout that contains any
                        shippable weight (default 30.0)
"""

import os
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from protean.fields import Float, String

from pos.domain import pos

DEFAULT_FLAT_SHIPPING_FEE = 30.0


def get_flat_shipping_fee() -> float:
    """Return the configured flat shipping fee."""
    raw = os.environ.get("FLAT_SHIPPING_FEE")
    if raw is None or raw == "":
        return DEFAULT_FLAT_SHIPPING_FEE

    try:
        fee = float(raw)
    except ValueError:
        raise ValueError(f"Invalid FLAT_SHIPPING_FEE: {raw!r}") from None
    if fee < 0:
        raise ValueError(f"FLAT_SHIPPING_FEE cannot be negative: {raw!r}")
    return fee


@pos.value_object
class ShipmentItem:
    """One physical unit headed for shipment, copied from its product at checkout time."""

    name = String(required=True, max_length=100)
    weight_kg = Float(required=True, min_value=0.0)


@dataclass(frozen=True)
class ShipmentLine:
    name: str
    grams: int
    quantity: int = 1


@dataclass(frozen=True)
class ShipmentReport:
    """Per-unit shipment listing with the package weight in kilograms."""

    lines: tuple[ShipmentLine, ...]
    total_weight_kg: float


class ShippingService:
    def build_shipment_summary(self, items) -> ShipmentReport:
        lines = []
        total_weight = 0.0
        for item in items:
            lines.append(ShipmentLine(name=item.name, grams=_round_half_up(item.weight_kg * 1000, "1", int)))
            total_weight += item.weight_kg
        return ShipmentReport(lines=tuple(lines), total_weight_kg=_round_half_up(total_weight, "0.1", float))


def _round_half_up(value, exponent, cast):
    # Ties round away from zero, on the exact binary value of the float
    return cast(Decimal(value).quantize(Decimal(exponent), rounding=ROUND_HALF_UP))
