"""Receipt data handed to the presentation layer after a successful checkout."""

from dataclasses import dataclass

from pos.checkout.shipping import ShipmentReport


@dataclass(frozen=True)
class ReceiptLine:
    name: str
    quantity: int
    line_total: float


@dataclass(frozen=True)
class Receipt:
    """Amounts charged for one checkout, with line totals in cart order.

    ``shipment`` is None when nothing in the cart ships.
    """

    lines: tuple[ReceiptLine, ...]
    subtotal: float
    shipping_fee: float
    total: float
    remaining_balance: float
    shipment: ShipmentReport | None = None
