"""Tests for the plain-text shipment notice and receipt layout."""

from pos.checkout.notices import RULE, format_receipt, format_shipment_notice
from pos.checkout.receipt import Receipt, ReceiptLine
from pos.checkout.shipping import ShipmentItem, ShipmentLine, ShipmentReport, ShippingService


def _report():
    return ShipmentReport(
        lines=(ShipmentLine(name="Cheese", grams=200), ShipmentLine(name="Cheese", grams=200)),
        total_weight_kg=0.4,
    )


class TestShipmentNotice:
    def test_layout(self):
        assert format_shipment_notice(_report()) == [
            "** Shipment notice **",
            "1x Cheese       200g",
            "1x Cheese       200g",
            "Total package weight 0.4kg",
        ]

    def test_tie_weights_round_up(self):
        report = ShippingService().build_shipment_summary([ShipmentItem(name="Jar", weight_kg=0.25)])
        assert format_shipment_notice(report) == [
            "** Shipment notice **",
            "1x Jar          250g",
            "Total package weight 0.3kg",
        ]


class TestReceipt:
    def test_layout(self):
        receipt = Receipt(
            lines=(
                ReceiptLine(name="Cheese", quantity=2, line_total=200.0),
                ReceiptLine(name="Book", quantity=1, line_total=50.0),
            ),
            subtotal=250.0,
            shipping_fee=30.0,
            total=280.0,
            remaining_balance=720.0,
            shipment=_report(),
        )
        assert format_receipt(receipt) == [
            "** Checkout receipt **",
            "2x Cheese       200",
            "1x Book         50",
            RULE,
            "Subtotal         250",
            "Shipping         30",
            "Amount           280",
            "Remaining Balance 720",
        ]

