"""Plain-text shipment notice and receipt, in the legacy till layout.

These functions only build lines; printing them is up to the caller.
"""

RULE = "----------------------"


def format_shipment_notice(report):
    lines = ["** Shipment notice **"]
    for line in report.lines:
        lines.append(f"{line.quantity}x {line.name:<12} {line.grams:.0f}g")
    lines.append(f"Total package weight {report.total_weight_kg:.1f}kg")
    return lines


def format_receipt(receipt):
    lines = ["** Checkout receipt **"]
    for line in receipt.lines:
        lines.append(f"{line.quantity}x {line.name:<12} {line.line_total:.0f}")
    lines.append(RULE)
    lines.append(f"Subtotal         {receipt.subtotal:.0f}")
    lines.append(f"Shipping         {receipt.shipping_fee:.0f}")
    lines.append(f"Amount           {receipt.total:.0f}")
    lines.append(f"Remaining Balance {receipt.remaining_balance:.0f}")
    return lines
