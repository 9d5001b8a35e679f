"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from pos.domain import pos


@pos.event(part_of="Product")
class StockDeducted:
    """Units of a product left the shelf through a completed checkout."""

    product_id = Identifier(required=True)
    name = String(required=True)
    quantity = Integer(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    deducted_at = DateTime(required=True)
