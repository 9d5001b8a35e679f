"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from pos.domain import pos


@pos.event(part_of="Cart")
class CartItemAdded:
    """Units of a product were added to the cart."""

    cart_id = Identifier(required=True)
    line_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)
