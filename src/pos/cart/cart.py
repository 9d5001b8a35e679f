"""Cart aggregate: the products a customer intends to buy.

Lines are keyed by the product's identifier rather than by the Product
object itself, so stock changes on a product never disturb the cart's
bookkeeping. The stock check on ``add`` is advisory: stock is shared and is
re-validated at checkout.
"""

from datetime import UTC, datetime
from types import MappingProxyType

from protean.fields import DateTime, HasMany, Identifier, Integer

from pos.cart.events import CartItemAdded
from pos.domain import pos
from pos.errors import InsufficientStock, InvalidQuantity


@pos.entity(part_of="Cart")
class CartLine:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@pos.aggregate
class Cart:
    customer_id = Identifier()
    lines = HasMany(CartLine)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id=None):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    def add(self, product, quantity):
        """Add ``quantity`` units of ``product``, accumulating onto an existing line.

        Only the quantity being added is compared against the product's
        current stock.
        """
        if quantity <= 0:
            raise InvalidQuantity({"quantity": ["Quantity must be positive"]})
        if quantity > product.stock_quantity:
            raise InsufficientStock(
                {
                    "quantity": [
                        f"Not enough stock for {product.name}: "
                        f"{product.stock_quantity} available, {quantity} requested"
                    ]
                }
            )

        now = datetime.now(UTC)
        existing = self._line_for(product.id)
        if existing:
            existing.quantity += quantity
            line = existing
        else:
            line = CartLine(product_id=product.id, quantity=quantity, added_at=now)
            self.add_lines(line)

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                line_id=str(line.id),
                product_id=str(product.id),
                quantity=quantity,
                line_quantity=line.quantity,
            )
        )

    def is_empty(self):
        return not self.lines

    def items(self):
        """Read-only view of product id → requested quantity, in the order lines were added."""
        return MappingProxyType({str(line.product_id): line.quantity for line in self.lines})

    def _line_for(self, product_id):
        return next((line for line in self.lines if str(line.product_id) == str(product_id)), None)
