"""Product aggregate: a catalog item with stock, optional expiry and optional shipping weight.

Products are seeded externally with fixed catalog data. The only state that
changes afterwards is ``stock_quantity``, and only through a committed
checkout.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, Float, Integer, String

from pos.catalog.events import StockDeducted
from pos.domain import pos


@pos.aggregate
class Product:
    name = String(required=True, max_length=100)
    unit_price = Float(required=True, min_value=0.0)
    stock_quantity = Integer(default=0, min_value=0)
    expiry = Date()  # None for products that never expire
    is_shippable = Boolean(default=False)
    unit_weight_kg = Float(default=0.0, min_value=0.0)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name,
        unit_price,
        stock_quantity=0,
        expiry=None,
        is_shippable=False,
        unit_weight_kg=0.0,
        product_id=None,
    ):
        """Create a catalog product.

        ``product_id`` is the stable product code carts refer to; one is
        generated when omitted.
        """
        attributes = {
            "name": name,
            "unit_price": unit_price,
            "stock_quantity": stock_quantity,
            "expiry": expiry,
            "is_shippable": is_shippable,
            "unit_weight_kg": unit_weight_kg if is_shippable else 0.0,
        }
        if product_id is not None:
            attributes["id"] = product_id
        return cls(**attributes)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def is_expired(self, as_of):
        """True when the product has an expiry date and ``as_of`` is past it."""
        if isinstance(as_of, datetime):
            as_of = as_of.date()
        return self.expiry is not None and as_of > self.expiry

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def deduct_stock(self, quantity):
        """Remove sold units from stock."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > self.stock_quantity:
            raise ValidationError(
                {"stock_quantity": [f"Cannot deduct {quantity} units, only {self.stock_quantity} in stock"]}
            )

        previous_quantity = self.stock_quantity
        self.stock_quantity = previous_quantity - quantity

        self.raise_(
            StockDeducted(
                product_id=str(self.id),
                name=self.name,
                quantity=quantity,
                previous_quantity=previous_quantity,
                new_quantity=self.stock_quantity,
                deducted_at=datetime.now(UTC),
            )
        )
