"""Catalog seeding: command and handler for registering products."""

from protean import handle
from protean.fields import Boolean, Date, Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from pos.catalog.product import Product
from pos.domain import pos


@pos.command(part_of="Product")
class RegisterProduct:
    """Add a product to the catalog with its opening stock."""

    product_id = Identifier()  # Optional product code
    name = String(required=True, max_length=100)
    unit_price = Float(required=True, min_value=0.0)
    stock_quantity = Integer(default=0, min_value=0)
    expiry = Date()
    is_shippable = Boolean(default=False)
    unit_weight_kg = Float(default=0.0, min_value=0.0)


@pos.command_handler(part_of=Product)
class RegisterProductHandler:
    @handle(RegisterProduct)
    def register_product(self, command):
        product = Product.create(
            name=command.name,
            unit_price=command.unit_price,
            stock_quantity=command.stock_quantity,
            expiry=command.expiry,
            is_shippable=command.is_shippable,
            unit_weight_kg=command.unit_weight_kg,
            product_id=command.product_id,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
