"""Cart checkout: command and handler.

Loads the cart, the paying customer and every product the cart refers to,
runs the checkout, and persists the mutated products and customer. A
rejected checkout is logged and re-raised; nothing is persisted.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Date, Identifier
from protean.utils.globals import current_domain

from pos.cart.cart import Cart
from pos.catalog.product import Product
from pos.checkout.service import CheckoutService
from pos.customer.customer import Customer
from pos.domain import pos
from pos.errors import CheckoutError
from pos.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


@pos.command(part_of="Cart")
class CheckoutCart:
    """Pay for every line in a cart from the customer's balance."""

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    as_of = Date()  # Optional: defaults to today


@pos.command_handler(part_of=Cart)
class CheckoutCartHandler:
    @handle(CheckoutCart)
    def checkout_cart(self, command):
        add_context(cart_id=str(command.cart_id), customer_id=str(command.customer_id))
        try:
            cart = current_domain.repository_for(Cart).get(command.cart_id)
            if cart.customer_id and str(cart.customer_id) != str(command.customer_id):
                logger.warning("Checkout rejected", error_type="CustomerMismatch")
                raise ValidationError({"customer_id": ["Cart belongs to a different customer"]})

            customer_repo = current_domain.repository_for(Customer)
            customer = customer_repo.get(command.customer_id)

            product_repo = current_domain.repository_for(Product)
            products = [product_repo.get(product_id) for product_id in cart.items()]

            try:
                receipt = CheckoutService(products).checkout(customer, cart, as_of=command.as_of)
            except CheckoutError as exc:
                logger.warning(
                    "Checkout rejected",
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                raise

            for product in products:
                product_repo.add(product)
            customer_repo.add(customer)

            logger.info(
                "Checkout completed",
                subtotal=receipt.subtotal,
                shipping_fee=receipt.shipping_fee,
                total=receipt.total,
                remaining_balance=receipt.remaining_balance,
                shipped_units=len(receipt.shipment.lines) if receipt.shipment else 0,
            )
            return receipt
        finally:
            clear_context()
