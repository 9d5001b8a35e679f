"""Cart management: commands and handler for creating carts and adding products."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from pos.cart.cart import Cart
from pos.catalog.product import Product
from pos.domain import pos


@pos.command(part_of="Cart")
class CreateCart:
    """Open an empty cart, optionally tied to a customer."""

    customer_id = Identifier()


@pos.command(part_of="Cart")
class AddToCart:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@pos.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = Cart.create(customer_id=command.customer_id)
        current_domain.repository_for(Cart).add(cart)
        return str(cart.id)

    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        product = current_domain.repository_for(Product).get(command.product_id)
        cart.add(product, command.quantity)
        repo.add(cart)
