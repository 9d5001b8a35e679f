"""Checkout: validates a cart against live stock and the customer's balance, then commits.

A checkout runs as one all-or-nothing sequence:

    1. The cart must have lines.
    2. Every line is validated (expiry, current stock) while the subtotal and
       the per-unit shipment list are accumulated. Nothing is mutated yet.
    3. A flat shipping fee applies when any shippable weight is present.
    4. The customer must be able to afford subtotal + shipping.
    5. Stock is deducted for every line, then the customer is debited.
    6. The shipment report (if anything ships) and the receipt are built.

Any failure in steps 1-4 leaves products and customer untouched.
"""

from datetime import date

from protean.exceptions import ValidationError

from pos.checkout.receipt import Receipt, ReceiptLine
from pos.checkout.shipping import ShipmentItem, ShippingService, get_flat_shipping_fee
from pos.errors import EmptyCart, InsufficientBalance, OutOfStock, ProductExpired


class CheckoutService:
    """Checks out carts whose lines refer to ``products``.

    ``products`` is the product table the cart's product ids resolve
    against. The shipping fee is flat: it does not scale with weight.
    """

    def __init__(self, products, flat_shipping_fee=None, shipping_service=None):
        self.products = {str(product.id): product for product in products}
        self.flat_shipping_fee = get_flat_shipping_fee() if flat_shipping_fee is None else flat_shipping_fee
        self.shipping_service = shipping_service or ShippingService()

    def checkout(self, customer, cart, as_of=None) -> Receipt:
        as_of = as_of or date.today()

        if cart.is_empty():
            raise EmptyCart({"cart": ["Cart is empty"]})

        subtotal = 0.0
        total_weight = 0.0
        shipment = []
        receipt_lines = []
        to_deduct = []

        for product_id, quantity in cart.items().items():
            product = self._product(product_id)

            if product.is_expired(as_of):
                raise ProductExpired({"product": [f"Product expired: {product.name}"]})
            if product.stock_quantity < quantity:
                raise OutOfStock({"product": [f"Product out of stock: {product.name}"]})

            line_total = product.unit_price * quantity
            subtotal += line_total
            receipt_lines.append(ReceiptLine(name=product.name, quantity=quantity, line_total=line_total))
            to_deduct.append((product, quantity))

            if product.is_shippable:
                # One shipment row per unit, not per line
                for _ in range(quantity):
                    shipment.append(ShipmentItem(name=product.name, weight_kg=product.unit_weight_kg))
                    total_weight += product.unit_weight_kg

        shipping_fee = self.flat_shipping_fee if total_weight > 0 else 0.0
        total = subtotal + shipping_fee

        if customer.balance < total:
            raise InsufficientBalance(
                {"balance": [f"Insufficient balance: {customer.balance:.2f} available, {total:.2f} required"]}
            )

        for product, quantity in to_deduct:
            product.deduct_stock(quantity)
        customer.debit(total)

        report = self.shipping_service.build_shipment_summary(shipment) if shipment else None

        return Receipt(
            lines=tuple(receipt_lines),
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            total=total,
            remaining_balance=customer.balance,
            shipment=report,
        )

    def _product(self, product_id):
        try:
            return self.products[str(product_id)]
        except KeyError:
            raise ValidationError({"product_id": [f"Unknown product: {product_id}"]}) from None
