"""Checkout failures.

Every failure is a local validation error: it aborts the current operation
before any state changes and carries a ``messages`` dict keyed by the
offending field, the same shape as protean's field-level errors.
"""

from protean.exceptions import ValidationError


class CheckoutError(ValidationError):
    """Base class for cart and checkout rejections."""


class InvalidQuantity(CheckoutError):
    """A non-positive quantity was added to a cart."""


class InsufficientStock(CheckoutError):
    """A cart addition asked for more units than are currently in stock."""


class EmptyCart(CheckoutError):
    """Checkout was attempted on a cart without lines."""


class ProductExpired(CheckoutError):
    """A cart line's product is past its expiry date at checkout time."""


class OutOfStock(CheckoutError):
    """A cart line asks for more units than remain in stock at checkout time."""


class InsufficientBalance(CheckoutError):
    """The customer's balance does not cover the amount due."""
