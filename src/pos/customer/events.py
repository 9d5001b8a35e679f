"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Float, Identifier

from pos.domain import pos


@pos.event(part_of="Customer")
class BalanceDebited:
    """An amount was charged against the customer's balance."""

    customer_id = Identifier(required=True)
    amount = Float(required=True)
    previous_balance = Float(required=True)
    new_balance = Float(required=True)
    debited_at = DateTime(required=True)
