"""Customer aggregate: a named shopper with a spendable balance."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String

from pos.customer.events import BalanceDebited
from pos.domain import pos
from pos.errors import InsufficientBalance


@pos.aggregate
class Customer:
    name = String(required=True, max_length=100)
    balance = Float(default=0.0)
    registered_at = DateTime(default=datetime.now)

    @classmethod
    def register(cls, name, balance=0.0, customer_id=None):
        attributes = {"name": name, "balance": balance}
        if customer_id is not None:
            attributes["id"] = customer_id
        return cls(**attributes)

    def debit(self, amount):
        """Charge ``amount`` against the balance.

        The balance is never driven below zero: an amount larger than the
        balance is rejected before anything changes.
        """
        if amount < 0:
            raise ValidationError({"amount": ["Debit amount cannot be negative"]})
        if amount > self.balance:
            raise InsufficientBalance(
                {"balance": [f"Insufficient balance: {self.balance:.2f} available, {amount:.2f} required"]}
            )

        previous_balance = self.balance
        self.balance = previous_balance - amount

        self.raise_(
            BalanceDebited(
                customer_id=str(self.id),
                amount=amount,
                previous_balance=previous_balance,
                new_balance=self.balance,
                debited_at=datetime.now(UTC),
            )
        )
