"""Point-of-sale bounded context: Catalog, Customers, Carts and Checkout.

Products and customers are seeded externally. Carts collect product lines,
and the checkout validates a cart against live stock and the customer's
balance before committing stock deductions and the balance debit.
"""

from protean.domain import Domain

from pos.utils.logging import configure_logging

configure_logging()

pos = Domain(name="pos")
