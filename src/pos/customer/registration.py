"""Customer onboarding: command and handler."""

from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from pos.customer.customer import Customer
from pos.domain import pos


@pos.command(part_of="Customer")
class RegisterCustomer:
    """Register a customer with an opening balance."""

    customer_id = Identifier()
    name = String(required=True, max_length=100)
    balance = Float(default=0.0)


@pos.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(
            name=command.name,
            balance=command.balance,
            customer_id=command.customer_id,
        )
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)
