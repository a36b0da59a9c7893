"""Domain events for the PaymentFactory aggregate.

Events are raised inside the same unit of work that mutates the factory, so
they are committed together with the state change or not at all. Rejected
commands never produce events.
"""

from protean.fields import DateTime, Identifier, String

from payment_factory.domain import payment_factory


@payment_factory.event(part_of="PaymentFactory")
class PaymentFactoryDeployed:
    """A new factory was deployed with an owner and an initial template."""

    __version__ = 1

    factory_id = Identifier(required=True)
    owner_id = Identifier(required=True)
    template_version = String(required=True)
    deployed_at = DateTime(required=True)


@payment_factory.event(part_of="PaymentFactory")
class PaymentCreated:
    """A payment instance was deployed and recorded in the provenance ledger."""

    __version__ = 1

    factory_id = Identifier(required=True)
    creator_id = Identifier(required=True)
    instance_handle = String(required=True)
    template_version = String(required=True)
    store_name = String()
    store_wallet_address = String()
    payment_token = String()
    created_at = DateTime(required=True)


@payment_factory.event(part_of="PaymentFactory")
class TemplateVersionUpdated:
    """The owner switched the factory to a new template version."""

    __version__ = 1

    factory_id = Identifier(required=True)
    template_version = String(required=True)
    previous_version = String(required=True)
    updated_by = Identifier(required=True)
    updated_at = DateTime(required=True)


@payment_factory.event(part_of="PaymentFactory")
class PaymentFactoryPaused:
    """Creation was halted by the owner."""

    __version__ = 1

    factory_id = Identifier(required=True)
    account = Identifier(required=True)
    paused_at = DateTime(required=True)


@payment_factory.event(part_of="PaymentFactory")
class PaymentFactoryUnpaused:
    """Creation was resumed by the owner."""

    __version__ = 1

    factory_id = Identifier(required=True)
    account = Identifier(required=True)
    unpaused_at = DateTime(required=True)


@payment_factory.event(part_of="PaymentFactory")
class OwnershipTransferred:
    """Administrative control moved to a new owner."""

    __version__ = 1

    factory_id = Identifier(required=True)
    previous_owner_id = Identifier(required=True)
    new_owner_id = Identifier(required=True)
    transferred_at = DateTime(required=True)
