"""Ownership transfer — command and handler (owner only)."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from payment_factory.domain import payment_factory
from payment_factory.factory.factory import PaymentFactory

logger = structlog.get_logger(__name__)


@payment_factory.command(part_of="PaymentFactory")
class TransferOwnership:
    """Hand administrative control of a factory to another identity."""

    factory_id = Identifier(required=True)
    caller_id = Identifier(required=True)
    new_owner_id = Identifier()


@payment_factory.command_handler(part_of=PaymentFactory)
class TransferOwnershipHandler:
    @handle(TransferOwnership)
    def transfer_ownership(self, command):
        repo = current_domain.repository_for(PaymentFactory)
        factory = repo.get(command.factory_id)
        factory.transfer_ownership(
            caller_id=command.caller_id,
            new_owner_id=command.new_owner_id,
        )
        repo.add(factory)
        logger.info(
            "Factory ownership transferred",
            factory_id=str(factory.id),
            new_owner_id=factory.owner_id,
        )
