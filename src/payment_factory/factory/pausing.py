"""Pause gate — commands and handlers (owner only)."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from payment_factory.domain import payment_factory
from payment_factory.factory.factory import PaymentFactory

logger = structlog.get_logger(__name__)


@payment_factory.command(part_of="PaymentFactory")
class PausePaymentFactory:
    """Halt payment instance creation."""

    factory_id = Identifier(required=True)
    caller_id = Identifier(required=True)


@payment_factory.command(part_of="PaymentFactory")
class UnpausePaymentFactory:
    """Resume payment instance creation."""

    factory_id = Identifier(required=True)
    caller_id = Identifier(required=True)


@payment_factory.command_handler(part_of=PaymentFactory)
class PauseGateHandler:
    @handle(PausePaymentFactory)
    def pause(self, command):
        repo = current_domain.repository_for(PaymentFactory)
        factory = repo.get(command.factory_id)
        factory.pause(caller_id=command.caller_id)
        repo.add(factory)
        logger.info("Payment factory paused", factory_id=str(factory.id))

    @handle(UnpausePaymentFactory)
    def unpause(self, command):
        repo = current_domain.repository_for(PaymentFactory)
        factory = repo.get(command.factory_id)
        factory.unpause(caller_id=command.caller_id)
        repo.add(factory)
        logger.info("Payment factory unpaused", factory_id=str(factory.id))
