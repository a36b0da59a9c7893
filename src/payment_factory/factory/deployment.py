"""Factory deployment — command and handler.

Deploys a new PaymentFactory owned by ``owner_id`` and pointing at an
initial template version.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from payment_factory.domain import payment_factory
from payment_factory.factory.factory import PaymentFactory

logger = structlog.get_logger(__name__)


@payment_factory.command(part_of="PaymentFactory")
class DeployPaymentFactory:
    """Deploy a new payment factory."""

    owner_id = Identifier()
    template_version = String(max_length=255)


@payment_factory.command_handler(part_of=PaymentFactory)
class DeployPaymentFactoryHandler:
    @handle(DeployPaymentFactory)
    def deploy_payment_factory(self, command):
        factory = PaymentFactory.deploy(
            owner_id=command.owner_id,
            template_version=command.template_version,
        )
        current_domain.repository_for(PaymentFactory).add(factory)
        logger.info(
            "Payment factory deployed",
            factory_id=str(factory.id),
            owner_id=factory.owner_id,
            template_version=factory.template_version,
        )
        return str(factory.id)
