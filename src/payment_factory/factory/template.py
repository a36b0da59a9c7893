"""Template version update — command and handler (owner only)."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from payment_factory.domain import payment_factory
from payment_factory.factory.factory import PaymentFactory

logger = structlog.get_logger(__name__)


@payment_factory.command(part_of="PaymentFactory")
class UpdateTemplateVersion:
    """Point future creations at a new template version."""

    factory_id = Identifier(required=True)
    caller_id = Identifier(required=True)
    template_version = String(max_length=255)


@payment_factory.command_handler(part_of=PaymentFactory)
class UpdateTemplateVersionHandler:
    @handle(UpdateTemplateVersion)
    def update_template_version(self, command):
        repo = current_domain.repository_for(PaymentFactory)
        factory = repo.get(command.factory_id)
        factory.update_template_version(
            caller_id=command.caller_id,
            new_version=command.template_version,
        )
        repo.add(factory)
        logger.info(
            "Template version updated",
            factory_id=str(factory.id),
            template_version=factory.template_version,
        )
