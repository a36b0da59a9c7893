"""Payment instances — directory of deployed instances per creator."""

from protean.core.projector import on
from protean.fields import DateTime, Identifier, String
from protean.utils.globals import current_domain

from payment_factory.domain import payment_factory
from payment_factory.factory.events import PaymentCreated
from payment_factory.factory.factory import PaymentFactory


@payment_factory.projection
class PaymentInstanceView:
    instance_handle = String(identifier=True, required=True, max_length=255)
    factory_id = Identifier(required=True)
    creator_id = Identifier(required=True)
    template_version = String(required=True, max_length=255)
    store_name = String(max_length=255)
    store_wallet_address = String(max_length=255)
    payment_token = String(max_length=255)
    created_at = DateTime()


@payment_factory.projector(projector_for=PaymentInstanceView, aggregates=[PaymentFactory])
class PaymentInstanceProjector:
    @on(PaymentCreated)
    def on_payment_created(self, event):
        current_domain.repository_for(PaymentInstanceView).add(
            PaymentInstanceView(
                instance_handle=event.instance_handle,
                factory_id=event.factory_id,
                creator_id=event.creator_id,
                template_version=event.template_version,
                store_name=event.store_name,
                store_wallet_address=event.store_wallet_address,
                payment_token=event.payment_token,
                created_at=event.created_at,
            )
        )


def instances_for_creator(factory_id: str, creator_id: str) -> list[PaymentInstanceView]:
    """All instances a creator deployed through a factory, oldest first."""
    repo = current_domain.repository_for(PaymentInstanceView)
    views = repo._dao.query.filter(factory_id=factory_id, creator_id=creator_id).all().items
    return sorted(views, key=lambda v: v.created_at)
