"""Factory audit log — ordered trail of every committed factory event.

Each entry carries a per-factory sequence number assigned in the order the
events were processed, so consumers can replay administrative and creation
activity exactly as it happened. Rejected commands leave no entry.
"""

from protean.core.projector import on
from protean.fields import DateTime, Identifier, Integer, String
from protean.utils.globals import current_domain

from payment_factory.domain import payment_factory
from payment_factory.factory.events import (
    OwnershipTransferred,
    PaymentCreated,
    PaymentFactoryDeployed,
    PaymentFactoryPaused,
    PaymentFactoryUnpaused,
    TemplateVersionUpdated,
)
from payment_factory.factory.factory import PaymentFactory


@payment_factory.projection
class FactoryAuditEntry:
    entry_id = String(identifier=True, required=True, max_length=100)
    factory_id = Identifier(required=True)
    sequence = Integer(required=True)
    event_type = String(required=True, max_length=50)
    actor_id = Identifier()
    detail = String(max_length=500)
    occurred_at = DateTime(required=True)


def _entries_for(factory_id) -> list[FactoryAuditEntry]:
    repo = current_domain.repository_for(FactoryAuditEntry)
    return repo._dao.query.filter(factory_id=str(factory_id)).all().items


def _append(factory_id, event_type, actor_id, detail, occurred_at) -> None:
    sequence = len(_entries_for(factory_id)) + 1
    current_domain.repository_for(FactoryAuditEntry).add(
        FactoryAuditEntry(
            entry_id=f"{factory_id}:{sequence:08d}",
            factory_id=str(factory_id),
            sequence=sequence,
            event_type=event_type,
            actor_id=str(actor_id) if actor_id else None,
            detail=detail,
            occurred_at=occurred_at,
        )
    )


@payment_factory.projector(projector_for=FactoryAuditEntry, aggregates=[PaymentFactory])
class FactoryAuditLogProjector:
    @on(PaymentFactoryDeployed)
    def on_deployed(self, event):
        _append(
            event.factory_id,
            "PaymentFactoryDeployed",
            event.owner_id,
            f"template_version={event.template_version}",
            event.deployed_at,
        )

    @on(PaymentCreated)
    def on_payment_created(self, event):
        _append(
            event.factory_id,
            "PaymentCreated",
            event.creator_id,
            f"instance_handle={event.instance_handle} template_version={event.template_version}",
            event.created_at,
        )

    @on(TemplateVersionUpdated)
    def on_template_version_updated(self, event):
        _append(
            event.factory_id,
            "TemplateVersionUpdated",
            event.updated_by,
            f"template_version={event.template_version} previous_version={event.previous_version}",
            event.updated_at,
        )

    @on(PaymentFactoryPaused)
    def on_paused(self, event):
        _append(event.factory_id, "PaymentFactoryPaused", event.account, None, event.paused_at)

    @on(PaymentFactoryUnpaused)
    def on_unpaused(self, event):
        _append(event.factory_id, "PaymentFactoryUnpaused", event.account, None, event.unpaused_at)

    @on(OwnershipTransferred)
    def on_ownership_transferred(self, event):
        _append(
            event.factory_id,
            "OwnershipTransferred",
            event.previous_owner_id,
            f"new_owner_id={event.new_owner_id}",
            event.transferred_at,
        )


def audit_trail(factory_id: str) -> list[FactoryAuditEntry]:
    """A factory's audit entries in processing order."""
    return sorted(_entries_for(factory_id), key=lambda e: e.sequence)
