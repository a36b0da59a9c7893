"""PaymentFactory aggregate (CQRS) — versioned creation of payment instances.

The factory composes two independent state units as value objects:

- AccessControl holds the single owner identity and authorizes
  administrative calls.
- PauseGate is the circuit breaker that halts creation.

Alongside them it carries the template registry (``template_version``, only
the current value is kept) and the provenance ledger: one immutable
PaymentInstanceRecord per created instance, keyed by (creator, handle) and
stamped with the template version in effect at creation time. Records are
never updated or removed.
"""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, HasMany, Identifier, String, ValueObject

from payment_factory.domain import payment_factory
from payment_factory.factory.errors import (
    AlreadyPaused,
    InstanceRecordNotFound,
    InstantiationFailure,
    InvalidTemplate,
    NotPaused,
    Paused,
    Unauthorized,
    ZeroValue,
)
from payment_factory.factory.events import (
    OwnershipTransferred,
    PaymentCreated,
    PaymentFactoryDeployed,
    PaymentFactoryPaused,
    PaymentFactoryUnpaused,
    TemplateVersionUpdated,
)
from payment_factory.shared.zero import is_zero


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@payment_factory.value_object(part_of="PaymentFactory")
class AccessControl:
    """The single privileged owner of a factory."""

    owner_id = Identifier(required=True)

    def is_owner(self, caller_id: str | None) -> bool:
        return caller_id is not None and str(caller_id) == str(self.owner_id)

    def assert_only_owner(self, caller_id: str | None) -> None:
        if not self.is_owner(caller_id):
            raise Unauthorized(f"Caller {caller_id} is not the factory owner")


@payment_factory.value_object(part_of="PaymentFactory")
class PauseGate:
    """Binary circuit breaker guarding instance creation."""

    paused = Boolean(default=False)

    def assert_not_paused(self) -> None:
        if self.paused:
            raise Paused("Payment factory is paused")

    def engage(self) -> "PauseGate":
        if self.paused:
            raise AlreadyPaused("Payment factory is already paused")
        return PauseGate(paused=True)

    def release(self) -> "PauseGate":
        if not self.paused:
            raise NotPaused("Payment factory is not paused")
        return PauseGate(paused=False)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@payment_factory.entity(part_of="PaymentFactory")
class PaymentInstanceRecord:
    """Provenance of one created payment instance."""

    creator_id = Identifier(required=True)
    instance_handle = String(required=True, max_length=255)
    template_version = String(required=True, max_length=255)
    created_at = DateTime(required=True)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@payment_factory.aggregate
class PaymentFactory:
    access_control = ValueObject(AccessControl, required=True)
    pause_gate = ValueObject(PauseGate, required=True)
    template_version = String(required=True, max_length=255)
    instances = HasMany(PaymentInstanceRecord)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def deploy(cls, owner_id: str | None, template_version: str | None):
        """Deploy a new, unpaused factory owned by ``owner_id``."""
        if is_zero(owner_id):
            raise ZeroValue("Owner identity must be non-zero")
        if is_zero(template_version):
            raise ZeroValue("Template version must be non-zero")

        now = datetime.now(UTC)
        factory = cls(
            access_control=AccessControl(owner_id=owner_id),
            pause_gate=PauseGate(paused=False),
            template_version=template_version,
            created_at=now,
            updated_at=now,
        )
        factory.raise_(
            PaymentFactoryDeployed(
                factory_id=str(factory.id),
                owner_id=owner_id,
                template_version=template_version,
                deployed_at=now,
            )
        )
        return factory

    @property
    def owner_id(self) -> str:
        return str(self.access_control.owner_id)

    @property
    def is_paused(self) -> bool:
        return bool(self.pause_gate.paused)

    # -------------------------------------------------------------------
    # Ownership
    # -------------------------------------------------------------------
    def transfer_ownership(self, caller_id: str, new_owner_id: str | None) -> None:
        self.access_control.assert_only_owner(caller_id)
        if is_zero(new_owner_id):
            raise ZeroValue("New owner identity must be non-zero")

        previous_owner_id = self.owner_id
        now = datetime.now(UTC)
        self.access_control = AccessControl(owner_id=new_owner_id)
        self.updated_at = now
        self.raise_(
            OwnershipTransferred(
                factory_id=str(self.id),
                previous_owner_id=previous_owner_id,
                new_owner_id=new_owner_id,
                transferred_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Pause gate
    # -------------------------------------------------------------------
    def pause(self, caller_id: str) -> None:
        self.access_control.assert_only_owner(caller_id)
        now = datetime.now(UTC)
        self.pause_gate = self.pause_gate.engage()
        self.updated_at = now
        self.raise_(PaymentFactoryPaused(factory_id=str(self.id), account=caller_id, paused_at=now))

    def unpause(self, caller_id: str) -> None:
        self.access_control.assert_only_owner(caller_id)
        now = datetime.now(UTC)
        self.pause_gate = self.pause_gate.release()
        self.updated_at = now
        self.raise_(PaymentFactoryUnpaused(factory_id=str(self.id), account=caller_id, unpaused_at=now))

    def assert_can_create(self) -> None:
        self.pause_gate.assert_not_paused()

    # -------------------------------------------------------------------
    # Template registry
    # -------------------------------------------------------------------
    def update_template_version(self, caller_id: str, new_version: str | None) -> None:
        """Switch future creations to ``new_version``. Existing records keep theirs."""
        self.access_control.assert_only_owner(caller_id)
        if is_zero(new_version):
            raise InvalidTemplate("Template version must be non-zero")

        previous_version = self.template_version
        now = datetime.now(UTC)
        self.template_version = new_version
        self.updated_at = now
        self.raise_(
            TemplateVersionUpdated(
                factory_id=str(self.id),
                template_version=new_version,
                previous_version=previous_version,
                updated_by=caller_id,
                updated_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Provenance ledger
    # -------------------------------------------------------------------
    def _find_record(self, instance_handle: str) -> PaymentInstanceRecord | None:
        return next(
            (r for r in (self.instances or []) if r.instance_handle == instance_handle),
            None,
        )

    def record_instance(
        self,
        creator_id: str,
        instance_handle: str,
        template_version: str,
        store_name: str | None = None,
        store_wallet_address: str | None = None,
        payment_token: str | None = None,
    ) -> PaymentInstanceRecord:
        """Write the ledger entry for a freshly instantiated payment instance."""
        # Also guards callers that use the aggregate without the handler.
        self.pause_gate.assert_not_paused()
        if not instance_handle:
            raise InstantiationFailure("Instantiation returned no instance handle")
        if self._find_record(instance_handle) is not None:
            raise InstantiationFailure(f"Instance handle {instance_handle} was already issued")

        now = datetime.now(UTC)
        record = PaymentInstanceRecord(
            creator_id=creator_id,
            instance_handle=instance_handle,
            template_version=template_version,
            created_at=now,
        )
        self.add_instances(record)
        self.updated_at = now
        self.raise_(
            PaymentCreated(
                factory_id=str(self.id),
                creator_id=creator_id,
                instance_handle=instance_handle,
                template_version=template_version,
                store_name=store_name,
                store_wallet_address=store_wallet_address,
                payment_token=payment_token,
                created_at=now,
            )
        )
        return record

    def provenance_of(self, creator_id: str, instance_handle: str) -> str:
        """Template version a creator's instance was created with."""
        record = self._find_record(instance_handle)
        if record is None or str(record.creator_id) != str(creator_id):
            raise InstanceRecordNotFound(f"No payment instance {instance_handle} created by {creator_id}")
        return record.template_version

    def instances_created_by(self, creator_id: str) -> list[PaymentInstanceRecord]:
        return [r for r in (self.instances or []) if str(r.creator_id) == str(creator_id)]
