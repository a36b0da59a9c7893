"""Payment instance creation — command and handler.

The whole call is one unit of work: the pause gate is checked, the current
template version is read, the instantiation backend deploys the instance,
and only then is the provenance record written and PaymentCreated raised.
If instantiation fails nothing is persisted and nothing is retried; the
caller resubmits.

Store parameters are forwarded to the backend unvalidated. Validating them
is the template's job.
"""

from contextvars import ContextVar

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from payment_factory.domain import payment_factory
from payment_factory.factory.errors import InstantiationFailure, ReentrantCreation
from payment_factory.factory.factory import PaymentFactory
from payment_factory.instantiation import get_backend
from payment_factory.instantiation.port import InstanceParameters

logger = structlog.get_logger(__name__)

# Set while a backend is instantiating; a backend must not call back into
# the factory before the ledger write.
_instantiating: ContextVar[bool] = ContextVar("payment_factory_instantiating", default=False)


@payment_factory.command(part_of="PaymentFactory")
class CreatePayment:
    """Deploy a new payment instance from the factory's current template."""

    factory_id = Identifier(required=True)
    caller_id = Identifier(required=True)
    store_name = String(max_length=255)
    store_wallet_address = String(max_length=255)
    payment_token = String(max_length=255)


@payment_factory.command_handler(part_of=PaymentFactory)
class CreatePaymentHandler:
    @handle(CreatePayment)
    def create_payment(self, command):
        if _instantiating.get():
            raise ReentrantCreation("Payment creation cannot be re-entered during instantiation")

        repo = current_domain.repository_for(PaymentFactory)
        factory = repo.get(command.factory_id)
        factory.assert_can_create()

        template_version = factory.template_version
        parameters = InstanceParameters(
            store_name=command.store_name,
            store_wallet_address=command.store_wallet_address,
            payment_token=command.payment_token,
        )

        token = _instantiating.set(True)
        try:
            result = get_backend().instantiate(template_version, parameters)
        except ReentrantCreation:
            raise
        except Exception as exc:
            reason = str(exc) or type(exc).__name__
            self._log_failure(factory, command, template_version, reason)
            raise InstantiationFailure(reason) from exc
        finally:
            _instantiating.reset(token)

        if not result.success:
            self._log_failure(factory, command, template_version, result.failure_reason)
            raise InstantiationFailure(result.failure_reason or "Instantiation failed")

        factory.record_instance(
            creator_id=command.caller_id,
            instance_handle=result.instance_handle,
            template_version=template_version,
            store_name=command.store_name,
            store_wallet_address=command.store_wallet_address,
            payment_token=command.payment_token,
        )
        repo.add(factory)
        logger.info(
            "Payment instance created",
            factory_id=str(factory.id),
            caller_id=str(command.caller_id),
            instance_handle=result.instance_handle,
            template_version=template_version,
        )
        return result.instance_handle

    def _log_failure(self, factory, command, template_version, reason):
        logger.warning(
            "Payment instantiation failed",
            factory_id=str(factory.id),
            caller_id=str(command.caller_id),
            template_version=template_version,
            reason=reason,
        )
