"""Errors raised by the PaymentFactory aggregate and its command handlers.

Every error aborts the enclosing command: the unit of work is rolled back,
no ledger record is written and no event is committed.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class PaymentFactoryError(ValidationError):
    """Base class for payment factory rule violations."""

    key = "payment_factory"

    def __init__(self, message: str) -> None:
        super().__init__({self.key: [message]})


class Unauthorized(PaymentFactoryError):
    key = "caller_id"


class ZeroValue(PaymentFactoryError):
    key = "value"


class InvalidTemplate(ZeroValue):
    key = "template_version"


class AlreadyPaused(PaymentFactoryError):
    key = "paused"


class NotPaused(PaymentFactoryError):
    key = "paused"


class Paused(PaymentFactoryError):
    key = "paused"


class InstantiationFailure(PaymentFactoryError):
    key = "instantiation"


class ReentrantCreation(PaymentFactoryError):
    key = "instantiation"


class InstanceRecordNotFound(ObjectNotFoundError):
    """No ledger record exists for the (creator, instance handle) pair."""
