"""Shared BDD fixtures and step definitions for the Payment Factory domain."""

import pytest
from payment_factory.factory.creation import CreatePayment
from payment_factory.factory.deployment import DeployPaymentFactory
from payment_factory.factory.errors import PaymentFactoryError
from payment_factory.factory.factory import PaymentFactory
from payment_factory.factory.pausing import PausePaymentFactory, UnpausePaymentFactory
from payment_factory.factory.template import UpdateTemplateVersion
from payment_factory.projections.audit_log import audit_trail
from protean import current_domain
from pytest_bdd import given, parsers, then, when


def _process(command):
    return current_domain.process(command, asynchronous=False)


def _attempt(command, error):
    try:
        return _process(command)
    except PaymentFactoryError as exc:
        error["exc"] = exc
        return None


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for the captured rejection."""
    return {"exc": None}


@pytest.fixture()
def created():
    """Instance handles returned to each creator, in creation order."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a payment factory owned by "{owner}" with template version "{version}"'),
    target_fixture="factory_id",
)
def deployed_factory(owner, version, backend):
    return _process(DeployPaymentFactory(owner_id=owner, template_version=version))


@given(parsers.cfparse('"{caller}" updated the template version to "{version}"'))
def template_updated(factory_id, caller, version):
    _process(UpdateTemplateVersion(factory_id=factory_id, caller_id=caller, template_version=version))


@given(parsers.cfparse('"{caller}" created a payment for store "{store}"'))
def payment_created(factory_id, caller, store, created):
    handle = _process(CreatePayment(factory_id=factory_id, caller_id=caller, store_name=store))
    created.setdefault(caller, []).append(handle)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{caller}" updates the template version to "{version}"'))
def update_template(factory_id, caller, version, error):
    error["exc"] = None
    _attempt(
        UpdateTemplateVersion(factory_id=factory_id, caller_id=caller, template_version=version),
        error,
    )


@when(parsers.cfparse('"{caller}" creates a payment for store "{store}"'))
def create_payment(factory_id, caller, store, error, created):
    error["exc"] = None
    handle = _attempt(CreatePayment(factory_id=factory_id, caller_id=caller, store_name=store), error)
    if handle is not None:
        created.setdefault(caller, []).append(handle)


@when(parsers.cfparse('"{caller}" pauses the factory'))
def pause_factory(factory_id, caller, error):
    error["exc"] = None
    _attempt(PausePaymentFactory(factory_id=factory_id, caller_id=caller), error)


@when(parsers.cfparse('"{caller}" unpauses the factory'))
def unpause_factory(factory_id, caller, error):
    error["exc"] = None
    _attempt(UnpausePaymentFactory(factory_id=factory_id, caller_id=caller), error)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the command is rejected with "{error_name}"'))
def rejected_with(error, error_name):
    assert error["exc"] is not None
    assert type(error["exc"]).__name__ == error_name


@then(parsers.cfparse('the template version is "{version}"'))
def template_version_is(factory_id, version):
    factory = current_domain.repository_for(PaymentFactory).get(factory_id)
    assert factory.template_version == version


@then(parsers.cfparse('the ledger records version "{version}" for "{creator}"'))
def ledger_records(factory_id, version, creator, created):
    factory = current_domain.repository_for(PaymentFactory).get(factory_id)
    handle = created[creator][-1]
    assert factory.provenance_of(creator, handle) == version


@then(parsers.cfparse("the ledger holds {count:d} record"))
def ledger_holds(factory_id, count):
    factory = current_domain.repository_for(PaymentFactory).get(factory_id)
    assert len(factory.instances) == count


@then(parsers.cfparse("{count:d} PaymentCreated event was emitted"))
def creation_events(factory_id, count):
    entries = [e for e in audit_trail(factory_id) if e.event_type == "PaymentCreated"]
    assert len(entries) == count
