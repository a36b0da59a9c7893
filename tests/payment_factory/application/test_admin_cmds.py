"""Application tests for owner-only factory administration."""

import pytest
from payment_factory.factory.deployment import DeployPaymentFactory
from payment_factory.factory.errors import (
    AlreadyPaused,
    InvalidTemplate,
    NotPaused,
    Unauthorized,
    ZeroValue,
)
from payment_factory.factory.factory import PaymentFactory
from payment_factory.factory.ownership import TransferOwnership
from payment_factory.factory.pausing import PausePaymentFactory, UnpausePaymentFactory
from payment_factory.factory.template import UpdateTemplateVersion
from protean import current_domain

OWNER = "0x0a11ce"
STRANGER = "0x0b0b"
NEW_OWNER = "0x0ca401"
V1 = "0x05f3a7c2d1e4b6a8"
V2 = "0x07d2b9e0a4c1f355"


def _deploy():
    return current_domain.process(
        DeployPaymentFactory(owner_id=OWNER, template_version=V1),
        asynchronous=False,
    )


def _process(command):
    return current_domain.process(command, asynchronous=False)


def _factory(factory_id):
    return current_domain.repository_for(PaymentFactory).get(factory_id)


class TestUpdateTemplateVersionFlow:
    def test_owner_updates_version(self):
        factory_id = _deploy()
        _process(UpdateTemplateVersion(factory_id=factory_id, caller_id=OWNER, template_version=V2))
        assert _factory(factory_id).template_version == V2

    def test_non_owner_rejected_and_registry_unchanged(self):
        factory_id = _deploy()
        with pytest.raises(Unauthorized):
            _process(UpdateTemplateVersion(factory_id=factory_id, caller_id=STRANGER, template_version=V2))
        assert _factory(factory_id).template_version == V1

    def test_zero_version_rejected(self):
        factory_id = _deploy()
        with pytest.raises(ZeroValue):
            _process(UpdateTemplateVersion(factory_id=factory_id, caller_id=OWNER, template_version="0x0"))
        assert _factory(factory_id).template_version == V1

    def test_missing_version_rejected(self):
        factory_id = _deploy()
        with pytest.raises(InvalidTemplate):
            _process(UpdateTemplateVersion(factory_id=factory_id, caller_id=OWNER))


class TestPauseFlow:
    def test_owner_pauses(self):
        factory_id = _deploy()
        _process(PausePaymentFactory(factory_id=factory_id, caller_id=OWNER))
        assert _factory(factory_id).is_paused is True

    def test_pause_twice_fails(self):
        factory_id = _deploy()
        _process(PausePaymentFactory(factory_id=factory_id, caller_id=OWNER))
        with pytest.raises(AlreadyPaused):
            _process(PausePaymentFactory(factory_id=factory_id, caller_id=OWNER))
        assert _factory(factory_id).is_paused is True

    def test_unpause_while_unpaused_fails(self):
        factory_id = _deploy()
        with pytest.raises(NotPaused):
            _process(UnpausePaymentFactory(factory_id=factory_id, caller_id=OWNER))

    def test_owner_unpauses(self):
        factory_id = _deploy()
        _process(PausePaymentFactory(factory_id=factory_id, caller_id=OWNER))
        _process(UnpausePaymentFactory(factory_id=factory_id, caller_id=OWNER))
        assert _factory(factory_id).is_paused is False

    def test_non_owner_cannot_pause(self):
        factory_id = _deploy()
        with pytest.raises(Unauthorized):
            _process(PausePaymentFactory(factory_id=factory_id, caller_id=STRANGER))
        assert _factory(factory_id).is_paused is False


class TestTransferOwnershipFlow:
    def test_owner_transfers(self):
        factory_id = _deploy()
        _process(TransferOwnership(factory_id=factory_id, caller_id=OWNER, new_owner_id=NEW_OWNER))
        assert _factory(factory_id).owner_id == NEW_OWNER

    def test_new_owner_can_administer(self):
        factory_id = _deploy()
        _process(TransferOwnership(factory_id=factory_id, caller_id=OWNER, new_owner_id=NEW_OWNER))
        _process(UpdateTemplateVersion(factory_id=factory_id, caller_id=NEW_OWNER, template_version=V2))
        assert _factory(factory_id).template_version == V2

    def test_non_owner_cannot_transfer(self):
        factory_id = _deploy()
        with pytest.raises(Unauthorized):
            _process(TransferOwnership(factory_id=factory_id, caller_id=STRANGER, new_owner_id=STRANGER))
        assert _factory(factory_id).owner_id == OWNER

    def test_transfer_to_zero_rejected(self):
        factory_id = _deploy()
        with pytest.raises(ZeroValue):
            _process(TransferOwnership(factory_id=factory_id, caller_id=OWNER, new_owner_id="0x0"))
        assert _factory(factory_id).owner_id == OWNER
