"""Application tests for factory deployment via domain.process()."""

import pytest
from payment_factory.factory.deployment import DeployPaymentFactory
from payment_factory.factory.errors import ZeroValue
from payment_factory.factory.factory import PaymentFactory
from protean import current_domain

OWNER = "0x0a11ce"
V1 = "0x05f3a7c2d1e4b6a8"


def _deploy(**overrides):
    defaults = {"owner_id": OWNER, "template_version": V1}
    defaults.update(overrides)
    return current_domain.process(DeployPaymentFactory(**defaults), asynchronous=False)


def _all_factories():
    return current_domain.repository_for(PaymentFactory)._dao.query.all().items


class TestDeployPaymentFactoryFlow:
    def test_deploy_returns_factory_id(self):
        factory_id = _deploy()
        assert factory_id is not None

    def test_deploy_persists_factory(self):
        factory_id = _deploy()
        factory = current_domain.repository_for(PaymentFactory).get(factory_id)
        assert str(factory.id) == factory_id
        assert factory.owner_id == OWNER
        assert factory.template_version == V1
        assert factory.is_paused is False

    def test_each_deployment_is_independent(self):
        first = _deploy()
        second = _deploy(template_version="0x0777")
        assert first != second
        repo = current_domain.repository_for(PaymentFactory)
        assert repo.get(first).template_version == V1
        assert repo.get(second).template_version == "0x0777"


class TestDeployPaymentFactoryRejections:
    def test_zero_template_version_rejected(self):
        with pytest.raises(ZeroValue):
            _deploy(template_version="0x0")

    def test_missing_template_version_rejected(self):
        with pytest.raises(ZeroValue):
            _deploy(template_version=None)

    def test_zero_owner_rejected(self):
        with pytest.raises(ZeroValue):
            _deploy(owner_id="0x0")

    def test_rejected_deployment_persists_nothing(self):
        with pytest.raises(ZeroValue):
            _deploy(template_version="0x0")
        assert _all_factories() == []
