"""BDD tests for payment factory governance."""

from pytest_bdd import scenarios

scenarios("features/factory_governance.feature")
