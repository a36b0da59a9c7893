"""Instantiation backend port (abstract interface).

The factory never deploys payment instances itself: it hands the current
template version and the caller's parameters to an InstanceBackend, which
returns a freshly minted, globally unique instance handle or a failure.
Adapters can be swapped without touching domain or application code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from payment_factory.asset.port import AssetAddress


@dataclass(frozen=True)
class InstanceParameters:
    """Constructor arguments forwarded, unvalidated, to the payment template.

    ``payment_token`` names the FungibleAsset the instance settles in.
    """

    store_name: str | None = None
    store_wallet_address: str | None = None
    payment_token: AssetAddress | None = None


@dataclass(frozen=True)
class InstantiationResult:
    """Outcome of an instantiation attempt."""

    success: bool
    instance_handle: str | None = None
    failure_reason: str | None = None


class InstanceBackend(ABC):
    """Abstract instantiation mechanism."""

    @abstractmethod
    def instantiate(
        self,
        template_version: str,
        parameters: InstanceParameters,
    ) -> InstantiationResult:
        """Create a new payment instance from ``template_version``."""
        ...
