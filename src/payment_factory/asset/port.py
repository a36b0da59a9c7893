"""Fungible asset port (abstract interface).

Payment instances settle in a fungible asset chosen by the store. The
factory only forwards the asset's identity (``payment_token``) to the
template; it never calls these operations itself. Adapters for a concrete
ledger implement this interface.
"""

from abc import ABC, abstractmethod

# Amounts are unsigned 256-bit integers.
MAX_AMOUNT = 2**256 - 1

# Address of a deployed FungibleAsset.
AssetAddress = str


def is_valid_amount(amount: int) -> bool:
    return isinstance(amount, int) and not isinstance(amount, bool) and 0 <= amount <= MAX_AMOUNT


class FungibleAsset(ABC):
    """Abstract fungible asset capability."""

    @abstractmethod
    def transfer(self, recipient: str, amount: int) -> bool:
        """Move ``amount`` from the caller to ``recipient``."""
        ...

    @abstractmethod
    def balance_of(self, account: str) -> int:
        """Current balance held by ``account``."""
        ...

    @abstractmethod
    def approve(self, spender: str, amount: int) -> bool:
        """Allow ``spender`` to move up to ``amount`` on the caller's behalf."""
        ...

    @abstractmethod
    def transfer_from(self, sender: str, recipient: str, amount: int) -> bool:
        """Move ``amount`` from ``sender`` to ``recipient`` using an allowance."""
        ...

    @abstractmethod
    def allowance(self, owner: str, spender: str) -> int:
        """Amount ``spender`` may still move on behalf of ``owner``."""
        ...
