"""Configurable fake instantiation backend for development and testing.

Simulates the deployment of payment instances without any external calls.
Handles are deterministic: they derive from the template version and a
running counter, so a test run always mints the same sequence, and a handle
is never issued twice by the same backend.
"""

import hashlib

from payment_factory.instantiation.port import (
    InstanceBackend,
    InstanceParameters,
    InstantiationResult,
)


class FakeInstanceBackend(InstanceBackend):
    """Configurable fake instantiation backend."""

    def __init__(self, salt: str = "payment-factory") -> None:
        self.salt = salt
        self.should_succeed: bool = True
        self.failure_reason: str = "Template constructor reverted"
        self.calls: list[dict] = []
        self.issued: list[str] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Template constructor reverted") -> None:
        """Configure backend behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def _next_handle(self, template_version: str) -> str:
        nonce = len(self.calls)
        digest = hashlib.sha256(f"{self.salt}:{template_version}:{nonce}".encode()).hexdigest()
        handle = f"0x{digest[:40]}"
        while handle in self.issued:
            digest = hashlib.sha256(digest.encode()).hexdigest()
            handle = f"0x{digest[:40]}"
        return handle

    def instantiate(
        self,
        template_version: str,
        parameters: InstanceParameters,
    ) -> InstantiationResult:
        self.calls.append(
            {
                "method": "instantiate",
                "template_version": template_version,
                "store_name": parameters.store_name,
                "store_wallet_address": parameters.store_wallet_address,
                "payment_token": parameters.payment_token,
            }
        )

        if not self.should_succeed:
            return InstantiationResult(success=False, failure_reason=self.failure_reason)

        handle = self._next_handle(template_version)
        self.issued.append(handle)
        return InstantiationResult(success=True, instance_handle=handle)
