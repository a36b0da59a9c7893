"""Instantiation backend selection.

Provides get_backend() / set_backend() to swap implementations. The
FakeInstanceBackend is the default for development and testing.
"""

from payment_factory.instantiation.fake_adapter import FakeInstanceBackend
from payment_factory.instantiation.port import InstanceBackend

_current_backend: InstanceBackend | None = None


def get_backend() -> InstanceBackend:
    """Return the current instantiation backend. Defaults to FakeInstanceBackend."""
    global _current_backend
    if _current_backend is None:
        _current_backend = FakeInstanceBackend()
    return _current_backend


def set_backend(backend: InstanceBackend) -> None:
    """Override the active instantiation backend (useful for tests)."""
    global _current_backend
    _current_backend = backend


def reset_backend() -> None:
    """Reset to default backend."""
    global _current_backend
    _current_backend = None
