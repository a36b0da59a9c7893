"""Payment Factory domain API package."""

from payment_factory.api.routes import factory_router

__all__ = ["factory_router"]
