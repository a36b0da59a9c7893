"""Payment Factory bounded context — versioned payment instance creation.

Deploys payment instances from the current template version, keeps a
provenance ledger of who created which instance with which version, and
gates creation behind an owner-controlled pause switch.
"""

from protean.domain import Domain

from payment_factory.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

payment_factory = Domain(name="payment_factory")
