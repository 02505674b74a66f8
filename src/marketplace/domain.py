"""Marketplace domain: accounts, catalogue, ordering, reviews and messaging.

A single bounded context: checkout, category deletion and review
eligibility read across aggregates inside one unit of work.
"""

from protean.domain import Domain

from marketplace.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="marketplace")
logger = get_logger(__name__)

marketplace = Domain(name="marketplace")
logger.debug("Domain created", domain=marketplace.name)
