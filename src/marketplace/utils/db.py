from protean.domain import Domain
from sqlalchemy import create_engine

from marketplace.utils.logging import get_logger

logger = get_logger(__name__)

_RDBMS_PROVIDERS = ("sqlite", "postgresql")


def _register_models(domain: Domain, provider_name: str) -> None:
    # Touching the repository's `_dao` forces the SQLAlchemy model of each
    #   aggregate to be built and attached to the provider's metadata.
    for _, record in domain.registry.aggregates.items():
        if record.cls.meta_.provider == provider_name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain):
    """Create tables for every relational provider configured on the domain"""
    with domain.domain_context():
        for name, provider in domain.providers.items():
            if provider.conn_info["provider"] in _RDBMS_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                _register_models(domain, name)
                provider._metadata.create_all(engine)
                logger.info("schema_created", provider=name)


def drop_db(domain: Domain):
    """Drop tables for every relational provider configured on the domain"""
    with domain.domain_context():
        for name, provider in domain.providers.items():
            if provider.conn_info["provider"] in _RDBMS_PROVIDERS:
                engine = create_engine(provider.conn_info["database_uri"])
                _register_models(domain, name)
                provider._metadata.drop_all(engine)
                logger.info("schema_dropped", provider=name)
