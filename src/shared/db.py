"""Schema management for SQL-backed providers.

Memory providers need no schema; ``setup_db`` and ``drop_db`` skip them and
return the names of the providers they actually touched.
"""

import structlog
from protean.domain import Domain
from sqlalchemy import create_engine

logger = structlog.get_logger(__name__)

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for name, provider in domain.providers.items():
        if provider.conn_info["provider"] in _SQL_PROVIDERS:
            yield name, provider


def setup_db(domain: Domain) -> list[str]:
    """Create tables for every aggregate and entity of ``domain``."""
    created = []
    with domain.domain_context():
        for name, provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])

            # Touching the DAO registers the element's model with the provider metadata
            for records in (domain.registry.aggregates, domain.registry.entities):
                for _, record in records.items():
                    if record.cls.meta_.provider == name:
                        domain.repository_for(record.cls)._dao  # noqa: B018

            provider._metadata.create_all(engine)
            created.append(name)
            logger.info("Schema created", domain=domain.name, provider=name)
    return created


def drop_db(domain: Domain) -> list[str]:
    """Drop the tables created by ``setup_db``."""
    dropped = []
    with domain.domain_context():
        for name, provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
            dropped.append(name)
            logger.info("Schema dropped", domain=domain.name, provider=name)
    return dropped
