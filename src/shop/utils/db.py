"""Schema management for the relational providers configured on the shop domain."""

from protean.domain import Domain
from sqlalchemy import create_engine

_RDBMS_PROVIDERS = ("sqlite", "postgresql")


def _rdbms_providers(domain: Domain):
    for name, provider in domain.providers.items():
        if provider.conn_info["provider"] in _RDBMS_PROVIDERS:
            yield name, provider


def setup_db(domain: Domain):
    """Create tables for every aggregate and child entity of the domain."""
    with domain.domain_context():
        for name, provider in _rdbms_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])

            # Touching `_dao` builds the SQLAlchemy model for the element, which
            # registers its table on the provider metadata.
            for _, record in domain.registry.aggregates.items():
                if record.cls.meta_.provider == name:
                    domain.repository_for(record.cls)._dao  # noqa: B018

            for _, record in domain.registry.entities.items():
                if record.cls.meta_.provider == name:
                    domain.repository_for(record.cls)._dao  # noqa: B018

            provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop every table created by `setup_db`."""
    with domain.domain_context():
        for _, provider in _rdbms_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)


def reset_data(domain: Domain):
    """Wipe stored records without touching the schema."""
    for _, provider in domain.providers.items():
        provider._data_reset()
