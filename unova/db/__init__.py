"""Database engine and persistence gateway."""
from unova.db.gateway import PersistenceGateway, get_gateway, get_session

__all__ = ["PersistenceGateway", "get_gateway", "get_session"]
