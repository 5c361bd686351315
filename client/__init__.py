from client.auth import acquire_token
from client.http import CatalogClient

__all__ = ["acquire_token", "CatalogClient"]
