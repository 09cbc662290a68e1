"""REST access to the polygon.io API."""

from .client import RESTClient
from .endpoints import ENDPOINTS, Endpoint, get_endpoint

__all__ = ["ENDPOINTS", "Endpoint", "RESTClient", "get_endpoint"]
