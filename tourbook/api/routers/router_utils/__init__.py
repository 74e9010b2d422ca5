"""Helpers shared by the routers."""

from .constants import API_PREFIX
from .error_handling import PAGES_PREFIX, handle_service_errors, moved_response
from .responses import map_many, map_one

__all__ = [
    "API_PREFIX",
    "PAGES_PREFIX",
    "handle_service_errors",
    "map_many",
    "map_one",
    "moved_response",
]
