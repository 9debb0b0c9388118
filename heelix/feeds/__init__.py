from .entity_info import EntityInfoFeed

# Exporta também a base:
from .base import BaseFeed

__all__ = ["EntityInfoFeed", "BaseFeed"]
