"""
BlogQL
GraphQL API over an in-memory blog graph of posts, users and comments
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
