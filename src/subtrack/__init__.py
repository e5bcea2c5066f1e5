"""
Subtrack
Mock GraphQL endpoint and client for subscription tracking
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
