"""API routes package"""

from . import health, meals

__all__ = ["health", "meals"]
