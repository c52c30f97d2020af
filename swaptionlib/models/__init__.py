"""
Short-rate models.
"""

from .hull_white import HullWhite

__all__ = ["HullWhite"]
