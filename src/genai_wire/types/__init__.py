from .base import WireModel

__all__ = ["WireModel"]
