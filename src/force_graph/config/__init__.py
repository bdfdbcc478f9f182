"""Configuration helpers."""

from .settings import GraphSettings

__all__ = ["GraphSettings"]
