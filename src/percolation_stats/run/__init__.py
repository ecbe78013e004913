"""Run configuration."""

from .config import RunConfig

__all__ = ['RunConfig']
