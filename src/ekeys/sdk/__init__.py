from __future__ import annotations

from .client import EKeysClient

__all__ = ["EKeysClient"]
