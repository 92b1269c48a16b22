from __future__ import annotations

from .keyframes import mount_keyframes_api

__all__ = ["mount_keyframes_api"]
