"""Realtime notification delivery adapter."""

from .directory import LocalConnectionDirectory

__all__ = ["LocalConnectionDirectory"]
