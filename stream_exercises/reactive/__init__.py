"""Reactive-style string stream exercises on top of asyncio."""

from __future__ import annotations
