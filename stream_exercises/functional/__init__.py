"""Functional programming exercises built on plain callables and closures."""

from __future__ import annotations
