"""Observability helpers.

This package emits deterministic phase logs for CLI runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
