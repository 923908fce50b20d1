"""Telemetry and observability helpers.

This package emits run events for deterministic auditing.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
