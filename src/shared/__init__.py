"""Shared utilities and helpers."""
from shared.diagnostics import (
    log_memory_usage,
    log_thread_status,
    log_timing,
)
from shared.errors import InvalidArgumentError, TriangulationError
from shared.progress import ConsoleProgress

__all__ = [
    'ConsoleProgress',
    'InvalidArgumentError',
    'TriangulationError',
    'log_memory_usage',
    'log_thread_status',
    'log_timing',
]
