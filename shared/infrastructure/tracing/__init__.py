"""Tracing module: contexto de trace e spans logados."""
from .context import (
    generate_trace_id,
    generate_span_id,
    set_trace_context,
    get_trace_context,
    start_trace,
    clear_trace_context,
)
from .decorators import log_span

__all__ = [
    "generate_trace_id",
    "generate_span_id",
    "set_trace_context",
    "get_trace_context",
    "start_trace",
    "clear_trace_context",
    "log_span",
]
