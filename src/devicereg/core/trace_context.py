"""Trace id context variable for logging"""

import contextvars

# Correlates every log line emitted while handling one registration flow
trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "trace_id", default=None
)
