"""
Context variables for request tracing across the application.

The request tracing middleware fills these in for every HTTP request so that
log records and error responses can be correlated without passing IDs around.
"""

from contextvars import ContextVar

trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def set_trace_id(trace_id: str) -> None:
    """Set trace ID in context."""
    trace_id_var.set(trace_id)


def set_request_id(request_id: str) -> None:
    """Set request ID in context."""
    request_id_var.set(request_id)


def clear_request_context() -> None:
    """Reset both IDs once a request has been served."""
    trace_id_var.set("")
    request_id_var.set("")
