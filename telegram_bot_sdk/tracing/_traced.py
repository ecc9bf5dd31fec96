import inspect
import json
import logging
from functools import wraps
from typing import Any, Callable, Dict, Optional

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

logger = logging.getLogger(__name__)

_tracer_instance: Optional[trace.Tracer] = None


def get_tracer() -> trace.Tracer:
    """Lazily initializes and returns the tracer instance."""
    global _tracer_instance
    if _tracer_instance is None:
        logger.debug("Initializing tracer instance.")
        _tracer_instance = trace.get_tracer("telegram_bot_sdk")
    return _tracer_instance


def _default_input_processor(inputs):
    """Default input processor that doesn't log any actual input data."""
    return {"redacted": "Input data not logged for privacy/security"}


def _format_args(
    signature: inspect.Signature, *args: Any, **kwargs: Any
) -> Dict[str, Any]:
    bound = signature.bind_partial(*args, **kwargs)
    bound.apply_defaults()
    return {name: value for name, value in bound.arguments.items() if name != "self"}


def traced(
    name: Optional[str] = None,
    run_type: Optional[str] = None,
    input_processor: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None,
):
    """Wrap a function call in an OpenTelemetry span.

    Inputs are recorded through ``input_processor``; without one they are
    redacted. Exceptions are recorded on the span and re-raised unchanged.

    Args:
        name (Optional[str]): Span name. Defaults to the function name.
        run_type (Optional[str]): Recorded as the ``run_type`` attribute.
        input_processor: Maps the bound arguments to what is safe to record.
    """
    processor = input_processor or _default_input_processor

    def decorator(func):
        trace_name = name if name is not None else func.__name__
        signature = inspect.signature(func)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            with get_tracer().start_as_current_span(trace_name) as span:
                span.set_attribute("span_type", "function_call_sync")
                if run_type is not None:
                    span.set_attribute("run_type", run_type)

                inputs = processor(_format_args(signature, *args, **kwargs))
                span.set_attribute("inputs", json.dumps(inputs, default=str))
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(
                        Status(StatusCode.ERROR, str(e))
                    )
                    raise

        return sync_wrapper

    return decorator
