"""OpenTelemetry instrumentation for MCP tools."""

import asyncio
import functools
import json
from typing import Any, Callable, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

# Type variable for generic decorator
F = TypeVar("F", bound=Callable[..., Any])


def _set_params(span: Span, args: tuple, kwargs: dict) -> None:
    params_dict = {"args": args, "kwargs": kwargs}
    try:
        span.set_attribute("mcp.params", json.dumps(params_dict, default=str))
    except (TypeError, ValueError):
        # Fallback to string representation
        span.set_attribute("mcp.params", str(params_dict))


def _record_result(span: Span, result: Any) -> None:
    """Tag the span with the outcome type, and the code of error outcomes."""
    if isinstance(result, dict):
        if "type" in result:
            span.set_attribute("mcp.result.type", str(result["type"]))
        if result.get("code"):
            span.set_attribute("mcp.result.code", str(result["code"]))
    span.set_status(Status(StatusCode.OK))


def trace_mcp_tool(tool_name: str) -> Callable[[F], F]:
    """
    Decorator to add OpenTelemetry tracing to MCP tools.

    Creates a span ``mcp.tool.<tool_name>`` with attributes:
    - mcp.tool: Tool name
    - mcp.params: Tool parameters (JSON serialized)
    - mcp.result.type: Outcome type if the result is a dict with "type"
    - mcp.result.code: Error code if the result carries one

    Error outcomes are ordinary return values, so the span status is only
    ERROR when the tool itself raises.

    Example:
        @trace_mcp_tool("submit_daily_report")
        async def submit_daily_report_tool(...):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            # Get tracer dynamically to support test fixtures
            tracer = trace.get_tracer(__name__)

            with tracer.start_as_current_span(f"mcp.tool.{tool_name}") as span:
                span.set_attribute("mcp.tool", tool_name)
                _set_params(span, args, kwargs)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    raise
                _record_result(span, result)
                return result

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            tracer = trace.get_tracer(__name__)

            with tracer.start_as_current_span(f"mcp.tool.{tool_name}") as span:
                span.set_attribute("mcp.tool", tool_name)
                _set_params(span, args, kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    raise
                _record_result(span, result)
                return result

        # Return appropriate wrapper based on function type
        if asyncio.iscoroutinefunction(func):
            return async_wrapper  # type: ignore
        else:
            return sync_wrapper  # type: ignore

    return decorator
