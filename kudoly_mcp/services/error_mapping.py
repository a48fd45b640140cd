"""
Translate client failures into error outcomes.

Both orchestration services map backend codes the same way, differing
only in which codes they single out and the message they show for each.
A table of :class:`ErrorRule` entries describes those differences.
"""

from dataclasses import dataclass
from typing import Mapping

import structlog
from pydantic import ValidationError

from ..clients import KudolyAPIError
from ..clients.base import DEFAULT_ERROR_CODE, UNAUTHORIZED
from ..models import ErrorResult

logger = structlog.get_logger(__name__)

UNKNOWN_ERROR = "UNKNOWN_ERROR"
UNAUTHORIZED_MESSAGE = "Invalid or expired token."


@dataclass(frozen=True)
class ErrorRule:
    """How one backend code is shown to the caller.

    ``message`` is a ``str.format`` template; it receives the keyword
    arguments given to :func:`map_api_error` as context.
    """

    message: str
    include_projects: bool = False


def map_api_error(
    error: Exception,
    rules: Mapping[str, ErrorRule],
    *,
    pass_through_projects: bool = True,
    **context: str,
) -> ErrorResult:
    """
    Convert an exception raised during a backend call into an ErrorResult.

    Args:
        error: The exception caught around the client call
        rules: Backend code -> rule for the codes this caller singles out
        pass_through_projects: Whether codes without a rule keep the
            backend's available_projects list
        **context: Values for the message templates (project_name, ...)

    Returns:
        ErrorResult with a non-empty code and message. A 401 always maps
        to UNAUTHORIZED; exceptions other than KudolyAPIError map to
        UNKNOWN_ERROR.
    """
    if not isinstance(error, KudolyAPIError):
        logger.error("Unexpected error calling backend", error=str(error))
        return ErrorResult(
            code=UNKNOWN_ERROR,
            message=str(error) or type(error).__name__,
        )

    code = error.code if isinstance(error.code, str) and error.code else None
    code = code or DEFAULT_ERROR_CODE
    if code == UNAUTHORIZED or error.status_code == 401:
        return ErrorResult(code=UNAUTHORIZED, message=UNAUTHORIZED_MESSAGE)

    rule = rules.get(code)
    if rule is not None:
        message = rule.message.format(**context)
        include_projects = rule.include_projects
    else:
        message = error.message or "Request failed"
        include_projects = pass_through_projects

    try:
        return ErrorResult(
            code=code,
            message=message,
            available_projects=(
                error.available_projects if include_projects else None
            ),
        )
    except ValidationError as e:
        logger.warning("Malformed backend error", code=code, error=str(e))
        return ErrorResult(
            code=code if rule is not None else DEFAULT_ERROR_CODE,
            message=message if rule is not None else "Request failed",
        )
