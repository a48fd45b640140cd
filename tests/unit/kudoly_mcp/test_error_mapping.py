"""Tests for mapping client failures into error outcomes"""

import httpx

from kudoly_mcp.clients import KudolyAPIError
from kudoly_mcp.services.error_mapping import ErrorRule, map_api_error

RULES = {
    "PROJECT_NOT_FOUND": ErrorRule(
        'Project "{project_name}" not found.', include_projects=True
    ),
    "TASK_NOT_FOUND": ErrorRule('Task "{task_name}" not found.'),
}


class TestMapApiError:
    def test_rule_formats_message_from_context(self):
        error = KudolyAPIError("raw", 404, "TASK_NOT_FOUND", ["p"])

        result = map_api_error(error, RULES, project_name="p", task_name="T")

        assert result.code == "TASK_NOT_FOUND"
        assert result.message == 'Task "T" not found.'
        assert result.available_projects is None

    def test_rule_can_carry_alternatives(self):
        error = KudolyAPIError("raw", 404, "PROJECT_NOT_FOUND", ["a", "b"])

        result = map_api_error(error, RULES, project_name="x")

        assert result.available_projects == ["a", "b"]

    def test_unauthorized_by_code(self):
        result = map_api_error(KudolyAPIError("raw", 200, "UNAUTHORIZED"), RULES)
        assert result.code == "UNAUTHORIZED"
        assert result.message == "Invalid or expired token."

    def test_unauthorized_by_status(self):
        result = map_api_error(KudolyAPIError("raw", 401, "PROJECT_NOT_FOUND"), RULES)
        assert result.code == "UNAUTHORIZED"

    def test_unmapped_code_passes_through(self):
        error = KudolyAPIError("Slow down", 429, "RATE_LIMITED", ["a"])

        result = map_api_error(error, RULES)

        assert result.to_dict() == {
            "type": "error",
            "code": "RATE_LIMITED",
            "message": "Slow down",
            "available_projects": ["a"],
        }

    def test_unmapped_code_can_drop_alternatives(self):
        error = KudolyAPIError("Slow down", 429, "RATE_LIMITED", ["a"])

        result = map_api_error(error, RULES, pass_through_projects=False)

        assert result.available_projects is None

    def test_missing_code_is_api_error(self):
        result = map_api_error(KudolyAPIError("Broken", 500), RULES)
        assert result.code == "API_ERROR"

    def test_non_api_error_is_unknown(self):
        result = map_api_error(httpx.ReadTimeout("timed out"), RULES)
        assert result.code == "UNKNOWN_ERROR"
        assert result.message == "timed out"

    def test_exception_without_message(self):
        result = map_api_error(RuntimeError(), RULES)
        assert result.code == "UNKNOWN_ERROR"
        assert result.message == "RuntimeError"

    def test_non_string_message_falls_back(self):
        error = KudolyAPIError({"detail": "bad"}, status_code=500)

        result = map_api_error(error, RULES)

        assert result.code == "API_ERROR"
        assert result.message == "Request failed"

    def test_non_string_code_is_api_error(self):
        error = KudolyAPIError("Broken", 500, code=42)

        result = map_api_error(error, RULES)

        assert result.code == "API_ERROR"
        assert result.message == "Broken"

    def test_malformed_alternatives_are_dropped(self):
        error = KudolyAPIError("raw", 404, "PROJECT_NOT_FOUND", [1, 2])

        result = map_api_error(error, RULES, project_name="x")

        assert result.code == "PROJECT_NOT_FOUND"
        assert result.message == 'Project "x" not found.'
        assert result.available_projects is None
