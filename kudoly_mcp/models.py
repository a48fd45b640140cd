"""
Request, response and outcome models for the Kudoly MCP server.

Request models mirror the backend endpoints:
- /daily-check-task
- /daily-save-report
- /daily-save-devlog

Outcome models are what the orchestration services hand back to the
MCP tools. They are plain values, never raised.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _as_id(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _as_names(value: Any) -> Optional[list[str]]:
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return value
    return None


def _flag(default: bool):
    return lambda value: default if value is None else value


# Response fields accept numeric ids, null flags and malformed optional
# values; absent and malformed values read as unset.
_Id = Annotated[Optional[str], BeforeValidator(_as_id)]
_Text = Annotated[Optional[str], BeforeValidator(_as_text)]
_Names = Annotated[Optional[list[str]], BeforeValidator(_as_names)]
_FlagOff = Annotated[bool, BeforeValidator(_flag(False))]
_FlagOn = Annotated[bool, BeforeValidator(_flag(True))]


class ReportStatus(str, Enum):
    """Status of the task a daily report refers to."""

    COMPLETE = "complete"
    PROGRESS = "progress"
    BLOCKED = "blocked"
    UPCOMING = "upcoming"
    QA = "qa"


class ClickUpStatus(BaseModel):
    """A status selectable when creating a ClickUp task.

    Keys beyond status and color (type, orderindex, ...) are kept as sent.
    """

    model_config = ConfigDict(extra="allow")

    status: str
    color: str


class _Request(BaseModel):
    def to_payload(self) -> dict[str, Any]:
        """JSON body for the backend; absent optional fields are not sent."""
        return self.model_dump(mode="json", exclude_none=True)


class _Response(BaseModel):
    model_config = ConfigDict(extra="ignore")


# Check Task Endpoint


class CheckTaskRequest(_Request):
    project_name: str = Field(..., min_length=1)
    task_name: str


class CheckTaskResponse(_Response):
    task_found: _FlagOff = False
    task_id: _Id = None
    project_id: _Id = None
    clickup_list_id: _Id = None
    available_statuses: Optional[list[ClickUpStatus]] = None
    code: _Text = None
    available_projects: _Names = None


# Save Report Endpoint


class SaveReportRequest(_Request):
    project_id: Optional[str] = None
    project_name: str = Field(..., min_length=1)
    clickup_list_id: Optional[str] = None
    clickup_task_id: Optional[str] = None
    task_name: str
    activities_string: str
    status: ReportStatus
    create_task: bool = False
    clickup_status: Optional[str] = None


class SaveReportResponse(_Response):
    success: _FlagOn = True
    daily_id: _Id = None
    task_created: _FlagOff = False


# Save Devlog Endpoint


class SaveDevlogRequest(_Request):
    project_name: str = Field(..., min_length=1)
    task_name: str
    devlog_content: str
    filename: str


class SaveDevlogResponse(_Response):
    success: _FlagOn = True
    message: _Text = None
    task_id: _Id = None
    task_name: _Text = None
    file_url: _Text = None
    filename: _Text = None


# Tool inputs


class SubmitDailyReportInput(BaseModel):
    """Arguments of the submit_daily_report tool."""

    project_name: Optional[str] = Field(
        None,
        description="Project name. Read from the local manifest when omitted",
    )
    task_name: Optional[str] = Field(None, description="ClickUp task name")
    activities_string: str = Field(..., description="Description of the work done")
    status: ReportStatus = Field(ReportStatus.PROGRESS, description="Task status")
    create_task: bool = Field(
        False, description="Create the ClickUp task when it does not exist"
    )
    clickup_status: Optional[str] = Field(
        None,
        description="ClickUp status for the new task (required if create_task=true)",
    )


class GenerateDevlogInput(BaseModel):
    """Arguments of the generate_devlog tool."""

    project_name: Optional[str] = Field(
        None,
        description="Project name. Read from the local manifest when omitted",
    )
    task_name: str = Field(..., description="ClickUp task that receives the DEVLOG")
    devlog_content: str = Field(..., description="DEVLOG content in markdown")


# Outcomes


class _Outcome(BaseModel):
    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class CheckTaskResult(_Outcome):
    """Task not found; waiting for the caller to decide on creating it."""

    type: Literal["check_task"] = "check_task"
    task_found: bool
    task_id: Optional[str] = None
    project_id: Optional[str] = None
    project_name: str
    clickup_list_id: Optional[str] = None
    available_statuses: Optional[list[ClickUpStatus]] = None
    message: str


class SaveReportResult(_Outcome):
    type: Literal["save_report"] = "save_report"
    success: bool
    daily_id: Optional[str] = None
    task_name: str
    task_created: bool = False
    project_name: str
    message: str


class DevlogSavedResult(_Outcome):
    type: Literal["success"] = "success"
    message: str
    task_name: str
    filename: str
    file_url: Optional[str] = None


class ErrorResult(_Outcome):
    type: Literal["error"] = "error"
    code: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    available_projects: Optional[list[str]] = None


SubmitDailyReportResult = Union[CheckTaskResult, SaveReportResult, ErrorResult]
GenerateDevlogResult = Union[DevlogSavedResult, ErrorResult]
