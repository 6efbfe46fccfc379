"""Workflow and workflow run models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from .common import NotificaModel

WorkflowRunStatus = Literal["pending", "running", "completed", "failed", "cancelled"]


class Workflow(NotificaModel):
    """A versioned sequence of send/delay/fallback steps.

    Steps are kept as plain dicts keyed by ``type`` ("send", "delay",
    "fallback").
    """

    id: str
    slug: str
    name: str
    steps: list[dict[str, Any]] = Field(default_factory=list)
    version: int = 1
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StepResult(NotificaModel):
    """Result of executing one workflow step."""

    step_index: int
    step_type: str
    status: str
    result: dict[str, Any] | None = None
    executed_at: datetime | None = None


class WorkflowRun(NotificaModel):
    """One execution of a workflow for a recipient."""

    id: str
    workflow_id: str
    workflow_slug: str | None = None
    workflow_version: int | None = None
    status: WorkflowRunStatus
    recipient: str
    data: dict[str, Any] | None = None
    step_results: list[StepResult] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
