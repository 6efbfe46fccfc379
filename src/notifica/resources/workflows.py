"""Workflows resource."""

from __future__ import annotations

from notifica.config import RequestOptions
from notifica.models import Page, Workflow, WorkflowRun, WorkflowRunStatus
from notifica.pagination import Paginator

from .base import Body, Resource, to_body, unwrap


class Workflows(Resource):
    """Multi-step notification workflows and their runs."""

    async def create(self, params: Body, options: RequestOptions | None = None) -> Workflow:
        response = await self._client.post("/workflows", to_body(params), options)
        return unwrap(response, Workflow)

    async def list(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        options: RequestOptions | None = None,
    ) -> Page[Workflow]:
        query = {"limit": limit, "cursor": cursor}
        return await self._client.list("/workflows", query, options, item_type=Workflow)

    def list_all(self, *, limit: int | None = None) -> Paginator[Workflow]:
        return self._client.paginate("/workflows", {"limit": limit}, item_type=Workflow)

    async def get(self, workflow_id: str, options: RequestOptions | None = None) -> Workflow:
        return await self._client.get_one(f"/workflows/{workflow_id}", options, item_type=Workflow)

    async def update(
        self, workflow_id: str, params: Body, options: RequestOptions | None = None
    ) -> Workflow:
        response = await self._client.put(f"/workflows/{workflow_id}", to_body(params), options)
        return unwrap(response, Workflow)

    async def delete(self, workflow_id: str, options: RequestOptions | None = None) -> None:
        await self._client.delete(f"/workflows/{workflow_id}", options)

    async def trigger(
        self, slug: str, params: Body, options: RequestOptions | None = None
    ) -> WorkflowRun:
        """Start a run of the workflow identified by ``slug``.

        Example:
            ```python
            run = await notifica.workflows.trigger(
                "welcome-flow",
                {"recipient": "+5511999999999", "data": {"name": "João"}},
            )
            ```
        """
        response = await self._client.post(f"/workflows/{slug}/trigger", to_body(params), options)
        return unwrap(response, WorkflowRun)

    # Runs

    async def list_runs(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        workflow_id: str | None = None,
        status: WorkflowRunStatus | None = None,
        options: RequestOptions | None = None,
    ) -> Page[WorkflowRun]:
        query = {"limit": limit, "cursor": cursor, "workflow_id": workflow_id, "status": status}
        return await self._client.list("/workflow-runs", query, options, item_type=WorkflowRun)

    async def get_run(self, run_id: str, options: RequestOptions | None = None) -> WorkflowRun:
        return await self._client.get_one(
            f"/workflow-runs/{run_id}", options, item_type=WorkflowRun
        )

    async def cancel_run(self, run_id: str, options: RequestOptions | None = None) -> WorkflowRun:
        response = await self._client.post(f"/workflow-runs/{run_id}/cancel", None, options)
        return unwrap(response, WorkflowRun)
