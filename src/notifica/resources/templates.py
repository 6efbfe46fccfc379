"""Templates resource."""

from __future__ import annotations

from notifica.config import RequestOptions
from notifica.models import Channel, Page, PreviewResult, Template, TemplateStatus, ValidationResult
from notifica.pagination import Paginator

from .base import Body, Resource, to_body, unwrap


class Templates(Resource):
    """Manage, preview and validate message templates."""

    async def create(self, params: Body, options: RequestOptions | None = None) -> Template:
        response = await self._client.post("/templates", to_body(params), options)
        return unwrap(response, Template)

    async def list(
        self,
        *,
        limit: int | None = None,
        cursor: str | None = None,
        channel: Channel | None = None,
        status: TemplateStatus | None = None,
        options: RequestOptions | None = None,
    ) -> Page[Template]:
        query = {"limit": limit, "cursor": cursor, "channel": channel, "status": status}
        return await self._client.list("/templates", query, options, item_type=Template)

    def list_all(
        self,
        *,
        limit: int | None = None,
        channel: Channel | None = None,
        status: TemplateStatus | None = None,
    ) -> Paginator[Template]:
        query = {"limit": limit, "channel": channel, "status": status}
        return self._client.paginate("/templates", query, item_type=Template)

    async def get(self, template_id: str, options: RequestOptions | None = None) -> Template:
        return await self._client.get_one(f"/templates/{template_id}", options, item_type=Template)

    async def update(
        self, template_id: str, params: Body, options: RequestOptions | None = None
    ) -> Template:
        response = await self._client.put(f"/templates/{template_id}", to_body(params), options)
        return unwrap(response, Template)

    async def delete(self, template_id: str, options: RequestOptions | None = None) -> None:
        await self._client.delete(f"/templates/{template_id}", options)

    async def preview(
        self, template_id: str, params: Body, options: RequestOptions | None = None
    ) -> PreviewResult:
        """Render a saved template with the given variables."""
        response = await self._client.post(
            f"/templates/{template_id}/preview", to_body(params), options
        )
        return unwrap(response, PreviewResult)

    async def preview_content(
        self, params: Body, options: RequestOptions | None = None
    ) -> PreviewResult:
        """Render arbitrary content without saving a template."""
        response = await self._client.post("/templates/preview", to_body(params), options)
        return unwrap(response, PreviewResult)

    async def validate(
        self, template_id: str, options: RequestOptions | None = None
    ) -> ValidationResult:
        response = await self._client.post(f"/templates/{template_id}/validate", None, options)
        return unwrap(response, ValidationResult)

    async def validate_content(
        self, params: Body, options: RequestOptions | None = None
    ) -> ValidationResult:
        response = await self._client.post("/templates/validate", to_body(params), options)
        return unwrap(response, ValidationResult)
