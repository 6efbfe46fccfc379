"""Analytics resource."""

from __future__ import annotations

from notifica.config import RequestOptions
from notifica.models import (
    AnalyticsOverview,
    AnalyticsPeriod,
    ChannelAnalytics,
    Granularity,
    TemplateAnalytics,
    TimeseriesPoint,
)

from .base import Resource, unwrap, unwrap_list


class Analytics(Resource):
    """Delivery metrics over a time period."""

    async def overview(
        self, *, period: AnalyticsPeriod | None = None, options: RequestOptions | None = None
    ) -> AnalyticsOverview:
        response = await self._client.get("/analytics/overview", {"period": period}, options)
        return unwrap(response, AnalyticsOverview)

    async def by_channel(
        self, *, period: AnalyticsPeriod | None = None, options: RequestOptions | None = None
    ) -> list[ChannelAnalytics]:
        response = await self._client.get("/analytics/channels", {"period": period}, options)
        return unwrap_list(response, ChannelAnalytics)

    async def timeseries(
        self,
        *,
        period: AnalyticsPeriod | None = None,
        granularity: Granularity | None = None,
        options: RequestOptions | None = None,
    ) -> list[TimeseriesPoint]:
        query = {"period": period, "granularity": granularity}
        response = await self._client.get("/analytics/timeseries", query, options)
        return unwrap_list(response, TimeseriesPoint)

    async def top_templates(
        self,
        *,
        period: AnalyticsPeriod | None = None,
        limit: int | None = None,
        options: RequestOptions | None = None,
    ) -> list[TemplateAnalytics]:
        query = {"period": period, "limit": limit}
        response = await self._client.get("/analytics/templates", query, options)
        return unwrap_list(response, TemplateAnalytics)
