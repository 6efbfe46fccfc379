"""Delivery analytics models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from .common import NotificaModel

AnalyticsPeriod = Literal["1h", "24h", "7d", "30d"]
Granularity = Literal["hour", "day"]


class AnalyticsOverview(NotificaModel):
    total_sent: int
    total_delivered: int
    total_failed: int
    delivery_rate: float
    period: AnalyticsPeriod


class ChannelAnalytics(NotificaModel):
    channel: str
    sent: int
    delivered: int
    failed: int
    delivery_rate: float


class TimeseriesPoint(NotificaModel):
    timestamp: datetime
    sent: int
    delivered: int
    failed: int


class TemplateAnalytics(NotificaModel):
    template_id: str
    template_name: str
    sent: int
    delivered: int
    delivery_rate: float
