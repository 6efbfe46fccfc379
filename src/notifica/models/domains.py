"""Sending domain models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from .common import NotificaModel

DomainStatus = Literal["pending", "verified", "failed"]


class DnsRecord(NotificaModel):
    name: str
    type: str
    value: str


class DomainDnsRecords(NotificaModel):
    txt: DnsRecord | None = None
    dkim: list[DnsRecord] | None = None
    spf: DnsRecord | None = None


class Domain(NotificaModel):
    """An email sending domain and the DNS records that verify it."""

    id: str
    domain: str
    status: DomainStatus
    dns_records: DomainDnsRecords | None = None
    verified_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DomainHealth(NotificaModel):
    domain_id: str
    dns_valid: bool
    dkim_valid: bool
    spf_valid: bool
    last_checked_at: datetime | None = None
    issues: list[str] = Field(default_factory=list)


class DomainAlert(NotificaModel):
    id: str
    domain_id: str
    alert_type: str
    message: str
    severity: str
    created_at: datetime | None = None
