"""Recursos de conta (Connect) e arquivos."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .common import Metadata, StripeModel, Timestamp


class Account(StripeModel):
    object: Literal["account"] = "account"
    id: str
    business_type: str | None = None
    charges_enabled: bool = False
    country: str | None = None
    created: Timestamp | None = None
    default_currency: str | None = None
    details_submitted: bool = False
    email: str | None = None
    metadata: Metadata = Field(default_factory=dict)
    payouts_enabled: bool = False
    type: str | None = None


class File(StripeModel):
    object: Literal["file"] = "file"
    id: str
    created: Timestamp | None = None
    filename: str | None = None
    purpose: str
    size: int
    type: str | None = None
    url: str | None = None
