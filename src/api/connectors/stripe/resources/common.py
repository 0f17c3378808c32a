"""Tipos compartilhados pelos recursos Stripe."""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# Unix timestamp em segundos, como enviado pela API
Timestamp = int

Metadata = dict[str, str]


class StripeModel(BaseModel):
    """Base dos recursos: ignora campos que a API adicionar no futuro."""

    model_config = ConfigDict(extra="ignore")


class StripeList(StripeModel, Generic[T]):
    """Objeto ``list`` usado em coleções embutidas (ex.: charge.refunds)."""

    object: Literal["list"] = "list"
    data: list[T] = Field(default_factory=list)
    has_more: bool = False
    total_count: int | None = None
    url: str | None = None


class Deleted(StripeModel):
    """Resposta de DELETE: ``{"id": ..., "deleted": true}``."""

    id: str
    object: str | None = None
    deleted: bool = True
