"""Recursos de pagamento: cobranças, reembolsos, disputas, repasses."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from .common import Metadata, StripeList, StripeModel, Timestamp


class Refund(StripeModel):
    object: Literal["refund"] = "refund"
    id: str
    amount: int
    charge: str | None = None
    created: Timestamp | None = None
    currency: str
    metadata: Metadata = Field(default_factory=dict)
    reason: str | None = None
    status: str | None = None


class Charge(StripeModel):
    """Cobrança (``object: charge``)."""

    object: Literal["charge"] = "charge"
    id: str
    amount: int
    amount_refunded: int = 0
    balance_transaction: str | None = None
    captured: bool = False
    created: Timestamp | None = None
    currency: str
    customer: str | None = None
    description: str | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    paid: bool = False
    receipt_email: str | None = None
    refunded: bool = False
    refunds: StripeList[Refund] | None = None
    status: str | None = None


class Dispute(StripeModel):
    object: Literal["dispute"] = "dispute"
    id: str
    amount: int
    charge: str
    created: Timestamp | None = None
    currency: str
    is_charge_refundable: bool = False
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    reason: str | None = None
    status: str | None = None


class Review(StripeModel):
    object: Literal["review"] = "review"
    id: str
    charge: str | None = None
    created: Timestamp | None = None
    livemode: bool = False
    open: bool = False
    reason: str | None = None


class ApplicationFeeRefund(StripeModel):
    object: Literal["fee_refund"] = "fee_refund"
    id: str
    amount: int
    balance_transaction: str | None = None
    created: Timestamp | None = None
    currency: str
    fee: str
    metadata: Metadata = Field(default_factory=dict)


class ApplicationFee(StripeModel):
    object: Literal["application_fee"] = "application_fee"
    id: str
    account: str
    amount: int
    amount_refunded: int = 0
    application: str | None = None
    balance_transaction: str | None = None
    charge: str
    created: Timestamp | None = None
    currency: str
    livemode: bool = False
    originating_transaction: str | None = None
    refunded: bool = False
    refunds: StripeList[ApplicationFeeRefund] | None = None


class BalanceAmount(StripeModel):
    amount: int
    currency: str
    source_types: dict[str, int] = Field(default_factory=dict)


class Balance(StripeModel):
    object: Literal["balance"] = "balance"
    available: list[BalanceAmount] = Field(default_factory=list)
    pending: list[BalanceAmount] = Field(default_factory=list)
    livemode: bool = False


class SourceTransaction(StripeModel):
    object: Literal["source_transaction"] = "source_transaction"
    id: str
    amount: int
    created: Timestamp | None = None
    currency: str
    livemode: bool = False
    source: str | None = None
    status: str | None = None
    type: str | None = None


class Payout(StripeModel):
    object: Literal["payout"] = "payout"
    id: str
    amount: int
    arrival_date: Timestamp | None = None
    created: Timestamp | None = None
    currency: str
    destination: str | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    method: str | None = None
    status: str | None = None


class Transfer(StripeModel):
    object: Literal["transfer"] = "transfer"
    id: str
    amount: int
    amount_reversed: int = 0
    created: Timestamp | None = None
    currency: str
    destination: str | None = None
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    reversed: bool = False
    reversals: StripeList[dict[str, Any]] | None = None
