"""Recursos de clientes, catálogo e cobrança recorrente."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from .common import Metadata, StripeList, StripeModel, Timestamp


class Coupon(StripeModel):
    object: Literal["coupon"] = "coupon"
    id: str
    amount_off: int | None = None
    created: Timestamp | None = None
    currency: str | None = None
    duration: str | None = None
    duration_in_months: int | None = None
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    percent_off: float | None = None
    valid: bool = True


class Discount(StripeModel):
    object: Literal["discount"] = "discount"
    coupon: Coupon
    customer: str | None = None
    end: Timestamp | None = None
    start: Timestamp | None = None
    subscription: str | None = None


class BankAccount(StripeModel):
    object: Literal["bank_account"] = "bank_account"
    id: str
    account: str | None = None
    account_holder_name: str | None = None
    bank_name: str | None = None
    country: str
    currency: str
    customer: str | None = None
    default_for_currency: bool | None = None
    last4: str
    metadata: Metadata = Field(default_factory=dict)
    status: str | None = None


class Customer(StripeModel):
    object: Literal["customer"] = "customer"
    id: str
    balance: int = 0
    created: Timestamp | None = None
    currency: str | None = None
    default_source: str | None = None
    deleted: bool = False
    delinquent: bool = False
    description: str | None = None
    discount: Discount | None = None
    email: str | None = None
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    name: str | None = None


class Product(StripeModel):
    object: Literal["product"] = "product"
    id: str
    active: bool = True
    created: Timestamp | None = None
    description: str | None = None
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    name: str
    type: str | None = None


class Plan(StripeModel):
    object: Literal["plan"] = "plan"
    id: str
    active: bool = True
    amount: int | None = None
    created: Timestamp | None = None
    currency: str
    interval: str
    interval_count: int = 1
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    nickname: str | None = None
    product: str | None = None
    trial_period_days: int | None = None


class SubscriptionItem(StripeModel):
    object: Literal["subscription_item"] = "subscription_item"
    id: str
    created: Timestamp | None = None
    plan: Plan | None = None
    quantity: int | None = None


class Subscription(StripeModel):
    object: Literal["subscription"] = "subscription"
    id: str
    cancel_at_period_end: bool = False
    canceled_at: Timestamp | None = None
    created: Timestamp | None = None
    current_period_end: Timestamp | None = None
    current_period_start: Timestamp | None = None
    customer: str
    ended_at: Timestamp | None = None
    items: StripeList[SubscriptionItem] | None = None
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    status: str
    trial_end: Timestamp | None = None


class InvoiceItem(StripeModel):
    object: Literal["invoiceitem"] = "invoiceitem"
    id: str
    amount: int
    currency: str
    customer: str
    date: Timestamp | None = None
    description: str | None = None
    invoice: str | None = None
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    subscription: str | None = None


class Invoice(StripeModel):
    object: Literal["invoice"] = "invoice"
    id: str | None = None  # faturas "upcoming" não têm id
    amount_due: int = 0
    amount_paid: int = 0
    attempt_count: int = 0
    attempted: bool = False
    charge: str | None = None
    created: Timestamp | None = None
    currency: str
    customer: str
    lines: StripeList[dict[str, Any]] | None = None
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    paid: bool = False
    status: str | None = None
    subscription: str | None = None
    total: int = 0


class Sku(StripeModel):
    object: Literal["sku"] = "sku"
    id: str
    active: bool = True
    attributes: dict[str, str] = Field(default_factory=dict)
    created: Timestamp | None = None
    currency: str
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    price: int
    product: str


class OrderItem(StripeModel):
    object: Literal["order_item"] = "order_item"
    amount: int
    currency: str
    description: str | None = None
    parent: str | None = None
    quantity: int | None = None
    type: str


class Order(StripeModel):
    object: Literal["order"] = "order"
    id: str
    amount: int
    charge: str | None = None
    created: Timestamp | None = None
    currency: str
    customer: str | None = None
    email: str | None = None
    items: list[OrderItem] = Field(default_factory=list)
    livemode: bool = False
    metadata: Metadata = Field(default_factory=dict)
    status: str


class OrderReturn(StripeModel):
    object: Literal["order_return"] = "order_return"
    id: str
    amount: int
    created: Timestamp | None = None
    currency: str
    items: list[OrderItem] = Field(default_factory=list)
    livemode: bool = False
    order: str | None = None
    refund: str | None = None
