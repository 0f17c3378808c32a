"""Modelo de evento de webhook Stripe.

``EventObject`` é uma union fechada discriminada pelo campo ``object`` do
payload: um discriminante desconhecido falha na validação em vez de ser
descartado. Novos tipos entram aqui como dado, sem mudar a estrutura.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Union

from pydantic import ConfigDict, Field

from .accounts import Account, File
from .billing import (
    BankAccount,
    Coupon,
    Customer,
    Discount,
    Invoice,
    InvoiceItem,
    Order,
    OrderReturn,
    Plan,
    Product,
    Sku,
    Subscription,
)
from .common import StripeModel, Timestamp
from .payments import (
    ApplicationFee,
    ApplicationFeeRefund,
    Balance,
    Charge,
    Dispute,
    Payout,
    Refund,
    Review,
    SourceTransaction,
    Transfer,
)


class EventType(str, Enum):
    """Tipos de evento conhecidos (campo ``type``)."""

    ACCOUNT_UPDATED = "account.updated"
    ACCOUNT_APPLICATION_DEAUTHORIZED = "account.application.deauthorized"
    ACCOUNT_EXTERNAL_ACCOUNT_CREATED = "account.external_account.created"
    ACCOUNT_EXTERNAL_ACCOUNT_DELETED = "account.external_account.deleted"
    ACCOUNT_EXTERNAL_ACCOUNT_UPDATED = "account.external_account.updated"
    APPLICATION_FEE_CREATED = "application_fee.created"
    APPLICATION_FEE_REFUNDED = "application_fee.refunded"
    APPLICATION_FEE_REFUND_UPDATED = "application_fee.refund.updated"
    BALANCE_AVAILABLE = "balance.available"
    CHARGE_CAPTURED = "charge.captured"
    CHARGE_FAILED = "charge.failed"
    CHARGE_PENDING = "charge.pending"
    CHARGE_REFUNDED = "charge.refunded"
    CHARGE_SUCCEEDED = "charge.succeeded"
    CHARGE_UPDATED = "charge.updated"
    CHARGE_DISPUTE_CLOSED = "charge.dispute.closed"
    CHARGE_DISPUTE_CREATED = "charge.dispute.created"
    CHARGE_DISPUTE_FUNDS_REINSTATED = "charge.dispute.funds_reinstated"
    CHARGE_DISPUTE_FUNDS_WITHDRAWN = "charge.dispute.funds_withdrawn"
    CHARGE_DISPUTE_UPDATED = "charge.dispute.updated"
    CHARGE_REFUND_UPDATED = "charge.refund.updated"
    COUPON_CREATED = "coupon.created"
    COUPON_DELETED = "coupon.deleted"
    COUPON_UPDATED = "coupon.updated"
    CUSTOMER_CREATED = "customer.created"
    CUSTOMER_DELETED = "customer.deleted"
    CUSTOMER_UPDATED = "customer.updated"
    CUSTOMER_DISCOUNT_CREATED = "customer.discount.created"
    CUSTOMER_DISCOUNT_DELETED = "customer.discount.deleted"
    CUSTOMER_DISCOUNT_UPDATED = "customer.discount.updated"
    CUSTOMER_SOURCE_CREATED = "customer.source.created"
    CUSTOMER_SOURCE_DELETED = "customer.source.deleted"
    CUSTOMER_SOURCE_UPDATED = "customer.source.updated"
    CUSTOMER_SUBSCRIPTION_CREATED = "customer.subscription.created"
    CUSTOMER_SUBSCRIPTION_DELETED = "customer.subscription.deleted"
    CUSTOMER_SUBSCRIPTION_TRIAL_WILL_END = "customer.subscription.trial_will_end"
    CUSTOMER_SUBSCRIPTION_UPDATED = "customer.subscription.updated"
    FILE_CREATED = "file.created"
    INVOICE_CREATED = "invoice.created"
    INVOICE_PAYMENT_FAILED = "invoice.payment_failed"
    INVOICE_PAYMENT_SUCCEEDED = "invoice.payment_succeeded"
    INVOICE_UPDATED = "invoice.updated"
    INVOICE_UPCOMING = "invoice.upcoming"
    INVOICE_ITEM_CREATED = "invoiceitem.created"
    INVOICE_ITEM_DELETED = "invoiceitem.deleted"
    INVOICE_ITEM_UPDATED = "invoiceitem.updated"
    ORDER_CREATED = "order.created"
    ORDER_PAYMENT_FAILED = "order.payment_failed"
    ORDER_PAYMENT_SUCCEEDED = "order.payment_succeeded"
    ORDER_UPDATED = "order.updated"
    ORDER_RETURN_UPDATED = "order_return.updated"
    PAYOUT_CANCELED = "payout.canceled"
    PAYOUT_CREATED = "payout.created"
    PAYOUT_FAILED = "payout.failed"
    PAYOUT_PAID = "payout.paid"
    PAYOUT_UPDATED = "payout.updated"
    PLAN_CREATED = "plan.created"
    PLAN_DELETED = "plan.deleted"
    PLAN_UPDATED = "plan.updated"
    PRODUCT_CREATED = "product.created"
    PRODUCT_DELETED = "product.deleted"
    PRODUCT_UPDATED = "product.updated"
    REVIEW_CLOSED = "review.closed"
    REVIEW_OPENED = "review.opened"
    # sem modelo scheduled_query_run em EventObject: o evento vira PayloadParseError
    SIGMA_SCHEDULED_QUERY_RUN_CREATED = "sigma.scheduled_query_run.created"
    SKU_CREATED = "sku.created"
    SKU_DELETED = "sku.deleted"
    SKU_UPDATED = "sku.updated"
    SOURCE_CANCELED = "source.canceled"
    SOURCE_CHARGEABLE = "source.chargeable"
    SOURCE_FAILED = "source.failed"
    SOURCE_TRANSACTION_CREATED = "source.transaction.created"
    TRANSFER_CREATED = "transfer.created"
    TRANSFER_REVERSED = "transfer.reversed"
    TRANSFER_UPDATED = "transfer.updated"


EventObject = Annotated[
    Union[
        Account,
        ApplicationFee,
        ApplicationFeeRefund,
        Balance,
        BankAccount,
        Charge,
        Coupon,
        Customer,
        Discount,
        Dispute,
        File,
        Invoice,
        InvoiceItem,
        Order,
        OrderReturn,
        Payout,
        Plan,
        Product,
        Refund,
        Review,
        Sku,
        Subscription,
        SourceTransaction,
        Transfer,
    ],
    Field(discriminator="object"),
]


class EventData(StripeModel):
    object: EventObject
    previous_attributes: dict[str, Any] | None = None


class Event(StripeModel):
    """Evento entregue via webhook.

    Attributes:
        event_type: Tipo do evento (campo ``type`` no JSON)
        data: Objeto afetado, já tipado pelo discriminante ``object``
    """

    # dump usa "type", então o JSON serializado volta a validar
    model_config = ConfigDict(extra="ignore", populate_by_name=True, serialize_by_alias=True)

    id: str | None = None
    event_type: EventType = Field(alias="type")
    data: EventData
    created: Timestamp | None = None
    livemode: bool = False
    api_version: str | None = None
    account: str | None = None
