"""Recursos Stripe tipados (pydantic) e modelo de evento."""

from .accounts import Account, File
from .billing import (
    BankAccount,
    Coupon,
    Customer,
    Discount,
    Invoice,
    InvoiceItem,
    Order,
    OrderItem,
    OrderReturn,
    Plan,
    Product,
    Sku,
    Subscription,
    SubscriptionItem,
)
from .common import Deleted, Metadata, StripeList, StripeModel, Timestamp
from .event import Event, EventData, EventObject, EventType
from .payments import (
    ApplicationFee,
    ApplicationFeeRefund,
    Balance,
    BalanceAmount,
    Charge,
    Dispute,
    Payout,
    Refund,
    Review,
    SourceTransaction,
    Transfer,
)

__all__ = [
    "Account",
    "ApplicationFee",
    "ApplicationFeeRefund",
    "Balance",
    "BalanceAmount",
    "BankAccount",
    "Charge",
    "Coupon",
    "Customer",
    "Deleted",
    "Discount",
    "Dispute",
    "Event",
    "EventData",
    "EventObject",
    "EventType",
    "File",
    "Invoice",
    "InvoiceItem",
    "Metadata",
    "Order",
    "OrderItem",
    "OrderReturn",
    "Payout",
    "Plan",
    "Product",
    "Refund",
    "Review",
    "Sku",
    "SourceTransaction",
    "StripeList",
    "StripeModel",
    "Subscription",
    "SubscriptionItem",
    "Timestamp",
    "Transfer",
]
