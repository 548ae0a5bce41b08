"""Request and response bodies of the Akahu resources."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .envelope import SuccessResponse


class AkahuModel(BaseModel):
    """Base for resource models; Akahu ids arrive as ``_id``-style keys."""

    model_config = ConfigDict(populate_by_name=True)


# Accounts

class AccountConnection(AkahuModel):
    id: str = Field(default="", alias="_id")
    name: str = ""
    logo: str = ""


class AccountMeta(AkahuModel):
    holder: Optional[str] = None


class AccountRefreshed(AkahuModel):
    balance: Optional[datetime] = None
    meta: Optional[datetime] = None
    transactions: Optional[datetime] = None


class AccountBalance(AkahuModel):
    currency: str = ""
    current: Optional[Decimal] = None
    available: Optional[Decimal] = None
    limit: Optional[Decimal] = None
    overdrawn: bool = False


class AccountBranch(AkahuModel):
    name: str = ""
    description: str = ""
    phone: str = ""


class Account(AkahuModel):
    """An account the user has connected to the application."""

    id: str = Field(alias="_id")
    credentials: Optional[str] = Field(default=None, alias="_credentials")
    connection: Optional[AccountConnection] = None
    name: str = ""
    status: str = ""
    meta: Optional[AccountMeta] = None
    refreshed: Optional[AccountRefreshed] = None
    formatted_account: Optional[str] = None
    balance: Optional[AccountBalance] = None
    attributes: List[str] = Field(default_factory=list)
    branch: Optional[AccountBranch] = None
    type: str = ""


# Auth

class ExchangeRequest(AkahuModel):
    grant_type: str = "authorization_code"
    code: str
    redirect_uri: str
    client_id: str
    client_secret: str


class ExchangeResponse(AkahuModel):
    access_token: str
    token_type: str = ""
    scope: str = ""


class AuthorizationURLOptions(AkahuModel):
    """Optional query parameters of the OAuth authorization URL."""

    response_type: Optional[str] = None
    email: Optional[str] = None
    connection: Optional[str] = None
    scope: Optional[str] = None
    state: Optional[str] = None


# Connections

class Connection(AkahuModel):
    """A financial institution users can connect to."""

    id: str = Field(alias="_id")
    name: str = ""
    url: Optional[str] = None
    logo: str = ""


# Me

class Me(AkahuModel):
    id: str = Field(alias="_id")
    created_at: Optional[datetime] = None
    email: str = ""
    mobile: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    preferred_name: Optional[str] = None


# Transactions

class Merchant(AkahuModel):
    id: str = Field(alias="_id")
    name: str = ""
    website: Optional[str] = None


class PersonalFinance(AkahuModel):
    id: str = Field(alias="_id")
    name: str = ""


class CategoryGroups(AkahuModel):
    personal_finance: Optional[PersonalFinance] = None


class Category(AkahuModel):
    id: str = Field(alias="_id")
    name: str = ""
    groups: Optional[CategoryGroups] = None


class Conversion(AkahuModel):
    amount: Optional[Decimal] = None
    currency: Optional[str] = None
    rate: Optional[Decimal] = None


class TransactionMeta(AkahuModel):
    particulars: Optional[str] = None
    code: Optional[str] = None
    reference: Optional[str] = None
    other_account: Optional[str] = None
    conversion: Optional[Conversion] = None


class Transaction(AkahuModel):
    """A settled or pending transaction. All dates are UTC."""

    id: str = Field(alias="_id")
    account: str = Field(default="", alias="_account")
    connection: str = Field(default="", alias="_connection")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    date: datetime
    description: str = ""
    amount: Decimal
    balance: Optional[Decimal] = None
    type: str = ""
    merchant: Optional[Merchant] = None
    category: Optional[Category] = None
    meta: Optional[TransactionMeta] = None


# Webhooks

class WebhookType(str, Enum):
    TOKEN = "TOKEN"
    IDENTITY = "IDENTITY"
    ACCOUNT = "ACCOUNT"
    TRANSACTION = "TRANSACTION"
    PAYMENT = "PAYMENT"
    TRANSFER = "TRANSFER"
    INCOME = "INCOME"


class WebhookEventStatus(str, Enum):
    SENT = "SENT"
    FAILED = "FAILED"
    RETRY = "RETRY"


class Webhook(AkahuModel):
    """An active webhook subscription."""

    id: str = Field(alias="_id")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_called_at: Optional[datetime] = None
    state: str = ""
    url: str = ""


class WebhookSubscribeRequest(AkahuModel):
    webhook_type: WebhookType
    state: str = ""


class WebhookSubscribeResponse(SuccessResponse):
    item_id: Optional[str] = None

    def payload(self) -> Any:
        return self.item_id


class WebhookPayload(AkahuModel):
    """Body of a webhook delivery.

    Parse it only after the signature over the raw bytes has been verified.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    success: Optional[bool] = None
    webhook_type: str
    webhook_code: str
    state: Optional[str] = None
    item_id: Optional[str] = None
    updated_fields: List[str] = Field(default_factory=list)


class WebhookEvent(AkahuModel):
    """A webhook delivery recorded by Akahu."""

    id: str = Field(alias="_id")
    hook: str = ""
    status: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_failed_at: Optional[datetime] = None
    payload: Optional[WebhookPayload] = None
