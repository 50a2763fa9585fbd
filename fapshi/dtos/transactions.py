"""
Transaction DTOs: status, expiry envelope and search filters.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from fapshi.dtos.base import WireModel
from fapshi.shared.codes import PROVIDER_STATUS_ALIASES


class Status(str, Enum):
    """Remote transaction lifecycle: CREATED → PENDING → SUCCESSFUL | FAILED | EXPIRED.

    Construction is case-insensitive and never fails; anything unrecognised
    maps to CREATED.
    """

    CREATED = "CREATED"
    PENDING = "PENDING"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"

    @classmethod
    def _missing_(cls, value: object) -> "Status":
        if isinstance(value, str):
            name = PROVIDER_STATUS_ALIASES.get(value.strip().lower())
            if name:
                return cls[name]
        return cls.CREATED

    @classmethod
    def parse(cls, value: Any) -> "Status":
        if isinstance(value, cls):
            return value
        return cls("" if value is None else str(value))

    @property
    def is_terminal(self) -> bool:
        return self in (Status.SUCCESSFUL, Status.FAILED, Status.EXPIRED)


class TransactionStatus(WireModel):
    """State of one transaction as reported by ``payment-status``.

    Which optional fields are present depends on how far the transaction got.
    """

    transaction_id: str = Field(alias="transId")
    status: Status = Status.CREATED
    medium: Optional[str] = None
    service_name: Optional[str] = None
    amount: float
    revenue: Optional[float] = None
    payer_name: Optional[str] = None
    email: Optional[str] = None
    redirect_url: Optional[str] = None
    external_id: Optional[str] = None
    user_id: Optional[str] = None
    webhook_url: Optional[str] = Field(default=None, alias="webhook")
    financial_trans_id: Optional[str] = None
    date_initiated: Optional[str] = None
    date_confirmed: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, v: Any) -> Status:
        return Status.parse(v)


class ExpireRequest(WireModel):
    """Envelope posted to ``expire-pay``."""

    transaction_id: str = Field(alias="transId")


class TransactionSearchQuery(WireModel):
    """Filters for ``transaction/search``. Every filter is optional."""

    status: Optional[Status] = None
    medium: Optional[str] = None
    # name of the payer
    name: Optional[str] = None
    start: Optional[str] = None  # yyyy-mm-dd
    end: Optional[str] = None  # yyyy-mm-dd
    amount: Optional[int] = Field(default=None, alias="amt")  # exact amount
    limit: Optional[int] = Field(default=None, gt=0)
    sort: Optional[Literal["asc", "desc"]] = None

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, v: Any) -> Optional[Status]:
        return None if v is None else Status.parse(v)

    def to_params(self) -> dict[str, Any]:
        """Query-string parameters; the provider expects lower-case status."""
        params = self.to_wire()
        if self.status is not None:
            params["status"] = self.status.value.lower()
        return params
