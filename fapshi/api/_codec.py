"""
JSON encode/decode helpers shared by the API modules.

Every pydantic failure is re-raised as ``SerializationError`` so callers only
ever see the client's own error types.
"""
from __future__ import annotations

from typing import Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from fapshi.core.exceptions import SerializationError
from fapshi.dtos import TransactionStatus, WireModel


T = TypeVar("T", bound=BaseModel)

_TRANSACTION_LIST = TypeAdapter(list[TransactionStatus])


def encode(model: WireModel) -> str:
    try:
        return model.to_json()
    except PydanticSerializationError as exc:
        raise SerializationError(
            f"Could not encode {type(model).__name__}: {exc}",
            model=type(model).__name__,
        ) from exc


def decode(body: str, response_model: Type[T]) -> T:
    try:
        return response_model.model_validate_json(body)
    except ValidationError as exc:
        raise SerializationError(
            f"Unexpected {response_model.__name__} payload: {exc}",
            model=response_model.__name__,
            body=body,
        ) from exc


def decode_transactions(body: str) -> list[TransactionStatus]:
    try:
        return _TRANSACTION_LIST.validate_json(body)
    except ValidationError as exc:
        raise SerializationError(
            f"Unexpected transaction list payload: {exc}",
            model="list[TransactionStatus]",
            body=body,
        ) from exc
