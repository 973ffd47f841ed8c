"""Unified API response wrapper for the read-side query endpoints.

{
    "code": 0,           // 0=success, non-0=error code
    "message": "success",
    "data": { ... },     // typed per endpoint, null on error
    "tick": 42,          // state counter the data was read at
    "request_id": "..."
}
"""

import uuid
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    code: int = 0
    message: str = "success"
    data: T | None = None
    tick: int | None = None
    request_id: str = Field(default_factory=lambda: f"req_{uuid.uuid4().hex[:12]}")


def success_response(data: T, tick: int | None = None) -> ApiResponse[T]:
    return ApiResponse[T](code=0, message="success", data=data, tick=tick)


def error_response(code: int, message: str) -> ApiResponse[None]:
    return ApiResponse[None](code=code, message=message, data=None)
