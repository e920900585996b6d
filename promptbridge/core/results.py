"""어댑터 결과 타입.

외부 API / DB 어댑터는 예외를 던지지 않고 ``Success`` 또는 ``Failure`` 를 반환한다.
HTTP 상태 코드 매핑은 라우터 계층(``error_response``)에서만 한다.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from fastapi import status
from fastapi.responses import JSONResponse


class ErrorCode(str, Enum):
    UPSTREAM_ERROR = "upstream_error"
    DATABASE_ERROR = "database_error"


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class Failure:
    code: ErrorCode
    message: str
    cause: Optional[str] = None


Result = Union[Success, Failure]


def error_response(failure: Failure) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": failure.message, "code": failure.code.value},
    )
