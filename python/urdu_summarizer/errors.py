from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """요청 처리 중 발생할 수 있는 오류 종류 (닫힌 집합)"""
    INVALID_INPUT = "InvalidInput"
    UPSTREAM_UNAVAILABLE = "UpstreamUnavailable"
    UPSTREAM_ERROR = "UpstreamError"
    INTERNAL_FAILURE = "InternalFailure"


DEFAULT_STATUS = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.UPSTREAM_UNAVAILABLE: 503,
    ErrorKind.UPSTREAM_ERROR: 502,
    ErrorKind.INTERNAL_FAILURE: 500,
}


class SummarizerError(Exception):
    def __init__(self, kind: ErrorKind, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code or DEFAULT_STATUS[kind]

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind.value}
