"""
ResultKind - the outcome taxonomy shared by every use case.
Business-rule rejections are outcomes, not exceptions.
"""

from enum import Enum


class ResultKind(str, Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"
    DUPLICATE_PHONE = "duplicate_phone"
    TARGET_NOT_REACHED = "target_not_reached"
    UNAUTHORIZED = "unauthorized"
    INTERNAL_FAILURE = "internal_failure"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ResultKind.OK: 200,
    ResultKind.INVALID_INPUT: 400,
    # Duplicate is a normal outcome: 200 with success=false
    ResultKind.DUPLICATE_PHONE: 200,
    ResultKind.TARGET_NOT_REACHED: 400,
    ResultKind.UNAUTHORIZED: 401,
    ResultKind.INTERNAL_FAILURE: 500,
}
