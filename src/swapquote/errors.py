"""API error taxonomy.

Handlers raise these; ``swapquote.web.middleware.error_handling`` turns them
into HTTP responses. Codes follow the public 0x API so existing clients can
keep parsing error bodies.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional


class GeneralErrorCode(IntEnum):
    """Top-level error codes returned in the ``code`` field."""

    VALIDATION_ERROR = 100
    MALFORMED_JSON = 101
    ORDER_SUBMISSION_DISABLED = 102
    THROTTLED = 103
    NOT_IMPLEMENTED = 104
    TRANSACTION_INVALID = 105
    UNABLE_TO_SUBMIT_ON_BEHALF_OF_TAKER = 106


GENERAL_ERROR_CODE_TO_REASON: dict[GeneralErrorCode, str] = {
    GeneralErrorCode.VALIDATION_ERROR: "Validation Failed",
    GeneralErrorCode.MALFORMED_JSON: "Malformed JSON",
    GeneralErrorCode.ORDER_SUBMISSION_DISABLED: "Order submission disabled",
    GeneralErrorCode.THROTTLED: "Throttled",
    GeneralErrorCode.NOT_IMPLEMENTED: "Not Implemented",
    GeneralErrorCode.TRANSACTION_INVALID: "Transaction Invalid",
    GeneralErrorCode.UNABLE_TO_SUBMIT_ON_BEHALF_OF_TAKER: "Unable to submit on behalf of taker",
}


class ValidationErrorCode(IntEnum):
    """Per-field codes carried inside ``validationErrors``."""

    REQUIRED_FIELD = 1000
    INCORRECT_FORMAT = 1001
    INVALID_ADDRESS = 1002
    ADDRESS_NOT_SUPPORTED = 1003
    VALUE_OUT_OF_RANGE = 1004
    INVALID_SIGNATURE_OR_HASH = 1005
    UNSUPPORTED_OPTION = 1006
    INVALID_ORDER = 1007
    INTERNAL_ERROR = 1008
    TOKEN_NOT_SUPPORTED = 1009
    FIELD_INVALID = 1010


@dataclass(frozen=True)
class ValidationErrorItem:
    """A single offending field."""

    field: str
    code: ValidationErrorCode
    reason: str

    def to_dict(self) -> dict:
        return {"field": self.field, "code": int(self.code), "reason": self.reason}


class APIBaseError(Exception):
    """Base class for errors that already carry an HTTP mapping."""

    status_code: int = 500
    is_api_error = True

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class BadRequestError(APIBaseError):
    """A 400 error with a general error code."""

    status_code = 400
    general_error_code: GeneralErrorCode = GeneralErrorCode.VALIDATION_ERROR

    @property
    def reason(self) -> str:
        return GENERAL_ERROR_CODE_TO_REASON[self.general_error_code]


class ValidationError(BadRequestError):
    """One or more request fields failed validation."""

    general_error_code = GeneralErrorCode.VALIDATION_ERROR

    def __init__(self, validation_errors: list[ValidationErrorItem]):
        super().__init__("; ".join(f"{e.field}: {e.reason}" for e in validation_errors))
        self.validation_errors = validation_errors


class RevertAPIError(BadRequestError):
    """The quoted transaction reverts on chain.

    Wraps the collaborator's revert error so its payload reaches the client.
    """

    general_error_code = GeneralErrorCode.TRANSACTION_INVALID

    def __init__(self, revert_error: Any):
        super().__init__(str(revert_error))
        self.revert_error = revert_error

    @property
    def values(self) -> dict:
        values: Optional[dict] = getattr(self.revert_error, "values", None)
        if values:
            return dict(values)
        return {"message": str(self.revert_error)}


class InternalServerError(APIBaseError):
    """Unclassified failure; the message is kept for diagnostics only."""

    status_code = 500
