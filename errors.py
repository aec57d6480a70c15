from __future__ import annotations

from typing import Optional


class ReceiptError(Exception):
    """Base class for every error raised by the receipt core."""


class ValidationError(ReceiptError):
    """
    A submitted receipt failed validation and was not scored.

    Attributes:
        reason (str): Human-readable description of the failure.
        field (str | None): The offending field, e.g. ``total`` or ``items[1].price``.
    """

    def __init__(self, reason: str, field: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.field = field


class MissingFieldError(ValidationError):
    def __init__(self, field: str, reason: Optional[str] = None):
        super().__init__(reason or f"{field} is required", field)


class FormatError(ValidationError):
    def __init__(self, field: str, reason: Optional[str] = None):
        super().__init__(reason or f"invalid {field} format", field)


class NotFoundError(ReceiptError):
    def __init__(self, receiptId: str):
        super().__init__(f"No receipt found for ID {receiptId}")
        self.receiptId = receiptId


class DuplicateIdError(ReceiptError):
    def __init__(self, receiptId: str):
        super().__init__(f"A result is already stored under ID {receiptId}")
        self.receiptId = receiptId
