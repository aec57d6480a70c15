from __future__ import annotations

import re
from datetime import datetime

from errors import FormatError, MissingFieldError
from models import Item, Receipt

RETAILER_PATTERN = re.compile(r"[A-Za-z0-9_\s\-&]+", re.ASCII)
DESCRIPTION_PATTERN = re.compile(r"[A-Za-z0-9_\s\-]+", re.ASCII)
AMOUNT_PATTERN = re.compile(r"\d+\.\d{2}", re.ASCII)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"\d{2}:\d{2}", re.ASCII)


def validateReceipt(receipt: Receipt) -> None:
    """
    Validate a receipt before it is scored, stopping at the first failure.

    Checks run in a fixed order: required fields, retailer, purchase date,
    purchase time, total, then each item in turn.

    Args:
        receipt (Receipt): The submitted receipt.

    Raises:
        MissingFieldError: If a required field is absent or empty.
        FormatError: If a field does not match its expected format.
    """
    if not receipt.retailer:
        raise MissingFieldError("retailer")
    if not receipt.purchaseDate:
        raise MissingFieldError("purchaseDate")
    if not receipt.purchaseTime:
        raise MissingFieldError("purchaseTime")
    if not receipt.items:
        raise MissingFieldError("items", "at least one item is required")
    if not receipt.total:
        raise MissingFieldError("total")

    if not RETAILER_PATTERN.fullmatch(receipt.retailer):
        raise FormatError("retailer", "invalid retailer name format")

    if not isValidDate(receipt.purchaseDate):
        raise FormatError("purchaseDate", "invalid purchase date format")

    if not isValidTime(receipt.purchaseTime):
        raise FormatError("purchaseTime", "invalid purchase time format")

    if not AMOUNT_PATTERN.fullmatch(receipt.total):
        raise FormatError("total", "invalid total format")

    for index, item in enumerate(receipt.items):
        validateItem(item, index)


def validateItem(item: Item, index: int = 0) -> None:
    """Validate one receipt item; ``index`` is used to name the offending field."""
    prefix = f"items[{index}]"
    if not item.shortDescription:
        raise MissingFieldError(f"{prefix}.shortDescription", "item short description is required")
    if not item.price:
        raise MissingFieldError(f"{prefix}.price", "item price is required")

    if not DESCRIPTION_PATTERN.fullmatch(item.shortDescription):
        raise FormatError(f"{prefix}.shortDescription", "invalid item short description format")

    if not AMOUNT_PATTERN.fullmatch(item.price):
        raise FormatError(f"{prefix}.price", "invalid item price format")


def isValidDate(value: str) -> bool:
    # strptime alone would accept single-digit months and days
    if not DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def isValidTime(value: str) -> bool:
    if not TIME_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError:
        return False
    return True
