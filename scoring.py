from __future__ import annotations

import logging
import math
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Tuple

from config import CONFIG
from models import Receipt

logger = logging.getLogger("ReceiptLogger")


def toCents(amount: str) -> int:
    """Convert a two-decimal amount string such as ``"2.50"`` to integer cents."""
    return int((Decimal(amount) * 100).to_integral_value(rounding=ROUND_HALF_UP))


def retailerNamePoints(receipt: Receipt) -> int:
    count = sum(1 for c in receipt.retailer if c.isascii() and c.isalnum())
    return count * CONFIG["retailerNameMultiplier"]


def roundDollarPoints(receipt: Receipt) -> int:
    if receipt.total.rpartition(".")[2] == "00":
        return CONFIG["roundDollarBonus"]
    return 0


def multipleOfQuarterPoints(receipt: Receipt) -> int:
    if toCents(receipt.total) % CONFIG["quarterCents"] == 0:
        return CONFIG["multipleOf025Bonus"]
    return 0


def itemPairPoints(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * CONFIG["itemsBonusPerTwo"]


def itemDescriptionPoints(receipt: Receipt) -> int:
    points = 0
    for item in receipt.items:
        trimmedDescription = item.shortDescription.strip()
        if len(trimmedDescription) % CONFIG["itemDescriptionLengthDivisor"] == 0:
            points += math.ceil(Decimal(item.price) * CONFIG["itemDescriptionMultiplier"])
    return points


def oddDayPoints(receipt: Receipt) -> int:
    if date.fromisoformat(receipt.purchaseDate).day % 2 != 0:
        return CONFIG["oddDayBonus"]
    return 0


def purchaseTimePoints(receipt: Receipt) -> int:
    purchaseTime = datetime.strptime(receipt.purchaseTime, "%H:%M").time()
    if CONFIG["timeBonusStart"] <= purchaseTime < CONFIG["timeBonusEnd"]:
        return CONFIG["timeBonus"]
    return 0


RULES: Tuple[Tuple[str, Callable[[Receipt], int]], ...] = (
    ("retailerName", retailerNamePoints),
    ("roundDollar", roundDollarPoints),
    ("multipleOfQuarter", multipleOfQuarterPoints),
    ("itemPairs", itemPairPoints),
    ("itemDescription", itemDescriptionPoints),
    ("oddDay", oddDayPoints),
    ("purchaseTime", purchaseTimePoints),
)


def scoreBreakdown(receipt: Receipt) -> Dict[str, int]:
    """
    Apply every rule to a validated receipt.

    Args:
        receipt (Receipt): A receipt that has already passed ``validateReceipt``.

    Returns:
        Dict[str, int]: Points awarded by each rule, keyed by rule name, in rule order.
    """
    breakdown = {}
    runningTotal = 0
    for ruleNumber, (name, rule) in enumerate(RULES, start=1):
        points = rule(receipt)
        breakdown[name] = points
        runningTotal += points
        logger.debug("After Rule %d (%s): %d points", ruleNumber, name, runningTotal)
    return breakdown


def calculatePoints(receipt: Receipt) -> int:
    """
    Calculate points for a validated receipt.

    Args:
        receipt (Receipt): The receipt object containing the data to calculate points.

    Returns:
        int: The total points calculated based on the rules.
    """
    return sum(scoreBreakdown(receipt).values())
