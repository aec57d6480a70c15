from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from errors import NotFoundError, ValidationError
from models import Receipt, ScoredResult
from scoring import calculatePoints
from store import ResultStore
from validator import validateReceipt

logger = logging.getLogger("ReceiptLogger")


def newReceiptId() -> str:
    return str(uuid.uuid4())


class ReceiptProcessor:
    """
    Validates and scores submitted receipts and keeps their points for later lookup.

    Args:
        store (ResultStore): Where scored results are kept.
        idFactory (Callable[[], str]): Produces a fresh receipt ID for each submission.
    """

    def __init__(self, store: ResultStore, idFactory: Optional[Callable[[], str]] = None):
        self.store = store
        self.idFactory = idFactory or newReceiptId

    def submit(self, receipt: Receipt) -> str:
        """
        Validate, score and store a receipt.

        Args:
            receipt (Receipt): The submitted receipt.

        Returns:
            str: The ID the points are stored under.

        Raises:
            ValidationError: If the receipt is rejected; nothing is stored.
        """
        try:
            validateReceipt(receipt)
        except ValidationError as exc:
            logger.warning("Receipt rejected (%s): %s", exc.field, exc.reason)
            raise

        points = calculatePoints(receipt)
        receiptId = self.idFactory()
        self.store.insert(receiptId, ScoredResult(id=receiptId, points=points))

        logger.info("Receipt processed with ID %s: %d points", receiptId, points)
        return receiptId

    def lookup(self, receiptId: str) -> ScoredResult:
        result = self.store.lookup(receiptId)
        if result is None:
            logger.warning("Receipt not found with ID: %s", receiptId)
            raise NotFoundError(receiptId)
        return result

    def getPoints(self, receiptId: str) -> int:
        """Return the points stored for ``receiptId``, raising ``NotFoundError`` if unknown."""
        points = self.lookup(receiptId).points
        logger.info("Points looked up for receipt ID %s: %d points", receiptId, points)
        return points
