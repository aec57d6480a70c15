import copy

import pytest

from models import Receipt
from processor import ReceiptProcessor
from store import ResultStore

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
    ],
    "total": "18.74",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def targetPayload():
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def cornerMarketPayload():
    return copy.deepcopy(CORNER_MARKET_RECEIPT)


@pytest.fixture
def makeReceipt(targetPayload):
    def _make(**overrides):
        payload = dict(targetPayload)
        payload.update(overrides)
        return Receipt(**payload)

    return _make


@pytest.fixture
def store():
    return ResultStore()


@pytest.fixture
def processor(store):
    return ReceiptProcessor(store)
