from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class Item(BaseModel):
    """
    Represents an item in a receipt with a short description and price.

    Fields are kept as the strings that were submitted; the validator checks their format.

    Attributes:
        shortDescription (str): A short description of the product.
        price (str): The price paid for the item, as a string with exactly two decimals.
    """

    model_config = ConfigDict(frozen=True)

    shortDescription: Optional[StrictStr] = Field(
        None,
        description="The Short Product Description for the item.",
        examples=["Mountain Dew 12PK"],
    )
    price: Optional[StrictStr] = Field(
        None,
        description="The total price paid for this item.",
        examples=["6.49"],
    )


class Receipt(BaseModel):
    """
    Represents a receipt that contains details about the purchase including retailer name,
    purchase date and time, items, and total price.

    Every field is optional at this level so that an absent field is reported by the
    validator as missing rather than rejected by the framework.

    Attributes:
        retailer (str): The name of the retailer or store where the receipt is from.
        purchaseDate (str): The date the purchase was made, ``YYYY-MM-DD``.
        purchaseTime (str): The time the purchase was made, ``HH:MM`` in 24-hour format.
        items (Tuple[Item, ...]): The items included in the receipt.
        total (str): The total amount paid, as a string with exactly two decimals.
    """

    model_config = ConfigDict(frozen=True)

    retailer: Optional[StrictStr] = Field(
        None,
        description="The name of the retailer or store the receipt is from.",
        examples=["M&M Corner Market"],
    )
    purchaseDate: Optional[StrictStr] = Field(
        None,
        description="The date of the purchase printed on the receipt.",
        examples=["2022-01-01"],
    )
    purchaseTime: Optional[StrictStr] = Field(
        None,
        description="The time of the purchase printed on the receipt. 24-hour time expected.",
        examples=["13:01"],
    )
    items: Optional[Tuple[Item, ...]] = Field(None, description="The items purchased.")
    total: Optional[StrictStr] = Field(
        None,
        description="The total amount paid on the receipt.",
        examples=["6.49"],
    )


class ScoredResult(BaseModel):
    """
    The points awarded to a processed receipt, stored under its generated ID.

    Attributes:
        id (str): The unique ID returned when the receipt was submitted.
        points (int): The total points earned by the receipt.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    points: int = Field(..., ge=0)


class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    """
    Represents the response for points calculation based on a receipt.

    Attributes:
        points (int): The total points earned for a purchase based on the receipt.
    """

    points: int


class ErrorResponse(BaseModel):
    """
    Represents an error response when a request fails.

    Attributes:
        detail (str): The detail of the error message explaining what went wrong.
    """

    detail: str
