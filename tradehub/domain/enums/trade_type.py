from enum import Enum


class TradeType(str, Enum):
    """What the poster of a trade suggestion is looking for."""

    BUYING = "BUYING"
    SELLING = "SELLING"
    PARTNERSHIP = "PARTNERSHIP"
    INVESTMENT = "INVESTMENT"
