from enum import Enum


class ProductAvailability(str, Enum):
    AVAILABLE = "AVAILABLE"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    LIMITED = "LIMITED"
    ON_DEMAND = "ON_DEMAND"
