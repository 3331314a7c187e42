from enum import Enum


class ProductCondition(str, Enum):
    NEW = "NEW"
    USED = "USED"
    REFURBISHED = "REFURBISHED"
