from typing import Final

# Event names published on the global bus
PANTRY_LOW_STOCK: Final[str] = "pantry.low_stock"
PANTRY_DEPLETED: Final[str] = "pantry.depleted"
RECIPE_COOKED: Final[str] = "recipe.cooked"

# Quantity assigned when an item is created or edited without a usable value
MIN_ITEM_QUANTITY: Final[int] = 1

MAX_NAME_LENGTH: Final[int] = 200
MAX_BARCODE_LENGTH: Final[int] = 64

EMPTY_STORE: Final[dict] = {
    "pantries": [],
    "barcodes": [],
    "items": [],
    "recipes": [],
}
