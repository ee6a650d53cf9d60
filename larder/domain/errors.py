"""Lookup failures raised by repositories and the kitchen service."""


class NotFoundError(LookupError):
    entity = "record"

    def __init__(self, key=None):
        self.key = key
        super().__init__(f"{self.entity} not found" if key is None else f"{self.entity} {key} not found")


class PantryNotFound(NotFoundError):
    entity = "pantry"


class ItemNotFound(NotFoundError):
    entity = "item"


class RecipeNotFound(NotFoundError):
    entity = "recipe"


def require_id(value, label: str) -> int:
    """Return ``value`` as a positive int or raise ValueError('<label> required')."""
    if isinstance(value, bool):
        raise ValueError(f"{label} required")
    try:
        ident = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"{label} required") from None
    if ident <= 0 or (isinstance(value, float) and value != ident):
        raise ValueError(f"{label} required")
    return ident
