"""PantryItem domain entity: quantity-tracked inventory row, optionally aliased by a barcode label."""
from typing import Optional
from larder.domain.Barcode import Barcode


class PantryItem:
    def __init__(self, id: Optional[int] = None, name: str = "", quantity: int = 0,
                 pantry_id: Optional[int] = None, barcode: Optional[Barcode] = None):
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative: {quantity}")
        self.id = id
        self.name = name
        self.quantity = quantity
        self.pantry_id = pantry_id
        self.barcode = barcode

    @property
    def alias(self) -> Optional[str]:
        '''Barcode label usable as an alternate name, if any.'''
        if self.barcode is None:
            return None
        return self.barcode.label or None

    def __str__(self) -> str:
        parts = [f"{self.name} x{self.quantity}"]
        if self.alias:
            parts.append(f"Alias: {self.alias}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data, barcode: Optional[Barcode] = None):
        '''Creates a PantryItem from a store row. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        if barcode is None and isinstance(d.get("barcode"), dict):
            barcode = Barcode.from_dict(d["barcode"])
        try:
            quantity = max(0, int(d.get("quantity") or 0))
        except (TypeError, ValueError):
            quantity = 0
        return PantryItem(
            id=d.get("id"),
            name=str(d.get("name") or ""),
            quantity=quantity,
            pantry_id=d.get("pantry_id"),
            barcode=barcode,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "pantry_id": self.pantry_id,
            "name": self.name,
            "quantity": self.quantity,
            "barcode": self.barcode.to_dict() if self.barcode else None,
        }
