"""Barcode record: a scanned code with an optional free-text label used as an item alias."""
from typing import Optional


class Barcode:
    def __init__(self, id: Optional[int] = None, code: str = "", label: Optional[str] = None):
        self.id = id
        self.code = code
        self.label = label

    def __str__(self) -> str:
        return f"{self.code} ({self.label})" if self.label else self.code

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a Barcode from a dictionary. Returns None for empty input.'''
        if not isinstance(data, dict) or not data:
            return None
        label = data.get("label")
        return Barcode(
            id=data.get("id"),
            code=str(data.get("code") or ""),
            label=label if isinstance(label, str) else None,
        )

    def to_dict(self):
        return {"id": self.id, "code": self.code, "label": self.label}
