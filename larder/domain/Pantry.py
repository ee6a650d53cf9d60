"""Pantry aggregate: a named collection of PantryItem rows."""
from typing import List, Optional
from larder.domain.PantryItem import PantryItem


class Pantry:
    def __init__(self, id: Optional[int] = None, name: str = "", items: Optional[List[PantryItem]] = None):
        self.id = id
        self.name = name
        self.items: List[PantryItem] = items[:] if items else []

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"{self.name}:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self, include_items: bool = True):
        '''
        Converts the Pantry object to a dictionary.
        '''
        data = {"id": self.id, "name": self.name}
        if include_items:
            data["items"] = [item.to_dict() for item in self.items]
        return data
