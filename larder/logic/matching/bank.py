"""Match bank: normalized name -> pantry items able to satisfy that name.

The bank is built fresh for every request from the pantry's current items and
thrown away afterwards; quantities change between requests so it is never cached.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from larder.domain.PantryItem import PantryItem
from larder.logic.matching.normalizer import normalize, keys_match

__all__ = ["MatchBank", "build_bank", "build_name_pool", "find_candidates"]


class MatchBank:
    """Ordered mapping of normalized keys to item references.

    Keys keep first-insertion order and items under a key keep scan order; both
    orders decide which item is picked first, so neither is ever sorted.
    """

    def __init__(self):
        self._entries: Dict[str, List[PantryItem]] = {}

    def add(self, name: Optional[str], item: PantryItem) -> bool:
        key = normalize(name)
        if not key:
            return False
        self._entries.setdefault(key, []).append(item)
        return True

    def get(self, key: str) -> Optional[List[PantryItem]]:
        return self._entries.get(key)

    def keys(self):
        return self._entries.keys()

    def items(self):
        return self._entries.items()

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MatchBank({ {k: [i.id for i in v] for k, v in self._entries.items()} })"


def build_bank(items: Iterable[PantryItem]) -> MatchBank:
    """Index every item under its own name and, if present, its barcode label."""
    bank = MatchBank()
    for item in items:
        bank.add(item.name, item)
        if item.alias:
            bank.add(item.alias, item)
    return bank


def build_name_pool(items: Iterable[PantryItem]) -> List[str]:
    """Flat list of item names plus alias labels, in scan order."""
    pool: List[str] = []
    for item in items:
        pool.append(item.name)
        if item.alias:
            pool.append(item.alias)
    return pool


def find_candidates(bank: MatchBank, key: str) -> List[PantryItem]:
    """Items that can satisfy ``key``.

    An exact key wins outright. Otherwise every bank key is scanned in insertion
    order and the item lists of all containment matches are concatenated.
    """
    if not key:
        return []
    exact = bank.get(key)
    if exact is not None:
        return list(exact)
    candidates: List[PantryItem] = []
    for bank_key, bucket in bank.items():
        if keys_match(key, bank_key):
            candidates.extend(bucket)
    return candidates
