"""Pantry, item and barcode persistence over the JSON store."""
import logging
from typing import Any, Dict, Iterable, List, Optional

from larder.domain.Barcode import Barcode
from larder.domain.Consumption import AppliedDeduction
from larder.domain.Pantry import Pantry
from larder.domain.PantryItem import PantryItem
from larder.domain.errors import ItemNotFound, PantryNotFound
from larder.infra.json_store import JsonStore, next_id
from larder.utilities.constants import MIN_ITEM_QUANTITY

logger = logging.getLogger(__name__)


def _find(rows: List[Dict[str, Any]], row_id: int) -> Optional[Dict[str, Any]]:
    return next((r for r in rows if r.get("id") == row_id), None)


def _clamp_quantity(quantity) -> int:
    try:
        return max(MIN_ITEM_QUANTITY, int(quantity))
    except (TypeError, ValueError):
        return MIN_ITEM_QUANTITY


class PantryRepository:
    def __init__(self, store: JsonStore):
        self.store = store

    # --- helpers -----------------------------------------------------------
    @staticmethod
    def _to_item(row: Dict[str, Any], barcodes: Dict[int, Dict[str, Any]]) -> PantryItem:
        barcode = Barcode.from_dict(barcodes.get(row.get("barcode_id")))
        return PantryItem.from_dict(row, barcode=barcode)

    @staticmethod
    def _barcode_index(doc) -> Dict[int, Dict[str, Any]]:
        return {b["id"]: b for b in doc["barcodes"]}

    @staticmethod
    def _upsert_barcode(doc, code: str, label: Optional[str]) -> Dict[str, Any]:
        row = next((b for b in doc["barcodes"] if b.get("code") == code), None)
        if row is None:
            row = {"id": next_id(doc["barcodes"]), "code": code, "label": label}
            doc["barcodes"].append(row)
        elif label is not None:
            row["label"] = label
        return row

    # --- pantries ----------------------------------------------------------
    def list_pantries(self) -> List[Pantry]:
        doc = self.store.read()
        rows = sorted(doc["pantries"], key=lambda p: p["id"])
        return [Pantry(id=p["id"], name=p.get("name", "")) for p in rows]

    def get_pantry(self, pantry_id: int) -> Pantry:
        doc = self.store.read()
        row = _find(doc["pantries"], pantry_id)
        if row is None:
            raise PantryNotFound(pantry_id)
        barcodes = self._barcode_index(doc)
        items = [self._to_item(r, barcodes) for r in doc["items"] if r.get("pantry_id") == pantry_id]
        items.sort(key=lambda i: i.id)
        return Pantry(id=row["id"], name=row.get("name", ""), items=items)

    def create_pantry(self, name: str) -> Pantry:
        name = (name or "").strip()
        if not name:
            raise ValueError("name required")
        with self.store.transaction() as doc:
            row = {"id": next_id(doc["pantries"]), "name": name}
            doc["pantries"].append(row)
        logger.info("Created pantry %s (%s)", row["id"], name)
        return Pantry(id=row["id"], name=name)

    def rename_pantry(self, pantry_id: int, name: str) -> Pantry:
        name = (name or "").strip()
        if not name:
            raise ValueError("name required")
        with self.store.transaction() as doc:
            row = _find(doc["pantries"], pantry_id)
            if row is None:
                raise PantryNotFound(pantry_id)
            row["name"] = name
        return Pantry(id=pantry_id, name=name)

    def delete_pantry(self, pantry_id: int) -> None:
        with self.store.transaction() as doc:
            if _find(doc["pantries"], pantry_id) is None:
                raise PantryNotFound(pantry_id)
            doc["pantries"] = [p for p in doc["pantries"] if p["id"] != pantry_id]
            doc["items"] = [i for i in doc["items"] if i.get("pantry_id") != pantry_id]
        logger.info("Deleted pantry %s and its items", pantry_id)

    def load_pantry_items(self, pantry_id: int) -> List[PantryItem]:
        """Items of one pantry with their barcode aliases, oldest first."""
        return self.get_pantry(pantry_id).items

    # --- items -------------------------------------------------------------
    def list_items(self, pantry_id: Optional[int] = None) -> List[PantryItem]:
        doc = self.store.read()
        barcodes = self._barcode_index(doc)
        rows = [r for r in doc["items"] if not pantry_id or r.get("pantry_id") == pantry_id]
        rows.sort(key=lambda r: r["id"], reverse=True)
        return [self._to_item(r, barcodes) for r in rows]

    def get_item(self, item_id: int) -> PantryItem:
        doc = self.store.read()
        row = _find(doc["items"], item_id)
        if row is None:
            raise ItemNotFound(item_id)
        return self._to_item(row, self._barcode_index(doc))

    def add_item(self, pantry_id: int, name: str, quantity: int = MIN_ITEM_QUANTITY,
                 barcode_code: Optional[str] = None, barcode_label: Optional[str] = None) -> PantryItem:
        """Create an item; a barcode code is upserted and its label refreshed when given."""
        name = (name or "").strip()
        if not name:
            raise ValueError("pantry_id and name required")
        with self.store.transaction() as doc:
            if _find(doc["pantries"], pantry_id) is None:
                raise PantryNotFound(pantry_id)
            barcode_id = None
            code = (barcode_code or "").strip()
            if code:
                barcode_id = self._upsert_barcode(doc, code, barcode_label)["id"]
            row = {
                "id": next_id(doc["items"]),
                "pantry_id": pantry_id,
                "name": name,
                "quantity": _clamp_quantity(quantity),
                "barcode_id": barcode_id,
            }
            doc["items"].append(row)
            item = self._to_item(row, self._barcode_index(doc))
        logger.info("Added item %s '%s' x%s to pantry %s", item.id, name, item.quantity, pantry_id)
        return item

    def update_item(self, item_id: int, name: Optional[str] = None, quantity: Optional[int] = None) -> PantryItem:
        with self.store.transaction() as doc:
            row = _find(doc["items"], item_id)
            if row is None:
                raise ItemNotFound(item_id)
            if isinstance(name, str) and name.strip():
                row["name"] = name.strip()
            if quantity is not None:
                row["quantity"] = _clamp_quantity(quantity)
            item = self._to_item(row, self._barcode_index(doc))
        return item

    def delete_item(self, item_id: int) -> None:
        with self.store.transaction() as doc:
            if _find(doc["items"], item_id) is None:
                raise ItemNotFound(item_id)
            doc["items"] = [i for i in doc["items"] if i["id"] != item_id]

    # --- deductions --------------------------------------------------------
    def apply_decrements(self, batch: Iterable[Dict[str, Any]]) -> List[AppliedDeduction]:
        """Apply ``[{item_id, decrement}]`` as one all-or-nothing batch.

        Each entry decrements the quantity persisted at apply time (repeated item
        ids compound) and the result is clamped at zero. Any unknown item aborts
        the whole batch before anything is written. Returns the authoritative
        before/after per entry, in batch order.
        """
        batch = list(batch)
        applied: List[AppliedDeduction] = []
        if not batch:
            return applied
        with self.store.transaction() as doc:
            for entry in batch:
                item_id = entry["item_id"]
                decrement = max(0, int(entry["decrement"]))
                row = _find(doc["items"], item_id)
                if row is None:
                    raise ItemNotFound(item_id)
                before = max(0, int(row.get("quantity") or 0))
                after = max(0, before - decrement)
                row["quantity"] = after
                applied.append(AppliedDeduction(item_id, before, after, before - after))
        logger.info("Applied %d decrements: %s", len(applied), applied)
        return applied
