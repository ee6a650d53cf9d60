import tempfile
import unittest
from pathlib import Path

from larder.domain.errors import ItemNotFound, PantryNotFound
from larder.infra.json_store import JsonStore
from larder.infra.Pantry_Repository import PantryRepository
from larder.tests.store_helpers import quantities, read_raw, write_store


class TestPantryRepository(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = write_store(self._tmp.name)
        self.repo = PantryRepository(self.store)

    def tearDown(self):
        self._tmp.cleanup()

    def test_load_pantry_items_with_alias(self):
        items = self.repo.load_pantry_items(1)
        self.assertEqual([i.name for i in items], ["Spaghetti", "Canned Tomatoes"])
        self.assertIsNone(items[0].alias)
        self.assertEqual(items[1].alias, "Tomatoes")

    def test_unknown_pantry(self):
        with self.assertRaises(PantryNotFound):
            self.repo.load_pantry_items(99)

    def test_add_item_clamps_quantity_and_upserts_barcode(self):
        item = self.repo.add_item(1, "  Passata ", 0, barcode_code="012345678905", barcode_label="Tomato passata")
        self.assertEqual(item.name, "Passata")
        self.assertEqual(item.quantity, 1)
        # the shared barcode label changed for the older item too
        self.assertEqual(self.repo.get_item(2).alias, "Tomato passata")
        self.assertEqual(len(self.store.read()["barcodes"]), 1)

    def test_add_item_new_barcode_without_label(self):
        item = self.repo.add_item(2, "Rice", 3, barcode_code="555")
        self.assertIsNotNone(item.barcode)
        self.assertIsNone(item.alias)

    def test_add_item_requires_name_and_pantry(self):
        with self.assertRaises(ValueError):
            self.repo.add_item(1, "   ")
        with self.assertRaises(PantryNotFound):
            self.repo.add_item(42, "Rice")

    def test_update_item(self):
        item = self.repo.update_item(1, name="Linguine", quantity=-5)
        self.assertEqual(item.name, "Linguine")
        self.assertEqual(item.quantity, 1)
        with self.assertRaises(ItemNotFound):
            self.repo.update_item(77, quantity=3)

    def test_delete_pantry_cascades(self):
        self.repo.delete_pantry(1)
        self.assertEqual([p.id for p in self.repo.list_pantries()], [2])
        self.assertEqual([i.id for i in self.repo.list_items()], [3])

    def test_list_items_newest_first(self):
        self.assertEqual([i.id for i in self.repo.list_items()], [3, 2, 1])
        self.assertEqual([i.id for i in self.repo.list_items(pantry_id=1)], [2, 1])


class TestApplyDecrements(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.store = write_store(self._tmp.name)
        self.repo = PantryRepository(self.store)

    def tearDown(self):
        self._tmp.cleanup()

    def test_applies_batch(self):
        applied = self.repo.apply_decrements([{"item_id": 1, "decrement": 1}, {"item_id": 2, "decrement": 1}])
        self.assertEqual([a.to_dict() for a in applied], [
            {"item_id": 1, "quantity_before": 2, "quantity_after": 1, "decrement_applied": 1},
            {"item_id": 2, "quantity_before": 4, "quantity_after": 3, "decrement_applied": 1},
        ])
        self.assertEqual(quantities(self.store), {1: 1, 2: 3, 3: 3})

    def test_clamps_at_zero(self):
        applied = self.repo.apply_decrements([{"item_id": 1, "decrement": 10}])
        self.assertEqual(applied[0].quantity_after, 0)
        self.assertEqual(applied[0].decrement_applied, 2)
        self.assertEqual(quantities(self.store)[1], 0)

    def test_repeated_item_compounds(self):
        applied = self.repo.apply_decrements([{"item_id": 2, "decrement": 3}, {"item_id": 2, "decrement": 3}])
        self.assertEqual([(a.quantity_before, a.quantity_after) for a in applied], [(4, 1), (1, 0)])

    def test_unknown_item_aborts_whole_batch(self):
        before = read_raw(self.store)
        with self.assertRaises(ItemNotFound):
            self.repo.apply_decrements([{"item_id": 1, "decrement": 1}, {"item_id": 404, "decrement": 1}])
        self.assertEqual(read_raw(self.store), before)

    def test_empty_batch_writes_nothing(self):
        before = read_raw(self.store)
        self.assertEqual(self.repo.apply_decrements([]), [])
        self.assertEqual(read_raw(self.store), before)


class TestMissingStore(unittest.TestCase):

    def test_missing_file_reads_as_empty(self):
        with tempfile.TemporaryDirectory() as tmp:
            repo = PantryRepository(JsonStore(Path(tmp) / "absent.json"))
            self.assertEqual(repo.list_pantries(), [])
            pantry = repo.create_pantry("Fresh")
            self.assertEqual(pantry.id, 1)
            self.assertTrue((Path(tmp) / "absent.json").exists())


if __name__ == '__main__':
    unittest.main()
