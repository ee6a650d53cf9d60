import unittest
from larder.domain.Consumption import ConsumptionPlan, PlannedDeduction
from larder.domain.PantryItem import PantryItem
from larder.domain.Recipe import Recipe, RecipeIngredient
from larder.domain.errors import require_id
from larder.logic.pantry.analysis import compute_pantry_snapshot


class TestRecipeIngredient(unittest.TestCase):

    def test_from_dict_keeps_only_real_numbers(self):
        self.assertEqual(RecipeIngredient.from_dict({"name": "Eggs", "qty": 2}).qty, 2.0)
        self.assertIsNone(RecipeIngredient.from_dict({"name": "Eggs", "qty": "2"}).qty)
        self.assertIsNone(RecipeIngredient.from_dict({"name": "Eggs", "qty": True}).qty)

    def test_blank_unit_is_none(self):
        self.assertIsNone(RecipeIngredient.from_dict({"name": "Salt", "unit": "  "}).unit)
        self.assertEqual(RecipeIngredient.from_dict({"name": "Salt", "unit": " tsp "}).unit, "tsp")

    def test_recipe_round_trip_keeps_blank_names(self):
        recipe = Recipe.from_dict({"id": 5, "title": "Toast", "ingredients": [{"name": "Bread"}, {"name": " "}]})
        self.assertEqual(recipe.ingredient_names, ["Bread", ""])
        self.assertEqual(Recipe.from_dict(recipe.to_dict()).to_dict(), recipe.to_dict())


class TestPantryItem(unittest.TestCase):

    def test_negative_quantity_rejected(self):
        with self.assertRaises(ValueError):
            PantryItem(1, "Salt", -1)

    def test_from_dict_floors_bad_quantity(self):
        self.assertEqual(PantryItem.from_dict({"id": 1, "name": "Salt", "quantity": -3}).quantity, 0)
        self.assertEqual(PantryItem.from_dict({"id": 1, "name": "Salt", "quantity": "lots"}).quantity, 0)


class TestConsumptionPlan(unittest.TestCase):

    def test_empty_plan_is_full_coverage(self):
        self.assertEqual(ConsumptionPlan().coverage, 1.0)

    def test_coverage_and_batch(self):
        plan = ConsumptionPlan([PlannedDeduction("Eggs", 1, 5, 2)], ["Milk", "Flour"], total=3)
        self.assertAlmostEqual(plan.coverage, 1 / 3)
        self.assertEqual(plan.batch(), [{"item_id": 1, "decrement": 2}])


class TestRequireId(unittest.TestCase):

    def test_accepts_positive_integers(self):
        self.assertEqual(require_id(3, "pantry_id"), 3)
        self.assertEqual(require_id("4", "pantry_id"), 4)
        self.assertEqual(require_id(2.0, "pantry_id"), 2)

    def test_rejects_everything_else(self):
        for bad in (0, -2, None, "", "x", True, 2.5, float("inf"), float("nan")):
            with self.assertRaises(ValueError, msg=repr(bad)):
                require_id(bad, "pantry_id")


class TestPantrySnapshot(unittest.TestCase):

    def test_low_stock_and_depleted(self):
        items = [PantryItem(1, "Rice", 0), PantryItem(2, "Eggs", 2), PantryItem(3, "Beans", 1), PantryItem(4, "Oil", 9)]
        low, depleted = compute_pantry_snapshot(items, threshold=2)
        self.assertEqual([i["name"] for i in low], ["Beans", "Eggs"])
        self.assertEqual(depleted, [{"item_id": 1, "name": "Rice"}])


if __name__ == '__main__':
    unittest.main()
