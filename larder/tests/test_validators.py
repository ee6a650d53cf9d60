import unittest
from pydantic import ValidationError

from larder.utilities.validators import CookInput, IngredientInput, RecipeInput


class TestIngredientInput(unittest.TestCase):

    def test_non_finite_qty_rejected(self):
        for bad in (float("nan"), float("inf"), float("-inf")):
            with self.assertRaises(ValidationError, msg=repr(bad)):
                IngredientInput(name="Leek", qty=bad)

    def test_missing_qty_allowed(self):
        self.assertIsNone(IngredientInput(name="Leek").qty)
        self.assertEqual(IngredientInput(name=" Leek ", qty=2).name, "Leek")


class TestRecipeInput(unittest.TestCase):

    def test_blank_ingredient_names_are_kept(self):
        recipe = RecipeInput(title="Soup", ingredients=[{"name": "Leek"}, {"name": "  "}])
        self.assertEqual([i.name for i in recipe.ingredients], ["Leek", ""])

    def test_nan_qty_in_recipe_rejected(self):
        with self.assertRaises(ValidationError):
            RecipeInput(title="Soup", ingredients=[{"name": "Leek", "qty": float("nan")}])


class TestCookInput(unittest.TestCase):

    def test_defaults(self):
        payload = CookInput()
        self.assertFalse(payload.deduct)
        self.assertEqual(payload.per_ingredient, 1)

    def test_non_finite_fallback_rejected(self):
        for bad in (float("inf"), float("nan"), -1):
            with self.assertRaises(ValidationError, msg=repr(bad)):
                CookInput(pantry_id=1, recipe_id=1, per_ingredient=bad)


if __name__ == '__main__':
    unittest.main()
