import unittest
from larder.logic.matching.normalizer import normalize, keys_match


class TestNormalize(unittest.TestCase):

    def test_punctuation_becomes_single_space(self):
        self.assertEqual(normalize("Canned-Tomatoes!!"), "canned tomatoes")

    def test_empty_and_none(self):
        self.assertEqual(normalize(""), "")
        self.assertEqual(normalize(None), "")

    def test_collapses_and_trims_whitespace(self):
        self.assertEqual(normalize("  Olive   OIL \t\n"), "olive oil")

    def test_only_symbols_is_unusable(self):
        self.assertEqual(normalize("!!! --- ???"), "")

    def test_keeps_digits(self):
        self.assertEqual(normalize("100% Juice (1L)"), "100 juice 1l")

    def test_non_ascii_letters_are_separators(self):
        self.assertEqual(normalize("Crème"), "cr me")

    def test_idempotent(self):
        for text in ["Canned-Tomatoes!!", "  a  b ", "Jalapeño Peppers", "", "x/y_z", "Tomatoes, diced (400g)"]:
            once = normalize(text)
            self.assertEqual(normalize(once), once)


class TestKeysMatch(unittest.TestCase):

    def test_exact(self):
        self.assertTrue(keys_match("spaghetti", "spaghetti"))

    def test_substring_both_directions(self):
        self.assertTrue(keys_match("olive", "olive oil"))
        self.assertTrue(keys_match("olive oil", "oil"))

    def test_known_loose_match(self):
        # Containment is intentionally loose: "egg" is satisfied by "eggplant"
        self.assertTrue(keys_match("egg", "eggplant"))
        self.assertTrue(keys_match("onion", "green onion"))

    def test_unrelated_and_empty(self):
        self.assertFalse(keys_match("rice", "bread"))
        self.assertFalse(keys_match("", "bread"))
        self.assertFalse(keys_match("rice", ""))


if __name__ == '__main__':
    unittest.main()
