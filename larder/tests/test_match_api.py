import tempfile
import unittest
from fastapi.testclient import TestClient

from larder.api.api_run import app
from larder.api.dependencies import get_store
from larder.tests.store_helpers import write_store


class TestMatchAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        store = write_store(self._tmp.name)
        app.dependency_overrides[get_store] = lambda: store

    def tearDown(self):
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def test_single_recipe(self):
        resp = self.client.get('/api/match', params={'pantry_id': 1, 'recipe_id': 1})
        self.assertEqual(resp.status_code, 200)
        result = resp.json()['result']
        self.assertEqual(result['matched'], ['Spaghetti', 'Tomatoes'])
        self.assertEqual(result['missing'], ['Garlic'])
        self.assertEqual(result['counts'], {'matched': 2, 'missing': 1, 'total': 3})
        self.assertAlmostEqual(result['coverage'], 2 / 3)

    def test_ranking(self):
        resp = self.client.get('/api/match', params={'pantry_id': 1})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['count'], 3)
        self.assertEqual([r['recipe_id'] for r in data['results']], [2, 1, 3])

    def test_ranking_min_coverage_and_limit(self):
        resp = self.client.get('/api/match', params={'pantry_id': 1, 'min_coverage': 0.5, 'limit': 1})
        self.assertEqual([r['title'] for r in resp.json()['results']], ['Glass of Water'])

    def test_missing_pantry_id(self):
        resp = self.client.get('/api/match')
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['detail'], 'pantry_id required')

    def test_recipe_not_found(self):
        resp = self.client.get('/api/match', params={'pantry_id': 1, 'recipe_id': 999})
        self.assertEqual(resp.status_code, 404)

    def test_unknown_pantry_is_404(self):
        for params in ({'pantry_id': 99, 'recipe_id': 1}, {'pantry_id': 99}):
            resp = self.client.get('/api/match', params=params)
            self.assertEqual(resp.status_code, 404)
            self.assertEqual(resp.json()['detail'], 'pantry 99 not found')

    def test_empty_pantry_scores_everything_missing(self):
        self.client.post('/api/pantries', json={'name': 'Empty'})
        result = self.client.get('/api/match', params={'pantry_id': 3, 'recipe_id': 1}).json()['result']
        self.assertEqual(result['coverage'], 0.0)
        self.assertEqual(result['missing'], ['Spaghetti', 'Tomatoes', 'Garlic'])


if __name__ == '__main__':
    unittest.main()
