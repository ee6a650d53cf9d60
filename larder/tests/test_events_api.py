import httpx
import pytest

from larder.api.api_run import app
from larder.events import web_observers
from larder.infra import paths
from larder.tests.store_helpers import write_store


@pytest.mark.asyncio
async def test_committed_cook_shows_up_in_event_feed(tmp_path, monkeypatch):
    """A real cook publishes recipe.cooked which the web observers buffer."""
    store = write_store(tmp_path)
    monkeypatch.setattr(paths, "STORE_FILE", store.path)
    web_observers.start()
    cursor = web_observers.get_events()["next_cursor"]

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        simulated = await ac.post("/api/cook", json={"pantry_id": 1, "recipe_id": 1})
        assert simulated.status_code == 200, simulated.text
        feed = (await ac.get("/api/events", params={"since": cursor})).json()
        assert feed["events"] == []

        cooked = await ac.post("/api/cook", json={"pantry_id": 1, "recipe_id": 1, "deduct": True})
        assert cooked.status_code == 200, cooked.text
        feed = (await ac.get("/api/events", params={"since": cursor})).json()

    types = [e["type"] for e in feed["events"]]
    assert types[0] == "recipe.cooked"
    assert feed["events"][0]["title"] == "Spaghetti al Pomodoro"
    assert feed["next_cursor"] > cursor
