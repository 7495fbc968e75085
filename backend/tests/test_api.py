"""
Tests for the HTTP API.
"""

from typing import List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from around_the_table.db import Base, get_db
from around_the_table.main import app
from around_the_table.platforms import ScoresProvider, GatewayError, get_scores_provider
from around_the_table.standings import CompletedGame


GAME_TIME = "2025-09-07T17:00:00Z"


class FakeScoresProvider(ScoresProvider):
    """Provider returning canned games, or failing on demand."""

    def __init__(self):
        self.games: List[CompletedGame] = []
        self.error = None
        self.calls = 0

    @property
    def provider_name(self) -> str:
        return "fake"

    async def fetch_completed_games(self, days_from: int = 3) -> List[CompletedGame]:
        self.calls += 1
        if self.error:
            raise self.error
        return self.games


@pytest.fixture
def provider():
    return FakeScoresProvider()


@pytest_asyncio.fixture
async def client(tmp_path, provider):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_scores_provider] = lambda: provider

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client

    app.dependency_overrides.clear()
    await engine.dispose()


async def add(client, player, team, opponent="Opponent", **extra):
    response = await client.post(
        "/api/picks", json={"player": player, "team": team, "opponent": opponent, **extra}
    )
    assert response.status_code == 201
    return response.json()


async def settle(client, week, team, won):
    response = await client.post("/api/picks/result", json={"week": week, "team": team, "won": won})
    assert response.status_code == 200
    return response.json()


class TestMeta:
    """Tests for health and root endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")
        assert response.json()["docs"] == "/api/docs"


class TestStandingsRoutes:
    """Tests for /api/standings."""

    @pytest.mark.asyncio
    async def test_fresh_season(self, client):
        response = await client.get("/api/standings")
        data = response.json()

        assert response.status_code == 200
        assert [row["name"] for row in data["rows"]] == ["Corey", "Jerry", "Larry", "Ramiz", "Bruno"]
        assert data["total_money"] == 0
        assert data["leader"] is None
        assert data["current_week"] == 1
        assert data["status"]["state"] == "in_progress"

    @pytest.mark.asyncio
    async def test_standings_after_results(self, client):
        await add(client, "Larry", "Carolina Panthers", week=1)
        await add(client, "Bruno", "Chicago Bears", week=1)
        await settle(client, 1, "Carolina Panthers", True)
        await settle(client, 1, "Chicago Bears", False)

        data = (await client.get("/api/standings")).json()

        assert data["rows"][0]["name"] == "Larry"
        assert data["rows"][0]["net_balance"] == 20
        assert data["rows"][0]["is_leader"] is True
        assert data["rows"][-1]["name"] == "Bruno"
        assert data["rows"][-1]["net_balance"] == -20
        assert data["leader"] == "Larry"
        assert data["total_money"] == 40

    @pytest.mark.asyncio
    async def test_payouts(self, client):
        await client.put("/api/players/Corey", json={"wins": 3, "losses": 0})
        await client.put("/api/players/Jerry", json={"wins": 0, "losses": 3})

        data = (await client.get("/api/standings/payouts")).json()
        jerry = next(row for row in data["rows"] if row["debtor"] == "Jerry")

        assert data["players"] == ["Corey", "Jerry", "Larry", "Ramiz", "Bruno"]
        assert jerry["owes"]["Corey"] == "$30.00"
        assert jerry["owes"]["Jerry"] == "-"

    @pytest.mark.asyncio
    async def test_season_complete(self, client):
        records = {"Corey": (9, 8), "Jerry": (12, 5), "Larry": (8, 9), "Ramiz": (7, 10), "Bruno": (10, 7)}
        for name, (wins, losses) in records.items():
            await client.put(f"/api/players/{name}", json={"wins": wins, "losses": losses})

        data = (await client.get("/api/standings/season")).json()
        assert data == {"state": "complete", "complete": True, "games_played": 17, "champion": "Jerry"}

    @pytest.mark.asyncio
    async def test_seasons_are_separate(self, client):
        await client.put("/api/players/Corey?season=2024", json={"wins": 5, "losses": 0})

        old = (await client.get("/api/standings?season=2024")).json()
        new = (await client.get("/api/standings?season=2025")).json()

        assert old["leader"] == "Corey"
        assert new["leader"] is None


class TestPicksRoutes:
    """Tests for /api/picks."""

    @pytest.mark.asyncio
    async def test_add_pick(self, client):
        pick = await add(client, "Corey", "Chicago Bears", "Green Bay Packers", week=2)

        assert pick["week"] == 2
        assert pick["result"] is None
        assert pick["is_underdog"] is True

    @pytest.mark.asyncio
    async def test_week_defaults_from_game_time(self, client):
        response = await client.post("/api/picks?season=2025", json={
            "player": "Corey", "team": "Chicago Bears", "opponent": "Green Bay Packers",
            "game_time": "2025-09-14T17:00:00Z",
        })
        assert response.json()["week"] == 2

    @pytest.mark.asyncio
    async def test_week_follows_the_season_opener(self, client):
        """The 2026 season opens on September 10."""
        response = await client.post("/api/picks?season=2026", json={
            "player": "Corey", "team": "Chicago Bears", "opponent": "Green Bay Packers",
            "game_time": "2026-09-13T17:00:00Z",
        })
        assert response.status_code == 201
        assert response.json()["week"] == 1

    @pytest.mark.asyncio
    async def test_week_defaults_to_current_week(self, client):
        pick = await add(client, "Corey", "Chicago Bears")
        assert pick["week"] == 1

    @pytest.mark.asyncio
    async def test_add_pick_unknown_player(self, client):
        response = await client.post(
            "/api/picks", json={"player": "Nobody", "team": "A", "opponent": "B", "week": 1}
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_add_pick_validation(self, client):
        response = await client.post("/api/picks", json={"player": "Corey", "team": "A"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_result_for_missing_pick(self, client):
        response = await client.post("/api/picks/result", json={"week": 1, "team": "A", "won": True})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_result_recorded_once(self, client):
        await add(client, "Ramiz", "Denver Broncos", week=1)
        pick = await settle(client, 1, "Denver Broncos", True)
        assert pick["result"] == "win"

        response = await client.post(
            "/api/picks/result", json={"week": 1, "team": "Denver Broncos", "won": False}
        )
        assert response.status_code == 409

        ramiz = (await client.get("/api/players/Ramiz/stats")).json()
        assert ramiz["wins"] == 1
        assert ramiz["losses"] == 0

    @pytest.mark.asyncio
    async def test_result_for_each_player_on_a_shared_team(self, client):
        await add(client, "Corey", "Chicago Bears", week=3)
        await add(client, "Jerry", "Chicago Bears", week=3)

        response = await client.post(
            "/api/picks/result",
            json={"week": 3, "team": "Chicago Bears", "won": True, "player": "Jerry"}
        )
        assert response.status_code == 200
        assert response.json()["player"] == "Jerry"

        corey = await settle(client, 3, "Chicago Bears", True)
        assert corey["player"] == "Corey"

        players = {p["name"]: p for p in (await client.get("/api/players")).json()}
        assert players["Corey"]["wins"] == 1
        assert players["Jerry"]["wins"] == 1

    @pytest.mark.asyncio
    async def test_list_and_filter(self, client):
        await add(client, "Corey", "Chicago Bears", week=1)
        await add(client, "Jerry", "New York Giants", week=2)
        await settle(client, 1, "Chicago Bears", True)

        all_picks = (await client.get("/api/picks")).json()
        pending = (await client.get("/api/picks?result=pending")).json()
        corey = (await client.get("/api/picks?player=Corey")).json()

        assert [p["week"] for p in all_picks] == [2, 1]
        assert [p["team"] for p in pending] == ["New York Giants"]
        assert [p["team"] for p in corey] == ["Chicago Bears"]

    @pytest.mark.asyncio
    async def test_invalid_result_filter(self, client):
        response = await client.get("/api/picks?result=draw")
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_current_week_and_week_stats(self, client):
        await add(client, "Corey", "Chicago Bears", week=1)
        await add(client, "Jerry", "New York Giants", week=1)
        await add(client, "Larry", "Carolina Panthers", week=3)

        current = (await client.get("/api/picks/current-week")).json()
        stats = (await client.get("/api/picks/weeks/1/stats")).json()

        assert {p["team"] for p in current} == {"Chicago Bears", "New York Giants"}
        assert stats["total_picks"] == 2
        assert stats["pending"] == 2
        assert stats["players"] == ["Corey", "Jerry"]


class TestPlayersRoutes:
    """Tests for /api/players."""

    @pytest.mark.asyncio
    async def test_list_players(self, client):
        players = (await client.get("/api/players")).json()
        assert players[0] == {"name": "Corey", "wins": 0, "losses": 0}
        assert len(players) == 5

    @pytest.mark.asyncio
    async def test_history_and_stats(self, client):
        await add(client, "Bruno", "Tennessee Titans", week=1)
        await add(client, "Bruno", "Houston Texans", week=2)
        await settle(client, 1, "Tennessee Titans", False)

        history = (await client.get("/api/players/Bruno/history")).json()
        stats = (await client.get("/api/players/Bruno/stats")).json()

        assert [p["team"] for p in history] == ["Tennessee Titans", "Houston Texans"]
        assert stats == {
            "player": "Bruno",
            "total_picks": 2,
            "wins": 0,
            "losses": 1,
            "pending": 1,
            "win_rate": 0.0,
        }

    @pytest.mark.asyncio
    async def test_unknown_player(self, client):
        assert (await client.get("/api/players/Nobody/stats")).status_code == 404
        assert (await client.get("/api/players/Nobody/history")).status_code == 404
        response = await client.put("/api/players/Nobody", json={"wins": 1, "losses": 0})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_manual_override_rejects_negative(self, client):
        response = await client.put("/api/players/Corey", json={"wins": -1, "losses": 0})
        assert response.status_code == 422


class TestResultsRoutes:
    """Tests for /api/results/check."""

    @pytest.mark.asyncio
    async def test_no_pending_picks_skips_provider(self, client, provider):
        data = (await client.post("/api/results/check")).json()

        assert data["updated"] == 0
        assert data["message"] == "No pending picks found for result checking"
        assert data["last_checked"] is None
        assert provider.calls == 0

    @pytest.mark.asyncio
    async def test_settles_finished_games(self, client, provider):
        await add(client, "Corey", "Chicago Bears", "Green Bay Packers", game_time=GAME_TIME)
        await add(client, "Jerry", "Jacksonville Jaguars", "Buffalo Bills", game_time=GAME_TIME)
        provider.games = [CompletedGame.from_api({
            "home_team": "Chicago Bears",
            "away_team": "Green Bay Packers",
            "commence_time": GAME_TIME,
            "completed": True,
            "scores": [
                {"name": "Chicago Bears", "score": "24"},
                {"name": "Green Bay Packers", "score": "21"},
            ],
        })]

        data = (await client.post("/api/results/check")).json()

        assert data["updated"] == 1
        assert data["pending"] == 1
        assert data["message"] == "Updated 1 pick results"
        assert data["last_checked"] is not None

        corey = (await client.get("/api/players/Corey/history")).json()[0]
        assert corey["result"] == "win"
        assert corey["final_score"] == "Green Bay Packers 21 - Chicago Bears 24"

    @pytest.mark.asyncio
    async def test_nothing_new(self, client, provider):
        await add(client, "Corey", "Chicago Bears", game_time=GAME_TIME)

        data = (await client.post("/api/results/check")).json()

        assert data["updated"] == 0
        assert data["message"] == "No new results to update"

    @pytest.mark.asyncio
    async def test_provider_failure_leaves_state_untouched(self, client, provider):
        await add(client, "Corey", "Chicago Bears", game_time=GAME_TIME)
        provider.error = GatewayError("API request failed: 500")

        response = await client.post("/api/results/check")

        assert response.status_code == 502
        assert response.json()["detail"] == "Error checking results: API request failed: 500"
        pending = (await client.get("/api/picks?result=pending")).json()
        assert len(pending) == 1


class TestBackupRoutes:
    """Tests for /api/backup."""

    @pytest.mark.asyncio
    async def test_export_then_import(self, client):
        await add(client, "Corey", "Chicago Bears", week=1)
        await settle(client, 1, "Chicago Bears", True)
        backup = (await client.get("/api/backup")).json()

        assert backup["currentWeek"] == 1
        assert backup["players"][0]["wins"] == 1

        response = await client.post("/api/backup?season=2024", json=backup)
        assert response.json() == {"success": True}

        restored = (await client.get("/api/players?season=2024")).json()
        assert restored[0] == {"name": "Corey", "wins": 1, "losses": 0}

    @pytest.mark.asyncio
    async def test_import_rejects_unusable_data(self, client):
        await client.put("/api/players/Corey", json={"wins": 2, "losses": 0})

        response = await client.post("/api/backup", content=b"not json")

        assert response.json() == {"success": False}
        players = (await client.get("/api/players")).json()
        assert players[0]["wins"] == 2
