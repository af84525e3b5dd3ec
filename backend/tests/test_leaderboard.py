# tests for leaderboard router — positional ranks, podium stats, points history

from tests.conftest import ALEX_ID, JORDAN_ID, RILEY_ID, SAM_ID


class TestLeaderboard:

    async def test_sorted_with_positional_ranks(self, admin_client):
        resp = await admin_client.get("/api/leaderboard")
        assert resp.status_code == 200
        entries = resp.json()["entries"]
        assert [e["userId"] for e in entries] == [ALEX_ID, JORDAN_ID, SAM_ID, RILEY_ID]
        assert [e["rank"] for e in entries] == [1, 2, 3, 4]

    async def test_ties_get_distinct_ranks(self, admin_client):
        entries = (await admin_client.get("/api/leaderboard")).json()["entries"]
        assert entries[0]["totalPoints"] == entries[1]["totalPoints"] == 120
        assert entries[0]["rank"] != entries[1]["rank"]

    async def test_stats(self, admin_client):
        stats = (await admin_client.get("/api/leaderboard")).json()["stats"]
        assert stats["totalUsers"] == 4
        assert stats["totalPoints"] == 330
        assert stats["averagePoints"] == 83
        assert [p["userId"] for p in stats["topThree"]] == [ALEX_ID, JORDAN_ID, SAM_ID]

    async def test_empty_leaderboard(self, admin_client, mock_db):
        mock_db.user_points._data = []
        data = (await admin_client.get("/api/leaderboard")).json()
        assert data["entries"] == []
        assert data["stats"]["averagePoints"] == 0
        assert data["stats"]["topThree"] == []


class TestPointsHistory:

    async def test_history_newest_first(self, admin_client):
        resp = await admin_client.get(f"/api/leaderboard/{ALEX_ID}/history")
        assert resp.status_code == 200
        data = resp.json()
        assert data["userId"] == ALEX_ID
        assert [t["id"] for t in data["transactions"]] == ["tx_3", "tx_2", "tx_1"]

    async def test_summary(self, admin_client):
        data = (await admin_client.get(f"/api/leaderboard/{ALEX_ID}/history")).json()
        assert data["summary"] == {"totalEarned": 30, "totalAdjusted": -5}

    async def test_user_without_history(self, admin_client):
        data = (await admin_client.get(f"/api/leaderboard/{SAM_ID}/history")).json()
        assert data["transactions"] == []
        assert data["summary"] == {"totalEarned": 0, "totalAdjusted": 0}
