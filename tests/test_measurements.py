"""신체 치수 API 테스트 — 조회, 저장(업서트), 삭제, 테넌트 격리.

Measurements API tests — Retrieve, upsert, delete and tenant isolation.
"""

from httpx import AsyncClient

from app.repositories.measurement_repository import measurement_repository
from tests.conftest import auth_header

MEASUREMENTS = "/api/avatar/measurements"

BODY = {
    "height": 175.5,
    "weight": 70,
    "chest": 95,
    "waist": 80,
    "hips": 98,
    "inseam": 81,
}


class TestMeasurements:
    """신체 치수 CRUD 테스트."""

    async def test_retrieve_empty(self, client: AsyncClient, demo_token):
        """저장 전 조회 시 404."""
        res = await client.get(f"{MEASUREMENTS}/retrieve", headers=auth_header(demo_token))
        assert res.status_code == 404

    async def test_save_and_retrieve(self, client: AsyncClient, demo_token, demo_user):
        """저장 후 조회."""
        res = await client.post(f"{MEASUREMENTS}/save", json=BODY, headers=auth_header(demo_token))
        assert res.status_code == 200
        assert res.json()["user_id"] == demo_user.id
        assert res.json()["height"] == 175.5

        res = await client.get(f"{MEASUREMENTS}/retrieve", headers=auth_header(demo_token))
        assert res.status_code == 200
        assert res.json()["waist"] == 80

    async def test_save_twice_updates(self, client: AsyncClient, demo_token):
        """두 번 저장하면 같은 레코드 갱신."""
        first = await client.post(f"{MEASUREMENTS}/save", json=BODY, headers=auth_header(demo_token))
        second = await client.post(
            f"{MEASUREMENTS}/save", json={**BODY, "weight": 72.5}, headers=auth_header(demo_token)
        )
        assert second.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["weight"] == 72.5

    async def test_save_out_of_range(self, client: AsyncClient, demo_token):
        """범위 초과 값은 422."""
        res = await client.post(
            f"{MEASUREMENTS}/save", json={**BODY, "height": 301}, headers=auth_header(demo_token)
        )
        assert res.status_code == 422

    async def test_save_negative(self, client: AsyncClient, demo_token):
        res = await client.post(
            f"{MEASUREMENTS}/save", json={**BODY, "chest": -1}, headers=auth_header(demo_token)
        )
        assert res.status_code == 422

    async def test_save_body_details(self, client: AsyncClient, demo_token):
        """어깨, 목둘레, 소매, 허벅지, 피부색, 설명 저장."""
        body = {
            **BODY,
            "shoulders": 44,
            "neck_circumference": 38.5,
            "sleeve_length": 62,
            "thigh": 55,
            "skin_color": "Light",
            "description": "Athletic build",
        }
        res = await client.post(f"{MEASUREMENTS}/save", json=body, headers=auth_header(demo_token))
        assert res.status_code == 200

        res = await client.get(f"{MEASUREMENTS}/retrieve", headers=auth_header(demo_token))
        data = res.json()
        assert data["shoulders"] == 44
        assert data["neck_circumference"] == 38.5
        assert data["sleeve_length"] == 62
        assert data["thigh"] == 55
        assert data["skin_color"] == "Light"
        assert data["description"] == "Athletic build"

    async def test_body_details_default(self, client: AsyncClient, demo_token):
        """생략된 상세 항목은 0 / 빈 문자열."""
        res = await client.post(f"{MEASUREMENTS}/save", json=BODY, headers=auth_header(demo_token))
        assert res.json()["shoulders"] == 0
        assert res.json()["skin_color"] == ""

    async def test_body_details_out_of_range(self, client: AsyncClient, demo_token):
        res = await client.post(
            f"{MEASUREMENTS}/save", json={**BODY, "shoulders": 301}, headers=auth_header(demo_token)
        )
        assert res.status_code == 422

    async def test_first_save_race_updates_winner(self, client: AsyncClient, demo_token, monkeypatch):
        """동시 첫 저장 경합 — 중복 INSERT 대신 기존 레코드 갱신."""
        first = await client.post(f"{MEASUREMENTS}/save", json=BODY, headers=auth_header(demo_token))
        assert first.status_code == 200

        original = measurement_repository.get_by_user
        calls: list[int] = []

        async def stale_get_by_user(db, user_id):
            # 첫 조회는 경합 상대의 INSERT 이전 시점을 흉내냄
            calls.append(user_id)
            if len(calls) == 1:
                return None
            return await original(db, user_id)

        monkeypatch.setattr(measurement_repository, "get_by_user", stale_get_by_user)

        second = await client.post(
            f"{MEASUREMENTS}/save", json={**BODY, "weight": 68}, headers=auth_header(demo_token)
        )
        assert second.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["weight"] == 68
        assert len(calls) == 2

        monkeypatch.undo()
        res = await client.get(f"{MEASUREMENTS}/retrieve", headers=auth_header(demo_token))
        assert res.json()["weight"] == 68

    async def test_delete(self, client: AsyncClient, demo_token):
        """삭제 후 재삭제 시 404."""
        await client.post(f"{MEASUREMENTS}/save", json=BODY, headers=auth_header(demo_token))

        res = await client.delete(f"{MEASUREMENTS}/remove", headers=auth_header(demo_token))
        assert res.status_code == 200

        res = await client.get(f"{MEASUREMENTS}/retrieve", headers=auth_header(demo_token))
        assert res.status_code == 404

        res = await client.delete(f"{MEASUREMENTS}/remove", headers=auth_header(demo_token))
        assert res.status_code == 404

    async def test_requires_token(self, client: AsyncClient):
        res = await client.get(f"{MEASUREMENTS}/retrieve")
        assert res.status_code == 401


class TestMeasurementIsolation:
    """테넌트 격리 테스트."""

    async def test_other_user_cannot_see(self, client: AsyncClient, demo_token, other_token):
        """다른 사용자의 치수는 보이지 않음."""
        await client.post(f"{MEASUREMENTS}/save", json=BODY, headers=auth_header(demo_token))

        res = await client.get(f"{MEASUREMENTS}/retrieve", headers=auth_header(other_token))
        assert res.status_code == 404

    async def test_body_user_id_ignored(self, client: AsyncClient, demo_token, demo_user, other_user):
        """본문의 user_id는 무시되고 토큰의 사용자가 소유자."""
        res = await client.post(
            f"{MEASUREMENTS}/save",
            json={**BODY, "user_id": other_user.id},
            headers=auth_header(demo_token),
        )
        assert res.status_code == 200
        assert res.json()["user_id"] == demo_user.id

    async def test_other_user_delete_keeps_mine(self, client: AsyncClient, demo_token, other_token):
        await client.post(f"{MEASUREMENTS}/save", json=BODY, headers=auth_header(demo_token))

        res = await client.delete(f"{MEASUREMENTS}/remove", headers=auth_header(other_token))
        assert res.status_code == 404

        res = await client.get(f"{MEASUREMENTS}/retrieve", headers=auth_header(demo_token))
        assert res.status_code == 200
