"""
HTTP-level tests: routing, error mapping and the end-to-end flows.
"""

from datetime import datetime, timedelta, timezone

from skillsprout.core.security import TokenIssuer

from tests.helpers import TEST_SECRET, bearer, register


class TestAuthRoutes:
    async def test_register_returns_public_user_and_token(self, client):
        body = await register(client)
        user = body["user"]
        assert user["email"] == "a@x.com"
        assert user["fullName"] == "Ann"
        assert (user["xp"], user["streak"], user["hearts"]) == (0, 0, 5)
        assert body["token"]
        assert not any("password" in key.lower() for key in user)

    async def test_register_missing_field(self, client):
        response = await client.post("/api/auth/register", json={"email": "a@x.com", "password": "pw"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    async def test_register_twice(self, client):
        await register(client)
        response = await client.post(
            "/api/auth/register",
            json={"email": "a@x.com", "password": "pw2", "fullName": "Other"},
        )
        assert response.status_code == 409
        assert response.json() == {"error": "Email already registered"}

        login = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw"})
        assert login.json()["user"]["fullName"] == "Ann"

    async def test_login_failures_are_indistinguishable(self, client):
        await register(client)
        wrong_password = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "bad"})
        unknown_email = await client.post("/api/auth/login", json={"email": "b@x.com", "password": "pw"})

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json() == {"error": "Invalid email or password"}


class TestCourseRoutes:
    async def test_save_and_fetch(self, client):
        response = await client.post(
            "/api/courses",
            json={"course": {"id": "c1", "topic": "Go"}, "generatedByName": "Ann", "isPublic": True},
        )
        assert response.json() == {"success": True, "id": "c1"}

        fetched = await client.get("/api/courses/c1")
        assert fetched.status_code == 200
        assert fetched.json() == {"course": {"id": "c1", "topic": "Go"}, "generatedByName": "Ann"}

    async def test_invalid_course(self, client):
        response = await client.post("/api/courses", json={"course": {"id": "c1"}})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid course data"}

    async def test_unknown_course(self, client):
        response = await client.get("/api/courses/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Course not found"}

    async def test_list_with_topic_and_limit(self, client):
        for course_id, topic in [("c1", "Go"), ("c2", "Golang tips"), ("c3", "Rust")]:
            await client.post("/api/courses", json={"course": {"id": course_id, "topic": topic}})

        response = await client.get("/api/courses", params={"topic": "go", "limit": 1})
        assert response.status_code == 200
        courses = response.json()["courses"]
        assert len(courses) == 1
        assert courses[0]["id"] in {"c1", "c2"}

    async def test_list_rejects_bad_limit(self, client):
        response = await client.get("/api/courses", params={"limit": 0})
        assert response.status_code == 422


class TestProgressRoutes:
    async def test_requires_bearer_token(self, client):
        post = await client.post("/api/progress", json={"courseId": "c1", "progressData": {"n": 1}})
        get = await client.get("/api/progress")
        assert post.status_code == get.status_code == 401
        assert post.json() == get.json() == {"error": "Unauthorized"}

    async def test_rejects_bad_token(self, client):
        response = await client.get("/api/progress", headers=bearer("not-a-token"))
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    async def test_rejects_expired_token(self, client):
        body = await register(client)
        expired = TokenIssuer(TEST_SECRET).issue(
            body["user"]["id"], now=datetime.now(timezone.utc) - timedelta(days=31)
        )
        response = await client.post(
            "/api/progress",
            json={"courseId": "c1", "progressData": {"n": 1}},
            headers=bearer(expired),
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    async def test_missing_fields(self, client):
        token = (await register(client))["token"]
        response = await client.post("/api/progress", json={"courseId": "c1"}, headers=bearer(token))
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    async def test_sync_and_read_back(self, client):
        token = (await register(client))["token"]
        headers = bearer(token)

        await client.post("/api/progress", json={"courseId": "c1", "progressData": {"n": 1}}, headers=headers)
        await client.post("/api/progress", json={"courseId": "c1", "progressData": {"n": 2}}, headers=headers)
        await client.post("/api/progress", json={"courseId": "c2", "progressData": {"n": 3}}, headers=headers)

        one = await client.get("/api/progress", params={"courseId": "c1"}, headers=headers)
        assert one.json() == {"progress": {"n": 2}}

        missing = await client.get("/api/progress", params={"courseId": "c9"}, headers=headers)
        assert missing.json() == {"progress": None}

        everything = await client.get("/api/progress", headers=headers)
        assert everything.json() == {"progress": {"c1": {"n": 2}, "c2": {"n": 3}}}

    async def test_progress_is_per_user(self, client):
        ann = (await register(client))["token"]
        bob = (await register(client, email="b@x.com", full_name="Bob"))["token"]

        await client.post("/api/progress", json={"courseId": "c1", "progressData": {"n": 1}}, headers=bearer(ann))

        response = await client.get("/api/progress", headers=bearer(bob))
        assert response.json() == {"progress": {}}


class TestEndToEnd:
    async def test_register_login_save_fetch(self, client):
        registered = await register(client, email="a@x.com", password="pw", full_name="Ann")
        assert registered["user"]["xp"] == 0
        assert registered["user"]["hearts"] == 5
        user_id = registered["user"]["id"]

        login = await client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw"})
        assert login.status_code == 200
        assert login.json()["user"]["id"] == user_id
        assert login.json()["token"]

        await client.post(
            "/api/courses",
            json={"course": {"id": "c1", "topic": "Go"}, "userId": user_id, "generatedByName": "Ann"},
        )
        # anonymous re-save keeps the attribution
        await client.post("/api/courses", json={"course": {"id": "c1", "topic": "Go"}})

        fetched = (await client.get("/api/courses/c1")).json()
        assert fetched["course"]["topic"] == "Go"
        assert fetched["generatedByName"] == "Ann"


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
