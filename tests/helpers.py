import httpx

TEST_SECRET = "test-secret-not-for-production"


async def register(client: httpx.AsyncClient, email="a@x.com", password="pw", full_name="Ann", **extra):
    """POST /api/auth/register and return the parsed body."""
    response = await client.post(
        "/api/auth/register",
        json={"email": email, "password": password, "fullName": full_name, **extra},
    )
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
