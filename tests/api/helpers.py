import httpx


async def register_and_login(client: httpx.AsyncClient, email: str = "amin@example.com") -> dict[str, str]:
    r = await client.post(
        "/api/v1/auth/register",
        json={"email": email, "name": "Amin", "password": "secret123"},
    )
    assert r.status_code == 201, r.text
    r = await client.post("/api/v1/auth/token", json={"email": email, "password": "secret123"})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}
