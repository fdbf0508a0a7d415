"""Request Count Routes: /requests tracks and reads the per-domain counter.

Invariants:
    - Same 401/400 rules as the offer routes
    - POST increments by one; GET is a pure read
    - Offers for a domain never change its request counter, and vice versa
"""


async def test_request_count_requires_auth(client):
    res = await client.get("/requests?domain=example.com")
    assert res.status_code == 401
    assert res.text == "Unauthorized"


async def test_request_count_requires_domain(client, auth_headers):
    res = await client.post("/requests", headers=auth_headers)
    assert res.status_code == 400
    assert res.text == "Domain parameter is required"


async def test_unseen_domain_has_zero_requests(client, auth_headers):
    res = await client.get("/requests?domain=example.com", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {"domain": "example.com", "count": 0}


async def test_track_request_increments(client, auth_headers):
    counts = []
    for _ in range(3):
        res = await client.post("/requests?domain=example.com", headers=auth_headers)
        assert res.status_code == 200
        counts.append(res.json()["count"])
    assert counts == [1, 2, 3]
    assert res.json()["timestamp"].endswith("Z")

    res = await client.get("/requests?domain=example.com", headers=auth_headers)
    assert res.json()["count"] == 3


async def test_counter_and_offers_do_not_collide(client, auth_headers):
    await client.post("/requests?domain=example.com", headers=auth_headers)
    await client.post(
        "/?domain=example.com", headers=auth_headers,
        json={"email": "a@b.com", "amount": 500},
    )
    await client.post("/requests?domain=example.com", headers=auth_headers)

    count = (await client.get("/requests?domain=example.com", headers=auth_headers)).json()
    offers = (await client.get("/?domain=example.com", headers=auth_headers)).json()
    assert count["count"] == 2
    assert len(offers["offers"]) == 1
