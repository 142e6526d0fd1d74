def _hit(client, roll="1234567890", name="Asha", shot=4):
    return client.post("/hit", json={"rollNumber": roll, "name": name, "shot": shot})


def test_hit_recorded(client, store):
    res = _hit(client)
    assert res.status_code == 200
    assert res.json() == {"message": "Shot recorded successfully"}
    assert store.score_of("1234567890") == 4


def test_hit_bad_roll_number(client):
    res = _hit(client, roll="12345")
    assert res.status_code == 400
    assert res.json() == {"error": "Roll number must be exactly 10 digits"}


def test_hit_missing_fields_use_empty_defaults(client):
    res = client.post("/hit", json={"rollNumber": "1234567890"})
    assert res.status_code == 400
    assert res.json() == {"error": "Name is required"}


def test_hit_rate_limited(client, store, clock):
    assert _hit(client, shot=4).status_code == 200
    res = _hit(client, shot=6)
    assert res.status_code == 429
    assert res.json() == {"error": "Too many requests. Please wait a few seconds."}
    assert store.score_of("1234567890") == 4

    clock.advance(2.0)
    assert _hit(client, shot=6).status_code == 200
    assert store.score_of("1234567890") == 10


def test_hit_unparsable_body(client, rate_limiter, store):
    res = client.post("/hit", content=b"{not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.text == "Invalid input"
    assert len(rate_limiter) == 0
    assert store.writes == 0


def test_hit_wrong_types(client):
    res = client.post("/hit", json={"rollNumber": "1234567890", "name": "Asha", "shot": "4"})
    assert res.status_code == 400
    assert res.text == "Invalid input"


def test_hit_store_failure(client, store):
    store.fail = True
    res = _hit(client)
    assert res.status_code == 500
    assert res.text == "Error updating score"


def test_scoreboard_payload(client, store):
    store.seed("1000000001", "A", 10)
    store.seed("1000000002", "B", 25)
    store.seed("1000000003", "C", 0)

    res = client.get("/scoreboard")
    assert res.status_code == 200
    body = res.json()
    assert [row["rollNumber"] for row in body] == ["1000000002", "1000000001", "1000000003"]
    assert set(body[0]) == {"rollNumber", "name", "score", "lastPlayed"}
    assert body[0]["score"] == 25


def test_scoreboard_empty_list(client):
    res = client.get("/scoreboard")
    assert res.status_code == 200
    assert res.json() == []


def test_scoreboard_store_failure(client, store):
    store.fail = True
    res = client.get("/scoreboard")
    assert res.status_code == 500
    assert res.text == "Error fetching scoreboard"


def test_cors_headers_on_every_response(client):
    res = _hit(client, roll="bad")
    assert res.headers["access-control-allow-origin"] == "*"
    assert res.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"
    assert res.headers["access-control-allow-headers"] == "*"


def test_options_short_circuits(client, store):
    res = client.options("/hit")
    assert res.status_code == 200
    assert res.content == b""
    assert res.headers["access-control-allow-origin"] == "*"
    assert store.writes == 0


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_sweeper_prunes_expired_entries_during_lifespan(store, rate_limiter, scoreboard_cache, clock):
    import time

    from fastapi.testclient import TestClient

    from cricket_league.app import create_app

    app = create_app(
        store=store,
        rate_limiter=rate_limiter,
        scoreboard_cache=scoreboard_cache,
        sweep_interval=0.01,
    )
    with TestClient(app) as test_client:
        assert _hit(test_client).status_code == 200
        assert len(rate_limiter) == 1

        clock.advance(2.5)
        deadline = time.monotonic() + 5.0
        while len(rate_limiter) and time.monotonic() < deadline:
            time.sleep(0.01)

        assert len(rate_limiter) == 0
        # A swept identity is accepted straight away.
        assert _hit(test_client, shot=6).status_code == 200
    assert store.score_of("1234567890") == 10


def test_sweep_loop_keeps_live_entries(rate_limiter, clock):
    import asyncio

    from cricket_league.app import _sweep_rate_limits

    rate_limiter.record("1111111111")
    clock.advance(2.0)
    rate_limiter.record("2222222222")

    async def run_briefly():
        task = asyncio.create_task(_sweep_rate_limits(rate_limiter, 0.01))
        for _ in range(500):
            await asyncio.sleep(0.01)
            if len(rate_limiter) == 1:
                break
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    asyncio.run(run_briefly())

    assert len(rate_limiter) == 1
    assert rate_limiter.check("2222222222") is True


def test_hit_oversized_shot_rejected(client, rate_limiter, store):
    res = _hit(client, shot=2**70)
    assert res.status_code == 400
    assert res.text == "Invalid input"
    assert len(rate_limiter) == 0
    assert store.writes == 0


def test_hit_int64_bounds_accepted(client, store, clock):
    assert _hit(client, shot=2**63 - 1).status_code == 200
    clock.advance(2.0)
    assert _hit(client, roll="1234567891", shot=-(2**63)).status_code == 200


def test_hit_null_fields_use_empty_defaults(client, store):
    res = client.post("/hit", json={"rollNumber": "1234567890", "name": None, "shot": 4})
    assert res.status_code == 400
    assert res.json() == {"error": "Name is required"}

    res = client.post("/hit", json={"rollNumber": None, "name": "Asha", "shot": 4})
    assert res.status_code == 400
    assert res.json() == {"error": "Roll number must be exactly 10 digits"}

    res = client.post("/hit", json={"rollNumber": "1234567890", "name": "Asha", "shot": None})
    assert res.status_code == 200
    assert store.score_of("1234567890") == 0
