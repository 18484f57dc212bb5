# tests/test_http_connector.py

from __future__ import annotations

from .fakes import FakeClock


def _create(client, title: str, due: int, content: str = "x"):
    return client.post("/todo", json={"title": title, "content": content, "dueDate": str(due)})


def test_health(client) -> None:
    resp = client.get("/todo/health")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "OK"


def test_create_and_duplicate(client, clock: FakeClock) -> None:
    resp = _create(client, "A", clock.now + 1000)
    assert resp.status_code == 200
    assert resp.get_json() == {"result": 1, "errorMessage": None}

    resp = _create(client, "A", clock.now + 1000)
    assert resp.status_code == 409
    body = resp.get_json()
    assert body["result"] is None
    assert body["errorMessage"] == "Error: TODO with the title [A] already exists in the system"


def test_create_past_due_date_is_conflict(client, clock: FakeClock) -> None:
    resp = _create(client, "old", clock.now)
    assert resp.status_code == 409
    assert "due date is in the past" in resp.get_json()["errorMessage"]


def test_create_accepts_numeric_due_date(client, clock: FakeClock) -> None:
    resp = client.post("/todo", json={"title": "n", "content": "", "dueDate": clock.now + 5})
    assert resp.status_code == 200
    assert resp.get_json()["result"] == 1


def test_create_malformed_input_is_bad_request(client, clock: FakeClock) -> None:
    resp = client.post("/todo", json={"title": "x", "content": "", "dueDate": "soon"})
    assert resp.status_code == 400
    assert resp.get_json()["result"] is None

    resp = client.post("/todo", json={"content": "", "dueDate": str(clock.now + 10)})
    assert resp.status_code == 400

    resp = client.post("/todo", data="not json", content_type="text/plain")
    assert resp.status_code == 400

    assert client.get("/todo/size?status=ALL").get_json() == {"result": 0}


def test_size(client, clock: FakeClock) -> None:
    _create(client, "A", clock.now + 100)
    _create(client, "B", clock.now + 10_000)
    client.put("/todo?id=2&status=DONE")
    clock.advance(1_000)

    assert client.get("/todo/size?status=ALL").get_json() == {"result": 2}
    assert client.get("/todo/size?status=PENDING").get_json() == {"result": 1}
    assert client.get("/todo/size?status=DONE").get_json() == {"result": 1}
    assert client.get("/todo/size?status=LATE").get_json() == {"result": 1}


def test_size_invalid_filter(client) -> None:
    resp = client.get("/todo/size?status=BOGUS")
    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Bad Request: Invalid status filter"

    assert client.get("/todo/size").status_code == 400


def test_content_sorted_and_filtered(client, clock: FakeClock) -> None:
    _create(client, "b", clock.now + 300)
    _create(client, "a", clock.now + 200)
    _create(client, "c", clock.now + 100)

    resp = client.get("/todo/content?status=ALL&sortBy=TITLE")
    assert resp.status_code == 200
    assert [t["title"] for t in resp.get_json()] == ["a", "b", "c"]

    resp = client.get("/todo/content?status=ALL&sortBy=DUE_DATE")
    assert [t["title"] for t in resp.get_json()] == ["c", "a", "b"]

    resp = client.get("/todo/content?status=ALL")
    items = resp.get_json()
    assert [t["id"] for t in items] == [1, 2, 3]
    assert set(items[0]) == {"id", "title", "content", "status", "dueDate"}

    client.put("/todo?id=1&status=LATE")
    resp = client.get("/todo/content?status=LATE")
    assert [t["title"] for t in resp.get_json()] == ["b"]


def test_content_validation(client) -> None:
    resp = client.get("/todo/content?status=NOPE")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid status parameter"}

    resp = client.get("/todo/content?status=ALL&sortBy=NOPE")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid sortBy parameter"}


def test_update_status(client, clock: FakeClock) -> None:
    _create(client, "A", clock.now + 100)

    resp = client.put("/todo?id=1&status=DONE")
    assert resp.status_code == 200
    assert resp.get_json() == {"result": "PENDING", "errorMessage": None}

    resp = client.put("/todo?id=1&status=PENDING")
    assert resp.get_json()["result"] == "DONE"


def test_update_status_errors(client, clock: FakeClock) -> None:
    resp = client.put("/todo?id=999&status=DONE")
    assert resp.status_code == 404
    assert resp.get_json() == {"result": None, "errorMessage": "Error: no such TODO with id 999"}

    _create(client, "A", clock.now + 100)
    resp = client.put("/todo?id=1&status=WHATEVER")
    assert resp.status_code == 400
    assert resp.get_json()["errorMessage"] == "Error: status should be one of PENDING, LATE, or DONE"

    resp = client.put("/todo?id=abc&status=DONE")
    assert resp.status_code == 404


def test_delete_renumbers(client, clock: FakeClock) -> None:
    _create(client, "A", clock.now + 1000)
    _create(client, "B", clock.now + 1000)

    resp = client.delete("/todo?id=1")
    assert resp.status_code == 200
    assert resp.get_json() == {"result": 1, "errorMessage": None}

    items = client.get("/todo/content?status=ALL").get_json()
    assert [(t["id"], t["title"]) for t in items] == [(1, "B")]

    resp = _create(client, "C", clock.now + 1000)
    assert resp.get_json()["result"] == 3


def test_delete_not_found(client) -> None:
    resp = client.delete("/todo?id=7")
    assert resp.status_code == 404
    assert resp.get_json() == {"result": None, "errorMessage": "Error: no such TODO with id 7"}
