"""WebSocket tests: live query subscriptions and countdown sockets."""

API = "/api/v1"


def _seed(client):
    client.post(f"{API}/launches/seed")
    return {l["name"]: l for l in client.get(f"{API}/launches/").json()}


def test_subscription_receives_new_comment(client, auth_headers):
    launch_id = _seed(client)["CRS-31"]["id"]
    headers = auth_headers("flight@spacex.com")

    with client.websocket_connect("/ws/subscribe") as ws:
        ws.send_json({"type": "subscribe", "id": "c1", "query": "comments.by_launch", "args": {"launch_id": launch_id}})
        initial = ws.receive_json()
        assert initial == {"type": "result", "id": "c1", "query": "comments.by_launch", "data": []}

        client.post(f"{API}/launches/{launch_id}/comments", json={"content": "T-minus!"}, headers=headers)

        update = ws.receive_json()
        assert update["id"] == "c1"
        assert [c["content"] for c in update["data"]] == ["T-minus!"]
        assert update["data"][0]["user_name"] == "flight"


def test_subscription_sees_status_change(client, auth_headers):
    launch_id = _seed(client)["CRS-31"]["id"]

    with client.websocket_connect("/ws/subscribe") as ws:
        ws.send_json({"type": "subscribe", "id": "live", "query": "launches.live", "args": {}})
        assert [l["name"] for l in ws.receive_json()["data"]] == ["Transporter-12"]

        client.patch(f"{API}/launches/{launch_id}/status", json={"status": "live"}, headers=auth_headers())

        names = [l["name"] for l in ws.receive_json()["data"]]
        assert sorted(names) == ["CRS-31", "Transporter-12"]


def test_subscription_errors(client):
    with client.websocket_connect("/ws/subscribe") as ws:
        ws.send_json({"type": "subscribe", "id": "x", "query": "launches.nope"})
        assert ws.receive_json() == {"type": "error", "id": "x", "detail": "Unknown query: launches.nope"}

        ws.send_json({"type": "subscribe", "id": "y", "query": "events.by_launch", "args": {}})
        assert ws.receive_json()["detail"] == "Missing arg: launch_id"

        ws.send_json({"type": "subscribe", "id": "z", "query": "launches.by_status", "args": {"status": "boom"}})
        assert ws.receive_json()["detail"].startswith("Invalid status")

        ws.send_json({"type": "ping", "id": "p"})
        assert ws.receive_json()["detail"] == "Unknown message type: ping"

        ws.send_json({"type": "subscribe", "id": "l", "query": ["launches.list"]})
        assert ws.receive_json() == {"type": "error", "id": "l", "detail": "Unknown query: ['launches.list']"}

        ws.send_json({"type": "subscribe", "id": "o", "query": {"name": "launches.list"}})
        assert ws.receive_json()["detail"].startswith("Unknown query")

        # Socket still serves valid subscriptions afterwards
        ws.send_json({"type": "subscribe", "id": "ok", "query": "launches.list"})
        assert ws.receive_json() == {"type": "result", "id": "ok", "query": "launches.list", "data": []}


def test_get_subscription_for_missing_launch_is_null(client):
    with client.websocket_connect("/ws/subscribe") as ws:
        ws.send_json({"type": "subscribe", "id": "g", "query": "launches.get", "args": {"id": 42}})
        assert ws.receive_json()["data"] is None


def test_countdown_socket_for_upcoming_launch(client):
    launch_id = _seed(client)["Starship Flight 7"]["id"]

    with client.websocket_connect(f"/ws/launches/{launch_id}/countdown") as ws:
        tick = ws.receive_json()

    assert tick["type"] == "countdown"
    assert tick["active"] is True
    assert tick["countdown"].startswith("T-13d ")


def test_countdown_socket_for_completed_launch(client):
    launch_id = _seed(client)["Crew-9"]["id"]

    with client.websocket_connect(f"/ws/launches/{launch_id}/countdown") as ws:
        message = ws.receive_json()

    assert message["active"] is False
    assert message["status"] == "completed"


def test_countdown_socket_unknown_launch(client):
    with client.websocket_connect("/ws/launches/9999/countdown") as ws:
        assert ws.receive_json() == {"type": "error", "detail": "Launch not found"}
