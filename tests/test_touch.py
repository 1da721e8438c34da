"""Tests for the touch endpoints."""


def _touch(**overrides):
    event = {"timestamp": 100, "x": 1, "y": 2, "type": "tap"}
    event.update(overrides)
    return event


class TestTouchEndpoints:

    def test_store_and_filter_by_type(self, client):
        response = client.post("/api/touch", json={"touchData": [_touch()]})

        assert response.status_code == 201
        assert response.json()["count"] == 1

        body = client.get("/api/touch/type/tap").json()
        assert body["count"] == 1
        assert body["data"][0]["x"] == 1
        assert client.get("/api/touch/type/swipe").json()["count"] == 0

    def test_epoch_millis_are_normalized(self, client):
        client.post("/api/touch", json={"touchData": [_touch(timestamp=1700000000000)]})

        event = client.get("/api/touch").json()["data"][0]

        assert event["timestamp"].startswith("2023-11-14T22:13:20")

    def test_swipe_fields(self, client):
        swipe = _touch(type="swipe", direction="left", endX=40, endY=2, durationMs=180, deviceId="d1")

        client.post("/api/touch", json={"touchData": [swipe, _touch(direction=None)]})

        body = client.get("/api/touch/type/swipe").json()
        event = body["data"][0]
        assert body["count"] == 1
        assert event["direction"] == "left"
        assert event["endX"] == 40
        assert event["durationMs"] == 180
        assert event["deviceId"] == "d1"

    def test_missing_touch_data(self, client):
        response = client.post("/api/touch", json={"events": [_touch()]})

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": 'Invalid data format. Expected a "touchData" array.',
        }

    def test_touch_data_must_be_array(self, client):
        response = client.post("/api/touch", json={"touchData": _touch()})

        assert response.status_code == 400

    def test_invalid_type_rejects_batch(self, client):
        response = client.post("/api/touch", json={"touchData": [_touch(), _touch(type="pinch")]})

        assert response.status_code == 400
        assert "touchData[1]" in response.json()["error"]
        assert client.get("/api/touch").json()["count"] == 0

    def test_timestamp_is_required(self, client):
        event = _touch()
        del event["timestamp"]

        response = client.post("/api/touch", json={"touchData": [event]})

        assert response.status_code == 400

    def test_delete_all(self, client):
        client.post("/api/touch", json={"touchData": [_touch(), _touch(type="longpress")]})

        response = client.delete("/api/touch")

        assert response.status_code == 200
        assert response.json()["count"] == 2
        assert client.get("/api/touch").json() == {"success": True, "count": 0, "data": []}
