"""Tests for the eye-tracking endpoints."""

from datetime import datetime, timedelta, timezone


def _parse(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestEyeTrackingEndpoints:

    def test_german_direction_is_stored_verbatim(self, client):
        sample = {"timestamp": "2024-01-01T00:00:00Z", "direction": "links", "isUserLooking": False}

        response = client.post("/api/eyetracking", json={"eyeTrackingData": [sample]})

        assert response.status_code == 201
        assert response.json()["count"] == 1

        stored = client.get("/api/eyetracking").json()["data"][0]
        assert stored["direction"] == "links"
        assert stored["isUserLooking"] is False
        assert _parse(stored["timestamp"]) == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_filter_by_direction(self, client):
        samples = [{"direction": "links"}, {"direction": "left"}, {"direction": "links"}]
        client.post("/api/eyetracking", json={"eyeTrackingData": samples})

        assert client.get("/api/eyetracking/direction/links").json()["count"] == 2
        assert client.get("/api/eyetracking/direction/left").json()["count"] == 1
        assert client.get("/api/eyetracking/direction/mitte").json()["count"] == 0

    def test_defaults(self, client):
        client.post("/api/eyetracking", json={"eyeTrackingData": [{"deviceId": "d1"}]})

        stored = client.get("/api/eyetracking").json()["data"][0]

        assert stored["isUserLooking"] is True
        assert stored["direction"] is None
        assert stored["timestamp"] is not None

    def test_unparseable_timestamp_falls_back_to_now(self, client):
        samples = [
            {"timestamp": "not a date", "direction": "oben"},
            {"timestamp": "2024-03-01T08:30:00Z", "direction": "unten"},
        ]

        response = client.post("/api/eyetracking", json={"eyeTrackingData": samples})

        assert response.status_code == 201
        assert response.json()["count"] == 2
        fallback = client.get("/api/eyetracking/direction/oben").json()["data"][0]
        assert abs(_parse(fallback["timestamp"]) - datetime.now(timezone.utc)) < timedelta(minutes=5)

    def test_eye_position_round_trip(self, client):
        position = {"leftX": 0.41, "leftY": 0.5, "rightX": 0.59, "rightY": 0.5}

        client.post("/api/eyetracking", json={"eyeTrackingData": [{"eyePosition": position}]})

        assert client.get("/api/eyetracking").json()["data"][0]["eyePosition"] == position

    def test_unknown_direction_rejects_batch(self, client):
        samples = [{"direction": "center"}, {"direction": "diagonal"}]

        response = client.post("/api/eyetracking", json={"eyeTrackingData": samples})

        assert response.status_code == 400
        assert "eyeTrackingData[1]" in response.json()["error"]
        assert client.get("/api/eyetracking").json()["count"] == 0

    def test_missing_eye_tracking_data(self, client):
        response = client.post("/api/eyetracking", json=[{"direction": "center"}])

        assert response.status_code == 400
        assert "eyeTrackingData" in response.json()["error"]

    def test_delete_all(self, client):
        client.post("/api/eyetracking", json={"eyeTrackingData": [{}, {}, {}]})

        response = client.delete("/api/eyetracking")

        assert response.status_code == 200
        assert response.json()["count"] == 3
        assert client.get("/api/eyetracking").json()["count"] == 0
