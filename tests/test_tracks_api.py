"""Tests for /api/tracks endpoints."""

import pytest

from mockify.core.schema import sort_key


@pytest.fixture
def new_track():
    return {
        "naam": "Test Track",
        "bpm": 120,
        "duur": 180,
        "jaar": 2024,
        "artiesten": ["Test Artist"],
        "genres": ["Test Genre"],
    }


class TestListTracks:
    """Test GET /api/tracks."""

    def test_list_envelope(self, client):
        """Test list returns success, data array and count."""
        response = client.get("/api/tracks")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert isinstance(body["data"], list)
        assert body["count"] == len(body["data"]) == 3

    def test_trailing_slash(self, client):
        """Test collection path works with a trailing slash."""
        response = client.get("/api/tracks/")
        assert response.status_code == 200
        assert response.json()["count"] == 3

    @pytest.mark.parametrize("direction", ["asc", "desc"])
    def test_sort(self, client, direction):
        """Test adjacent names are ordered per sort direction."""
        names = [t["naam"] for t in client.get(f"/api/tracks?sort={direction}").json()["data"]]
        for a, b in zip(names, names[1:]):
            if direction == "asc":
                assert sort_key(a) <= sort_key(b)
            else:
                assert sort_key(a) >= sort_key(b)

    def test_filters(self, client):
        """Test artiest and jaar filters combine."""
        body = client.get("/api/tracks", params={"artiest": "STROMAE", "jaar": "2010"}).json()
        assert [t["id"] for t in body["data"]] == [2, 5]
        assert body["count"] == 2

    def test_non_numeric_year_filter_is_permissive(self, client):
        """Test a bad jaar filter yields an empty list, not an error."""
        response = client.get("/api/tracks?jaar=abc")
        assert response.status_code == 200
        assert response.json()["data"] == []


class TestGetTrack:
    """Test GET /api/tracks/{id}."""

    def test_get_by_id(self, client):
        response = client.get("/api/tracks/1")
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": client.get("/api/tracks").json()["data"][0]}

    def test_not_found_is_empty_object(self, client):
        response = client.get("/api/tracks/99999")
        assert response.status_code == 404
        assert response.json() == {}

    def test_id_with_trailing_text_matches_leading_digits(self, client):
        response = client.get("/api/tracks/1abc")
        assert response.status_code == 200
        assert response.json()["data"]["id"] == 1

    def test_non_numeric_id_not_found(self, client):
        response = client.get("/api/tracks/abc")
        assert response.status_code == 404
        assert response.json() == {}


class TestCreateTrack:
    """Test POST /api/tracks."""

    def test_create(self, client, new_track):
        response = client.post("/api/tracks", json=new_track)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["naam"] == "Test Track"
        assert body["data"]["id"] == 6
        assert body["data"]["spotify_url"] == ""

    def test_created_track_can_be_fetched(self, client, new_track):
        created = client.post("/api/tracks/", json=new_track).json()["data"]
        assert client.get(f"/api/tracks/{created['id']}").json()["data"] == created

    def test_missing_fields(self, client):
        response = client.post("/api/tracks", json={"naam": "Incomplete Track"})
        assert response.status_code == 400
        assert response.json()["error"]

    def test_client_id_rejected(self, client, new_track):
        response = client.post("/api/tracks", json={**new_track, "id": 1})
        assert response.status_code == 400
        assert response.json() == {"error": '"id" is not allowed'}

    def test_invalid_json(self, client):
        response = client.post(
            "/api/tracks",
            content=b"{naam:",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"]

    def test_array_body_rejected(self, client):
        response = client.post("/api/tracks", json=[1, 2])
        assert response.status_code == 400
        assert response.json() == {"error": '"value" must be of type object'}


class TestReplaceTrack:
    """Test PUT /api/tracks/{id}."""

    def test_replace(self, client, new_track):
        response = client.put("/api/tracks/2", json={"id": 2, **new_track, "spotify_url": "u"})
        assert response.status_code == 200
        assert response.json()["data"] == {"id": 2, **new_track, "spotify_url": "u"}

    def test_missing_body_id(self, client, new_track):
        response = client.put("/api/tracks/2", json=new_track)
        assert response.status_code == 400
        assert response.json() == {"error": '"id" is required'}

    def test_mismatched_body_id(self, client, new_track):
        response = client.put("/api/tracks/2", json={"id": 1, **new_track})
        assert response.status_code == 400
        assert "error" in response.json()
        assert client.get("/api/tracks/1").json()["data"]["naam"] == "Strobe"

    def test_not_found(self, client, new_track):
        response = client.put("/api/tracks/99999", json={"id": 99999, **new_track})
        assert response.status_code == 404
        assert response.json() == {}


class TestPatchTrack:
    """Test PATCH /api/tracks/{id}."""

    def test_patch_keeps_other_fields(self, client):
        before = client.get("/api/tracks/1").json()["data"]
        response = client.patch("/api/tracks/1", json={"naam": "Patched Track"})
        assert response.status_code == 200
        assert response.json()["data"] == {**before, "naam": "Patched Track"}

    def test_patch_invalid_field(self, client):
        response = client.patch("/api/tracks/1", json={"artiesten": "solo"})
        assert response.status_code == 400
        assert response.json() == {"error": '"artiesten" must be an array'}

    def test_not_found(self, client):
        response = client.patch("/api/tracks/99999", json={"naam": "Test"})
        assert response.status_code == 404
        assert response.json() == {}


class TestDeleteTrack:
    """Test DELETE /api/tracks/{id}."""

    def test_delete(self, client):
        response = client.delete("/api/tracks/2")
        assert response.status_code == 200
        assert response.json()["data"]["id"] == 2
        assert client.get("/api/tracks/2").status_code == 404

    def test_not_found(self, client):
        response = client.delete("/api/tracks/99999")
        assert response.status_code == 404
        assert response.json() == {}
        assert client.get("/api/tracks").json()["count"] == 3


def test_sort_and_filter_together(client):
    """Test sort and filter params combine on one list request."""
    response = client.get("/api/tracks", params={"sort": "desc", "jaar": "2010"})
    assert response.status_code == 200
    assert [t["naam"] for t in response.json()["data"]] == ["Éclat", "alors on danse"]
