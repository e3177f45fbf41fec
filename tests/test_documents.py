"""Speeches, resolutions and research notes: CRUD plus ownership."""
import pytest


def test_speech_round_trip(client, alice):
    created = client.post(
        "/api/speeches",
        json={"title": "Opening Statement", "content": "Honourable chair, fellow delegates..."},
        headers=alice,
    )
    assert created.status_code == 201
    speech = created.json()
    assert speech["committee"] is None
    assert speech["type"] is None

    listed = client.get("/api/speeches", headers=alice)
    assert listed.status_code == 200
    rows = listed.json()
    assert len(rows) == 1
    assert rows[0]["title"] == "Opening Statement"
    assert rows[0]["content"] == "Honourable chair, fellow delegates..."
    assert rows[0]["createdAt"] is not None
    assert rows[0]["updatedAt"] is not None


@pytest.mark.parametrize("path", ["/api/speeches", "/api/resolutions", "/api/research-notes"])
@pytest.mark.parametrize("body", [{"title": "Only a title"}, {"content": "Only content"}, {"title": "", "content": "x"}])
def test_title_and_content_are_required(client, alice, path, body):
    response = client.post(path, json=body, headers=alice)
    assert response.status_code == 400
    assert response.json() == {"message": "Title and content are required"}


def test_lists_are_newest_first_and_per_user(client, alice, bob):
    for title in ("First", "Second", "Third"):
        client.post("/api/resolutions", json={"title": title, "content": "Operative clauses"}, headers=alice)
    client.post("/api/resolutions", json={"title": "Bob's", "content": "..."}, headers=bob)

    titles = [r["title"] for r in client.get("/api/resolutions", headers=alice).json()]
    assert titles == ["Third", "Second", "First"]
    assert [r["title"] for r in client.get("/api/resolutions", headers=bob).json()] == ["Bob's"]


def test_research_note_tags_keep_order(client, alice):
    created = client.post(
        "/api/research-notes",
        json={
            "title": "Brazil on climate",
            "content": "Position paper notes",
            "country": "Brazil",
            "topic": "Climate finance",
            "tags": ["unfccc", "amazon", "finance"],
        },
        headers=alice,
    ).json()
    assert created["tags"] == ["unfccc", "amazon", "finance"]
    assert created["country"] == "Brazil"

    untagged = client.post(
        "/api/research-notes", json={"title": "Untagged", "content": "..."}, headers=alice
    ).json()
    assert untagged["tags"] == []


def test_partial_update_stamps_updated_at(client, alice):
    speech = client.post(
        "/api/speeches",
        json={"title": "Draft", "content": "v1", "committee": "DISEC"},
        headers=alice,
    ).json()

    response = client.patch(f"/api/speeches/{speech['id']}", json={"content": "v2"}, headers=alice)
    assert response.status_code == 200
    updated = response.json()
    assert updated["content"] == "v2"
    assert updated["title"] == "Draft"
    assert updated["committee"] == "DISEC"
    assert updated["updatedAt"] >= speech["updatedAt"]
    assert updated["createdAt"] == speech["createdAt"]


def test_update_cannot_blank_required_fields(client, alice):
    note = client.post("/api/research-notes", json={"title": "T", "content": "C"}, headers=alice).json()
    response = client.patch(f"/api/research-notes/{note['id']}", json={"title": ""}, headers=alice)
    assert response.status_code == 400


def test_delete_then_404(client, alice):
    resolution = client.post("/api/resolutions", json={"title": "R", "content": "C"}, headers=alice).json()
    path = f"/api/resolutions/{resolution['id']}"

    first = client.delete(path, headers=alice)
    assert first.status_code == 200
    assert first.json() == {"message": "Resolution deleted successfully"}
    assert client.delete(path, headers=alice).status_code == 404
    assert client.get(path, headers=alice).status_code == 404


@pytest.mark.parametrize("path", ["/api/speeches", "/api/resolutions", "/api/research-notes"])
def test_other_users_documents_look_missing(client, alice, bob, path):
    record = client.post(path, json={"title": "Private", "content": "Mine"}, headers=alice).json()
    item = f"{path}/{record['id']}"

    for method in ("get", "delete"):
        response = getattr(client, method)(item, headers=bob)
        assert response.status_code == 404
        assert "not found" in response.json()["message"]
    assert client.patch(item, json={"title": "Stolen"}, headers=bob).status_code == 404

    # still intact for the owner
    assert client.get(item, headers=alice).json()["title"] == "Private"
