"""Integration tests for the lesson endpoints."""

from unittest.mock import MagicMock

from pymongo.errors import PyMongoError


MATH = {"subject": "Math", "location": "London", "price": 100, "spaces": 5}
ART = {"subject": "Art", "location": "Oxford", "price": 80, "spaces": 3, "image": "art.png"}


class TestCreateLessonsEndpoint:
    def test_create_lessons_returns_generated_ids(self, client):
        response = client.post("/api/lessons", json=[MATH, ART])

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Lessons created successfully"
        assert data["result"]["acknowledged"] is True
        assert data["result"]["insertedCount"] == 2
        assert len(data["result"]["insertedIds"]) == 2

    def test_created_lessons_are_listed(self, client, make_lessons):
        ids = make_lessons(MATH, ART)

        response = client.get("/api/lessons")

        assert response.status_code == 200
        results = response.json()["results"]
        assert [lesson["_id"] for lesson in results] == ids
        assert results[0]["subject"] == "Math"
        assert results[1]["image"] == "art.png"

    def test_empty_array_inserts_nothing(self, client):
        response = client.post("/api/lessons", json=[])

        assert response.status_code == 201
        assert response.json()["result"] == {"acknowledged": True, "insertedCount": 0, "insertedIds": []}
        assert client.get("/api/lessons").json()["results"] == []

    def test_missing_fields_are_itemized(self, client):
        response = client.post("/api/lessons", json=[{"subject": "Math"}])

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Invalid request"
        assert "0.location: Field required" in body["errors"]
        assert "0.price: Field required" in body["errors"]
        assert "0.spaces: Field required" in body["errors"]

    def test_body_must_be_an_array(self, client):
        response = client.post("/api/lessons", json=MATH)

        assert response.status_code == 400


class TestListLessonsEndpoint:
    def test_empty_collection(self, client):
        response = client.get("/api/lessons")

        assert response.status_code == 200
        assert response.json() == {"message": "Lessons fetched successfully", "results": []}

    def test_store_failure_is_reported(self, client, store):
        store.lessons = MagicMock()
        store.lessons.find.side_effect = PyMongoError("connection lost")

        response = client.get("/api/lessons")

        assert response.status_code == 500
        assert response.json() == {"error": "connection lost"}


class TestUpdateLessonEndpoint:
    def test_update_changes_only_given_fields(self, client, make_lessons):
        [lesson_id] = make_lessons(MATH)

        response = client.put(f"/api/lessons/{lesson_id}", json={"spaces": 3})

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Lesson updated successfully"
        assert data["result"]["matchedCount"] == 1
        assert data["result"]["modifiedCount"] == 1

        [lesson] = client.get("/api/lessons").json()["results"]
        assert lesson == {"_id": lesson_id, "subject": "Math", "location": "London", "price": 100, "spaces": 3}

    def test_update_accepts_extra_fields(self, client, make_lessons):
        [lesson_id] = make_lessons(MATH)

        client.put(f"/api/lessons/{lesson_id}", json={"image": "math.png"})

        [lesson] = client.get("/api/lessons").json()["results"]
        assert lesson["image"] == "math.png"
        assert lesson["spaces"] == 5

    def test_unknown_id_matches_nothing(self, client):
        response = client.put("/api/lessons/0123456789abcdef01234567", json={"spaces": 1})

        assert response.status_code == 200
        assert response.json()["result"]["matchedCount"] == 0

    def test_empty_body_is_a_no_op(self, client, make_lessons):
        [lesson_id] = make_lessons(MATH)

        response = client.put(f"/api/lessons/{lesson_id}", json={})

        assert response.status_code == 200
        assert response.json()["result"] == {"acknowledged": True, "matchedCount": 1, "modifiedCount": 0}

    def test_malformed_id_is_a_store_error(self, client):
        response = client.put("/api/lessons/not-an-id", json={"spaces": 1})

        assert response.status_code == 500
        assert "not-an-id" in response.json()["error"]

    def test_negative_spaces_rejected(self, client, make_lessons):
        [lesson_id] = make_lessons(MATH)

        response = client.put(f"/api/lessons/{lesson_id}", json={"spaces": -1})

        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("spaces:")
