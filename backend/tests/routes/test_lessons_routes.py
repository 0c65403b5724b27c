# backend/tests/routes/test_lessons_routes.py
"""
HTTP tests for /api/v1/lessons: status mapping of booking and cancellation.
"""


def _book(client, catalogue, start_time="09:00", lesson_date="2024-06-10", **extra):
    payload = {
        "teacher_id": catalogue["teacher"]["id"],
        "content_id": catalogue["content"]["id"],
        "lesson_date": lesson_date,
        "start_time": start_time,
        **extra,
    }
    return client.post("/api/v1/lessons", json=payload)


class TestBookLessonRoute:
    def test_created(self, client, catalogue):
        response = _book(client, catalogue)

        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Aula de Fundamentos do passe"
        assert body["end_time"] == "10:00:00"
        assert body["period"] == "morning"
        assert body["status"] == "booked"

    def test_conflict_is_409(self, client, catalogue):
        first = _book(client, catalogue)
        response = _book(client, catalogue, start_time="10:00")

        assert response.status_code == 409
        detail = response.json()["detail"]
        assert detail["code"] == "SCHEDULE_CONFLICT"
        assert detail["details"]["conflicting_lesson_id"] == first.json()["id"]

    def test_inactive_teacher_is_422(self, client, catalogue):
        teacher_id = catalogue["teacher"]["id"]
        assert client.post(f"/api/v1/teachers/{teacher_id}/deactivate").status_code == 200

        response = _book(client, catalogue)

        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "TEACHER_INACTIVE"

    def test_specialization_mismatch_is_422(self, client, catalogue):
        other = client.post(
            "/api/v1/teachers",
            json={"name": "Bruno Dias", "email": "bruno@escola.com", "specialization": "Basquete"},
        ).json()
        response = client.post(
            "/api/v1/lessons",
            json={
                "teacher_id": other["id"],
                "content_id": catalogue["content"]["id"],
                "lesson_date": "2024-06-10",
                "start_time": "09:00",
            },
        )
        assert response.status_code == 422
        assert response.json()["detail"]["code"] == "SPECIALIZATION_MISMATCH"

    def test_unknown_teacher_is_404(self, client, catalogue):
        response = client.post(
            "/api/v1/lessons",
            json={
                "teacher_id": "01HZZZZZZZZZZZZZZZZZZZZZZZ",
                "content_id": catalogue["content"]["id"],
                "lesson_date": "2024-06-10",
                "start_time": "09:00",
            },
        )
        assert response.status_code == 404

    def test_invalid_start_time_is_400(self, client, catalogue):
        response = _book(client, catalogue, start_time="05:00")
        assert response.status_code == 400
        assert response.json()["detail"]["details"]["field"] == "start_time"

    def test_malformed_body_is_400(self, client, catalogue):
        response = _book(client, catalogue, start_time="not-a-time")
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "VALIDATION_ERROR"

    def test_unknown_field_rejected(self, client, catalogue):
        response = _book(client, catalogue, room="A1")
        assert response.status_code == 400


class TestLessonQueriesRoute:
    def test_get_and_list(self, client, catalogue):
        lesson = _book(client, catalogue).json()

        assert client.get(f"/api/v1/lessons/{lesson['id']}").json()["id"] == lesson["id"]
        assert [item["id"] for item in client.get("/api/v1/lessons").json()] == [lesson["id"]]
        teacher_id = catalogue["teacher"]["id"]
        listed = client.get("/api/v1/lessons", params={"teacher_id": teacher_id}).json()
        assert [item["id"] for item in listed] == [lesson["id"]]
        upcoming = client.get("/api/v1/lessons/upcoming").json()
        assert [item["id"] for item in upcoming] == [lesson["id"]]

    def test_conflicts_endpoint(self, client, catalogue):
        lesson = _book(client, catalogue).json()
        response = client.get(
            "/api/v1/lessons/conflicts",
            params={
                "teacher_id": catalogue["teacher"]["id"],
                "lesson_date": "2024-06-10",
                "start_time": "09:30",
                "duration_minutes": 30,
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["has_conflict"] is True
        assert [item["id"] for item in body["conflicts"]] == [lesson["id"]]

    def test_period_endpoint(self, client, catalogue):
        lesson = _book(client, catalogue).json()
        response = client.get(
            "/api/v1/lessons/period",
            params={"start": "2024-06-10T00:00:00", "end": "2024-06-10T23:59:00"},
        )
        assert [item["id"] for item in response.json()] == [lesson["id"]]

    def test_missing_lesson_is_404(self, client):
        assert client.get("/api/v1/lessons/01HZZZZZZZZZZZZZZZZZZZZZZZ").status_code == 404


class TestCancelLessonRoute:
    def test_cancel_is_204(self, client, catalogue):
        lesson = _book(client, catalogue).json()

        response = client.delete(f"/api/v1/lessons/{lesson['id']}")

        assert response.status_code == 204
        assert client.get(f"/api/v1/lessons/{lesson['id']}").status_code == 404

    def test_cancel_unknown_is_404(self, client):
        assert client.delete("/api/v1/lessons/01HZZZZZZZZZZZZZZZZZZZZZZZ").status_code == 404
