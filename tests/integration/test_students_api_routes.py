"""
Integration tests for the students and grade report endpoints.
"""
import pytest


@pytest.mark.integration
class TestStudentsAPIRoutes:

    def test_list_sorted(self, client, seeded_students):
        res = client.get("/api/students")

        assert res.status_code == 200
        assert [s["id"] for s in res.get_json()] == ["s2", "s3", "s1"]

    def test_search(self, client, seeded_students):
        res = client.get("/api/students", query_string={"q": "budi"})

        assert [s["name"] for s in res.get_json()] == ["Budi Santoso"]

    def test_create_json(self, client):
        res = client.post("/api/students", json={"name": "Dewi", "class": "X-2", "email": "dewi@email.com"})

        assert res.status_code == 201
        body = res.get_json()
        assert body["name"] == "Dewi"
        assert body["id"]

    def test_create_form(self, client):
        res = client.post("/api/students", data={"name": "Eka", "class": "X-3", "email": "eka@email.com"})

        assert res.status_code == 201
        assert client.get("/api/students").get_json()[0]["name"] == "Eka"

    def test_create_missing_field(self, client):
        res = client.post("/api/students", json={"name": "Dewi", "class": "X-2"})

        assert res.status_code == 400
        assert res.get_json() == {"error": "Missing field(s): email"}

    def test_create_duplicate(self, client, seeded_students):
        res = client.post("/api/students", json={"name": "citra lestari", "class": "X-2", "email": "c@e.com"})

        assert res.status_code == 409
        assert "already in use" in res.get_json()["error"]

    def test_update(self, client, seeded_students):
        res = client.put("/api/students/s1", json={"name": "Citra L.", "class": "X-1", "email": "citra@email.com"})

        assert res.status_code == 200
        assert res.get_json()["name"] == "Citra L."

    def test_update_duplicate(self, client, seeded_students):
        res = client.put("/api/students/s1", json={"name": "Budi Santoso", "class": "X-1", "email": "c@e.com"})

        assert res.status_code == 409

    def test_update_missing(self, client, seeded_students):
        res = client.put("/api/students/nope", json={"name": "Someone", "class": "X-1", "email": "s@e.com"})

        assert res.status_code == 404

    def test_delete(self, client, seeded_students):
        res = client.delete("/api/students/s2")

        assert res.status_code == 200
        assert res.get_json() == {"ok": True, "deleted": "s2"}
        assert len(client.get("/api/students").get_json()) == 2

    def test_students_visible_through_generic_collection(self, client):
        created = client.post(
            "/api/students", json={"name": "Dewi", "class": "X-2", "email": "dewi@email.com"}
        ).get_json()

        res = client.get(f"/api/collections/students/{created['id']}")

        assert res.get_json() == created


@pytest.mark.integration
class TestReportsAPIRoutes:

    def test_report_all(self, client, seeded_students):
        res = client.get("/api/reports/grades")

        assert res.status_code == 200
        body = res.get_json()
        assert body["count"] == 3
        assert body["keyword"] == ""

    def test_report_keyword(self, client, seeded_students):
        res = client.get("/api/reports/grades", query_string={"keyword": "XII"})

        body = res.get_json()
        assert body["keyword"] == "XII"
        assert [s["id"] for s in body["students"]] == ["s2"]
