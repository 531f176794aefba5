"""API tests for the dashboard, scoped widget and CRUD endpoints."""

import pytest


def _widget(body, key):
    return next(w for w in body["data"] if w["key"] == key)


class TestDashboard:
    async def test_widgets_keep_independent_state(self, client, users, course_factory):
        await course_factory(users[0], 15)

        response = await client.get(
            "/api/v1/dashboard",
            params={"user-w": "name-asc-2", "course-w": "title-desc-1"},
        )
        assert response.status_code == 200
        body = response.json()

        user_widget = _widget(body, "user-w")
        course_widget = _widget(body, "course-w")
        assert user_widget["state"] == {
            "sortKey": "name",
            "order": "asc",
            "page": 2,
            "token": "name-asc-2",
        }
        assert user_widget["rows"][0]["cells"]["name"] == "user-10"
        assert course_widget["state"]["token"] == "title-desc-1"
        assert course_widget["rows"][0]["cells"]["title"] == "course-14"

    async def test_camel_case_pager(self, client, users):
        response = await client.get("/api/v1/dashboard", params={"user-w": "created_at-desc-2"})
        pager = _widget(response.json(), "user-w")["pager"]

        assert pager["buttons"] == [1, 2, 3]
        assert pager["showFirstPrev"] is True
        assert pager["showNextLast"] is True
        hrefs = {l["rel"]: l["href"] for l in pager["links"]}
        assert hrefs["next"] == "/api/v1/dashboard?user-w=created_at-desc-3"

    async def test_tampered_token_degrades_to_defaults(self, client, users):
        response = await client.get("/api/v1/dashboard", params={"user-w": "id;drop-up-x"})
        assert response.status_code == 200
        state = _widget(response.json(), "user-w")["state"]
        assert state["token"] == "created_at-desc-1"


    async def test_oversized_page_degrades_to_first_page(self, client, users):
        response = await client.get(
            "/api/v1/dashboard", params={"user-w": "name-asc-99999999999999999999"}
        )
        assert response.status_code == 200
        widget = _widget(response.json(), "user-w")
        assert widget["state"]["token"] == "name-asc-1"
        assert widget["rows"][0]["cells"]["name"] == "user-00"


class TestUserCourses:
    async def test_scoped_to_user(self, client, users, course_factory):
        await course_factory(users[0], 3, prefix="mine")
        await course_factory(users[1], 2, prefix="theirs")

        response = await client.get(f"/api/v1/users/{users[0].id}/courses")
        assert response.status_code == 200
        widget = response.json()["data"]
        assert widget["meta"]["total"] == 3
        assert widget["pager"]["links"][0]["href"].startswith(
            f"/api/v1/users/{users[0].id}/courses?"
        )

    async def test_unknown_user(self, client):
        response = await client.get("/api/v1/users/missing/courses")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestUserCrud:
    async def test_create_and_fetch(self, client):
        response = await client.post(
            "/api/v1/users", json={"name": "Ada", "email": "ada@learnhub.io"}
        )
        assert response.status_code == 201
        user = response.json()["data"]
        assert user["role"] == "student"

        response = await client.get(f"/api/v1/users/{user['id']}")
        assert response.json()["data"]["email"] == "ada@learnhub.io"

    async def test_duplicate_email(self, client, users):
        response = await client.post(
            "/api/v1/users", json={"name": "Dup", "email": users[0].email}
        )
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONFLICT"

    async def test_email_is_released_by_delete(self, client, users):
        response = await client.delete(f"/api/v1/users/{users[0].id}")
        assert response.status_code == 204

        response = await client.post(
            "/api/v1/users", json={"name": "Again", "email": users[0].email}
        )
        assert response.status_code == 201
        assert response.json()["data"]["id"] != users[0].id

        response = await client.post(
            "/api/v1/users", json={"name": "Twice", "email": users[0].email}
        )
        assert response.status_code == 409

    async def test_update(self, client, users):
        response = await client.put(f"/api/v1/users/{users[0].id}", json={"role": "admin"})
        assert response.status_code == 200
        assert response.json()["data"]["role"] == "admin"


class TestDestroy:
    async def test_redirects_back_to_referer(self, client, users):
        referer = "http://test/api/v1/dashboard?user-w=name-asc-2"
        response = await client.delete(
            f"/api/v1/users/{users[0].id}", headers={"Referer": referer}
        )
        assert response.status_code == 303
        assert response.headers["location"] == referer

        response = await client.get("/api/v1/dashboard")
        assert _widget(response.json(), "user-w")["meta"]["total"] == 22

    async def test_no_content_without_referer(self, client, users):
        response = await client.delete(f"/api/v1/users/{users[0].id}")
        assert response.status_code == 204

    @pytest.mark.parametrize("resource", ["users", "courses"])
    async def test_missing_row(self, client, resource):
        response = await client.delete(f"/api/v1/{resource}/missing")
        assert response.status_code == 404


class TestCourseCrud:
    async def test_create_requires_existing_user(self, client):
        response = await client.post(
            "/api/v1/courses", json={"userId": "nobody", "title": "Algebra"}
        )
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_create_update_delete(self, client, users):
        response = await client.post(
            "/api/v1/courses",
            json={"userId": users[0].id, "title": "Algebra", "credits": 3},
        )
        assert response.status_code == 201
        course = response.json()["data"]
        assert course["status"] == "draft"

        response = await client.put(
            f"/api/v1/courses/{course['id']}", json={"status": "published"}
        )
        assert response.json()["data"]["status"] == "published"

        response = await client.delete(f"/api/v1/courses/{course['id']}")
        assert response.status_code == 204
        response = await client.get(f"/api/v1/courses/{course['id']}")
        assert response.status_code == 404


async def test_health(client):
    response = await client.get("/health")
    assert response.json()["status"] == "ok"
