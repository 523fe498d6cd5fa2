"""HTTP tests for /api/destinations plus the app-level error mapping."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app
from app.models import DestinationType
from tests.support import ApiTestCase, add_destination

VALID = {
    "name": "Foo Bar",
    "description": "A nice long description here",
    "countryCode": "MX",
    "type": "Beach",
}


class TestRegistrationToCreateScenario(ApiTestCase):
    def test_register_login_create(self) -> None:
        registered = self.register(email="a@x.com", password="secret1", name="A")
        self.assertTrue(registered["token"])

        login = self.client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
        self.assertEqual(login.status_code, 200)
        token = login.json()["token"]

        anonymous = self.client.post("/api/destinations", json=VALID)
        self.assertEqual(anonymous.status_code, 401)

        created = self.client.post("/api/destinations", json=VALID, headers=self.bearer(token))
        self.assertEqual(created.status_code, 201, created.text)
        body = created.json()
        self.assertEqual(body["userId"], registered["user"]["id"])
        self.assertEqual(body["countryCode"], "MX")
        self.assertEqual(body["type"], "Beach")
        self.assertIn("lastModif", body)


class TestCreateValidation(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.bearer(self.register()["token"])

    def test_invalid_fields_are_400(self) -> None:
        cases = {
            "name": {**VALID, "name": "X"},
            "description": {**VALID, "description": "too short"},
            "countryCode": {**VALID, "countryCode": "mx"},
            "type": {**VALID, "type": "Desert"},
        }
        for field, payload in cases.items():
            with self.subTest(field=field):
                resp = self.client.post("/api/destinations", json=payload, headers=self.headers)
                self.assertEqual(resp.status_code, 400, resp.text)
                self.assertIn(field, [d["field"] for d in resp.json()["details"]])

    def test_missing_field_is_400(self) -> None:
        payload = dict(VALID)
        del payload["type"]
        resp = self.client.post("/api/destinations", json=payload, headers=self.headers)
        self.assertEqual(resp.status_code, 400)

    def test_text_fields_are_trimmed(self) -> None:
        resp = self.client.post(
            "/api/destinations",
            json={**VALID, "name": "  Foo Bar  ", "countryCode": " MX "},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        self.assertEqual(resp.json()["name"], "Foo Bar")


class TestListAndGet(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.owner = self.make_user()

    def test_pagination_metadata(self) -> None:
        for i in range(25):
            add_destination(self.db, self.owner, name=f"Destination {i:02d}")
        page1 = self.client.get("/api/destinations", params={"limit": 10}).json()
        self.assertEqual(len(page1["destinations"]), 10)
        self.assertEqual(page1["pagination"], {"page": 1, "limit": 10, "total": 25, "totalPages": 3})
        page3 = self.client.get("/api/destinations", params={"page": 3, "limit": 10}).json()
        self.assertEqual(len(page3["destinations"]), 5)

    def test_limit_above_100_is_capped(self) -> None:
        resp = self.client.get("/api/destinations", params={"limit": 500})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["pagination"]["limit"], 100)

    def test_bad_query_params_are_400(self) -> None:
        for params in ({"page": 0}, {"limit": 0}, {"page": "abc"}, {"type": "Desert"}, {"countryCode": "MEX"}):
            with self.subTest(params=params):
                resp = self.client.get("/api/destinations", params=params)
                self.assertEqual(resp.status_code, 400, resp.text)
                self.assertEqual(resp.json()["error"], "Validation Error")

    def test_type_filter(self) -> None:
        add_destination(self.db, self.owner, name="Beachy", type=DestinationType.BEACH)
        add_destination(self.db, self.owner, name="Peaky", type=DestinationType.MOUNTAIN)
        body = self.client.get("/api/destinations", params={"type": "Beach"}).json()
        self.assertEqual([d["type"] for d in body["destinations"]], ["Beach"])
        self.assertEqual(body["pagination"]["total"], 1)

    def test_country_filter_is_case_insensitive(self) -> None:
        add_destination(self.db, self.owner, name="Tulum", country_code="MX")
        add_destination(self.db, self.owner, name="Ibiza", country_code="ES")
        body = self.client.get("/api/destinations", params={"countryCode": "es"}).json()
        self.assertEqual([d["name"] for d in body["destinations"]], ["Ibiza"])

    def test_get_by_id_and_missing(self) -> None:
        destination = add_destination(self.db, self.owner, name="Tulum")
        found = self.client.get(f"/api/destinations/{destination.id}")
        self.assertEqual(found.status_code, 200)
        self.assertEqual(found.json()["name"], "Tulum")

        missing = self.client.get("/api/destinations/9999")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json(), {"error": "Not Found", "message": "Destination not found"})

    def test_huge_page_and_id_are_client_errors(self) -> None:
        page = self.client.get("/api/destinations", params={"page": 10**19})
        self.assertEqual(page.status_code, 400, page.text)
        self.assertEqual(page.json()["error"], "Validation Error")

        missing = self.client.get(f"/api/destinations/{10**20}")
        self.assertEqual(missing.status_code, 404, missing.text)
        self.assertEqual(missing.json()["message"], "Destination not found")

    def test_listing_is_public(self) -> None:
        resp = self.client.get("/api/destinations")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["destinations"], [])


class TestUpdateAndDelete(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.owner_token = self.register(email="owner@x.com")["token"]
        self.other_token = self.register(email="other@x.com")["token"]
        created = self.client.post("/api/destinations", json=VALID, headers=self.bearer(self.owner_token))
        self.assertEqual(created.status_code, 201, created.text)
        self.destination = created.json()
        self.url = f"/api/destinations/{self.destination['id']}"

    def test_owner_partial_update(self) -> None:
        resp = self.client.put(self.url, json={"name": "New Name"}, headers=self.bearer(self.owner_token))
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["name"], "New Name")
        self.assertEqual(body["description"], VALID["description"])
        self.assertEqual(body["countryCode"], "MX")

    def test_non_owner_update_is_403_and_leaves_record(self) -> None:
        resp = self.client.put(self.url, json={"name": "Hijacked"}, headers=self.bearer(self.other_token))
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["error"], "Forbidden")
        self.assertEqual(self.client.get(self.url).json()["name"], VALID["name"])

    def test_update_without_token_is_401(self) -> None:
        resp = self.client.put(self.url, json={"name": "Anon"})
        self.assertEqual(resp.status_code, 401)

    def test_update_invalid_field_is_400(self) -> None:
        resp = self.client.put(self.url, json={"countryCode": "Mexico"}, headers=self.bearer(self.owner_token))
        self.assertEqual(resp.status_code, 400)

    def test_update_missing_is_404(self) -> None:
        resp = self.client.put(
            "/api/destinations/9999", json={"name": "Nope"}, headers=self.bearer(self.owner_token)
        )
        self.assertEqual(resp.status_code, 404)

    def test_non_owner_delete_is_403(self) -> None:
        resp = self.client.delete(self.url, headers=self.bearer(self.other_token))
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(self.client.get(self.url).status_code, 200)

    def test_owner_delete(self) -> None:
        resp = self.client.delete(self.url, headers=self.bearer(self.owner_token))
        self.assertEqual(resp.status_code, 200)
        self.assertIn("message", resp.json())
        self.assertEqual(self.client.get(self.url).status_code, 404)

    def test_delete_missing_is_404(self) -> None:
        resp = self.client.delete("/api/destinations/9999", headers=self.bearer(self.owner_token))
        self.assertEqual(resp.status_code, 404)

    def test_out_of_range_id_on_update_and_delete_is_404(self) -> None:
        url = f"/api/destinations/{10**20}"
        updated = self.client.put(url, json={"name": "Nope"}, headers=self.bearer(self.owner_token))
        deleted = self.client.delete(url, headers=self.bearer(self.owner_token))
        self.assertEqual(updated.status_code, 404, updated.text)
        self.assertEqual(deleted.status_code, 404, deleted.text)


class TestAppRoutes(ApiTestCase):
    def test_unknown_route_uses_error_body(self) -> None:
        resp = self.client.get("/api/nowhere")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["error"], "Not Found")
        self.assertIn("/api/nowhere", resp.json()["message"])

    def test_health(self) -> None:
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")

    def test_root(self) -> None:
        self.assertEqual(self.client.get("/").json()["documentation"], "/docs")


class TestUnhandledErrors(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.client = TestClient(app, raise_server_exceptions=False)
        failing = patch(
            "app.services.destinations.list_destinations",
            side_effect=RuntimeError("database exploded"),
        )
        failing.start()
        self.addCleanup(failing.stop)

    def _get_with_env(self, app_env: str):
        with patch("app.main.settings", settings.model_copy(update={"APP_ENV": app_env})):
            with self.assertLogs("app.main", level="ERROR"):
                return self.client.get("/api/destinations")

    def test_dev_shows_exception_message(self) -> None:
        resp = self._get_with_env("dev")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(
            resp.json(), {"error": "Internal Server Error", "message": "database exploded"}
        )

    def test_prod_hides_exception_message(self) -> None:
        resp = self._get_with_env("prod")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(
            resp.json(), {"error": "Internal Server Error", "message": "Something went wrong"}
        )
        self.assertNotIn("database exploded", resp.text)
