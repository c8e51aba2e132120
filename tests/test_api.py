"""HTTP adapter tests: status-code mapping and role gates through FastAPI's TestClient."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import bcrypt
import jwt
from fastapi.testclient import TestClient
from pydantic import SecretStr
from pymongo.errors import PyMongoError

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.security import create_access_token
from app.main import app
from app.stores import get_account_store, get_item_store, get_monster_catalog
from app.stores.accounts import AccountStore
from app.stores.base import DocumentCollection
from app.stores.catalog import MonsterCatalog

SECRET = "api-test-secret"
PASSWORD = "Spice!Flow42"


class ApiTestCase(unittest.TestCase):
    """Base: stores and settings overridden; the lifespan (MongoDB) is not started."""

    @classmethod
    def setUpClass(cls) -> None:
        cls.password_hash = bcrypt.hashpw(PASSWORD.encode(), bcrypt.gensalt(rounds=4)).decode()

    def setUp(self) -> None:
        self.settings = Settings(JWT_SECRET=SecretStr(SECRET))
        self.prefix = self.settings.API_V1_PREFIX
        self.accounts = MagicMock(spec=AccountStore)
        self.monsters = MagicMock(spec=MonsterCatalog)
        self.monsters.id_field = "monster_id"
        self.items = MagicMock(spec=DocumentCollection)
        self.items.id_field = "item_id"
        app.dependency_overrides[get_settings] = lambda: self.settings
        app.dependency_overrides[get_account_store] = lambda: self.accounts
        app.dependency_overrides[get_monster_catalog] = lambda: self.monsters
        app.dependency_overrides[get_item_store] = lambda: self.items
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def auth(self, username: str = "paul", role: str = "user") -> dict[str, str]:
        token = create_access_token(username, role, self.settings)
        return {"Authorization": f"Bearer {token}"}

    def user_doc(self, username: str = "paul", role: str = "user", level: int = 1, experience: int = 0) -> dict:
        return {
            "username": username,
            "password_hash": self.password_hash,
            "email": f"{username}@arrakis.example",
            "role": role,
            "registration_date": "2024-01-01T00:00:00+00:00",
            "profile": {"level": level, "experience": experience},
        }


class TestAuthRoutes(ApiTestCase):
    def test_generate_token(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc(role="admin")
        r = self.client.post(
            f"{self.prefix}/generate-token", json={"username": "paul", "password": PASSWORD}
        )
        self.assertEqual(r.status_code, 200)
        payload = jwt.decode(r.json()["access_token"], SECRET, algorithms=["HS256"])
        self.assertEqual(payload["sub"], "paul")
        self.assertEqual(payload["role"], "admin")
        self.assertEqual(r.json()["token_type"], "bearer")

    def test_generate_token_wrong_password_and_unknown_user_share_detail(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc()
        wrong = self.client.post(
            f"{self.prefix}/generate-token", json={"username": "paul", "password": "Nope!1234"}
        )
        self.accounts.find_by_username.return_value = None
        unknown = self.client.post(
            f"{self.prefix}/generate-token", json={"username": "ghost", "password": PASSWORD}
        )
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.status_code, 404)
        self.assertEqual(wrong.json()["detail"], unknown.json()["detail"])

    def test_login_returns_view_without_hash(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc(level=2, experience=30)
        r = self.client.post(f"{self.prefix}/login", json={"username": "paul", "password": PASSWORD})
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["level"], 2)
        self.assertNotIn("password_hash", body)

    def test_login_with_corrupt_stored_role_is_500_json(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc(role="emperor")
        r = self.client.post(f"{self.prefix}/login", json={"username": "paul", "password": PASSWORD})
        self.assertEqual(r.status_code, 500)
        self.assertEqual(r.json()["detail"], "Stored account 'paul' is malformed")

    def test_register_weak_password_is_400(self) -> None:
        self.accounts.find_by_username.return_value = None
        r = self.client.post(
            f"{self.prefix}/register",
            json={"username": "leto", "password": "weak", "email": "leto@arrakis.example"},
        )
        self.assertEqual(r.status_code, 400)
        self.accounts.insert.assert_not_called()

    def test_register_duplicate_is_409(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc()
        r = self.client.post(
            f"{self.prefix}/register",
            json={"username": "paul", "password": PASSWORD, "email": "paul@arrakis.example"},
        )
        self.assertEqual(r.status_code, 409)

    def test_missing_secret_is_500(self) -> None:
        self.settings = Settings(JWT_SECRET=None)
        self.accounts.find_by_username.return_value = self.user_doc()
        r = self.client.post(
            f"{self.prefix}/generate-token", json={"username": "paul", "password": PASSWORD}
        )
        self.assertEqual(r.status_code, 500)


class TestEncounterRoutes(ApiTestCase):
    def test_requires_token(self) -> None:
        r = self.client.post(f"{self.prefix}/slay-random-monster", json={"username": "paul"})
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.headers.get("www-authenticate"), "Bearer")

    def test_expired_token_is_401(self) -> None:
        past = datetime.now(UTC) - timedelta(hours=2)
        token = jwt.encode(
            {"sub": "paul", "role": "user", "exp": past}, SECRET, algorithm="HS256"
        )
        r = self.client.post(
            f"{self.prefix}/slay-random-monster",
            json={"username": "paul"},
            headers={"Authorization": f"Bearer {token}"},
        )
        self.assertEqual(r.status_code, 401)

    def test_slay_random_monster(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc(level=1, experience=95)
        self.accounts.update_progression.return_value = 1
        self.monsters.sample_one.return_value = {
            "monster_id": "m-1",
            "name": "Sandworm",
            "attributes": {"rarity": "legendary"},
        }
        r = self.client.post(
            f"{self.prefix}/slay-random-monster", json={"username": "paul"}, headers=self.auth()
        )
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual((body["level"], body["experience"]), (2, 95))
        self.assertIn("Sandworm", body["message"])

    def test_cannot_slay_for_another_player(self) -> None:
        r = self.client.post(
            f"{self.prefix}/slay-random-monster", json={"username": "feyd"}, headers=self.auth()
        )
        self.assertEqual(r.status_code, 403)
        self.accounts.find_by_username.assert_not_called()

    def test_admin_may_slay_for_another_player(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc(username="feyd")
        self.accounts.update_progression.return_value = 1
        self.monsters.find_by_id.return_value = {"monster_id": "m-2", "name": "Harkonnen", "attributes": {}}
        r = self.client.post(
            f"{self.prefix}/slay-monster",
            json={"username": "feyd", "monster_id": "m-2"},
            headers=self.auth("stilgar", "admin"),
        )
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["points"], 10)

    def test_empty_catalog(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc()
        self.monsters.sample_one.return_value = None
        r = self.client.post(
            f"{self.prefix}/slay-random-monster", json={"username": "paul"}, headers=self.auth()
        )
        self.assertEqual(r.status_code, 404)
        self.assertEqual(r.json()["detail"], "No monsters available")

    def test_conflict_is_409(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc()
        self.accounts.update_progression.return_value = 0
        self.monsters.sample_one.return_value = {"monster_id": "m-1", "name": "Sandworm"}
        r = self.client.post(
            f"{self.prefix}/slay-random-monster", json={"username": "paul"}, headers=self.auth()
        )
        self.assertEqual(r.status_code, 409)


class TestCatalogAndUserRoutes(ApiTestCase):
    def test_create_monster_requires_admin(self) -> None:
        body = {"monster_id": "m-1", "name": "Sandworm", "attributes": {"rarity": "rare"}}
        r = self.client.post(f"{self.prefix}/monsters", json=body, headers=self.auth())
        self.assertEqual(r.status_code, 403)
        self.monsters.insert.assert_not_called()

    def test_admin_creates_monster(self) -> None:
        self.monsters.find.return_value = None
        body = {"monster_id": "m-1", "name": "Sandworm", "attributes": {"rarity": "rare", "size": "huge"}}
        r = self.client.post(f"{self.prefix}/monsters", json=body, headers=self.auth("stilgar", "admin"))
        self.assertEqual(r.status_code, 201)
        stored = self.monsters.insert.call_args.args[0]
        self.assertEqual(stored["attributes"], {"rarity": "rare", "size": "huge"})

    def test_user_reads_item(self) -> None:
        self.items.find.return_value = {"item_id": "i-1", "name": "Crysknife"}
        r = self.client.get(f"{self.prefix}/items/i-1", headers=self.auth())
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["name"], "Crysknife")

    def test_missing_item_is_404(self) -> None:
        self.items.find.return_value = None
        r = self.client.get(f"{self.prefix}/items/none", headers=self.auth())
        self.assertEqual(r.status_code, 404)

    def test_get_me(self) -> None:
        self.accounts.find_by_username.return_value = self.user_doc()
        r = self.client.get(f"{self.prefix}/users/me", headers=self.auth())
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["username"], "paul")

    def test_admin_deletes_user(self) -> None:
        self.accounts.delete.return_value = 1
        r = self.client.delete(f"{self.prefix}/users/feyd", headers=self.auth("stilgar", "admin"))
        self.assertEqual(r.status_code, 200)
        self.accounts.delete.assert_called_once_with("feyd")

    def test_user_cannot_view_other_account(self) -> None:
        r = self.client.get(f"{self.prefix}/users/feyd", headers=self.auth())
        self.assertEqual(r.status_code, 403)


class TestHealthRoute(ApiTestCase):
    """Health reports the bound database and how many monsters random encounters can draw from."""

    def _db(self) -> MagicMock:
        db = MagicMock()
        db.__getitem__.return_value.count_documents.return_value = 3
        app.dependency_overrides[get_db] = lambda: db
        return db

    def test_connected_reports_monster_count(self) -> None:
        db = self._db()
        db.client.admin.command.return_value = {"ok": 1}
        r = self.client.get(f"{self.prefix}/health")
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")
        self.assertEqual(body["database_name"], self.settings.MONGODB_DB_NAME)
        self.assertEqual(body["monster_count"], 3)
        db.__getitem__.assert_called_with("monsters")

    def test_unreachable_database_is_degraded(self) -> None:
        db = self._db()
        db.client.admin.command.side_effect = PyMongoError("no servers available")
        r = self.client.get(f"{self.prefix}/health")
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["status"], "degraded")
        self.assertEqual(body["database"], "disconnected")
        self.assertIsNone(body["monster_count"])
        db.__getitem__.return_value.count_documents.assert_not_called()


if __name__ == "__main__":
    unittest.main()
