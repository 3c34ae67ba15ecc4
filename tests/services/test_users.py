"""User Routes — hashed credentials, uniqueness and login.

Tests:
    - No response ever carries the password or its hash
    - Stored credential is a bcrypt hash, not the plain text
    - Duplicate email returns 400 with the user wording
    - Login: success, wrong password and unknown email (same 401 body),
      missing fields (400)
    - Password update re-hashes; the new password logs in
"""

from sqlalchemy import select

from cynova.infrastructure.security import verify_password
from cynova.models.user import User


async def _create(client, payload, **overrides):
    response = await client.post("/api/users", json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["utilisateur"]


async def test_create_user_hides_password(client, user_payload):
    response = await client.post("/api/users", json=user_payload)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Utilisateur créé avec succès"
    utilisateur = body["utilisateur"]
    assert utilisateur["email"] == "marie@example.com"
    assert utilisateur["role"] == "USER"
    assert utilisateur["newsletter"] is False
    assert "motDePasse" not in utilisateur
    assert "motdepasse123" not in response.text


async def test_stored_password_is_hashed(client, test_db, user_payload):
    utilisateur = await _create(client, user_payload)

    stored = (await test_db.execute(
        select(User).where(User.id == utilisateur["id"]),
    )).scalar_one()
    assert stored.mot_de_passe != "motdepasse123"
    assert stored.mot_de_passe.startswith("$2")
    assert verify_password("motdepasse123", stored.mot_de_passe)


async def test_listing_never_exposes_hash(client, user_payload):
    await _create(client, user_payload)
    response = await client.get("/api/users")
    assert response.status_code == 200
    assert "motDePasse" not in response.text
    assert "$2" not in response.text


async def test_duplicate_email(client, user_payload):
    await _create(client, user_payload)
    response = await client.post("/api/users", json=user_payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Un utilisateur avec cet email existe déjà"}


async def test_invalid_email_and_short_password(client):
    response = await client.post(
        "/api/users", json={"email": "pas-un-email", "motDePasse": "court"},
    )
    assert response.status_code == 400
    details = response.json()["details"]
    assert '"email" must be a valid email' in details
    assert '"motDePasse" length must be at least 8 characters long' in details


async def test_login_success(client, user_payload):
    utilisateur = await _create(client, user_payload)

    response = await client.post(
        "/api/users/login",
        json={"email": "marie@example.com", "motDePasse": "motdepasse123"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Connexion réussie"
    assert body["utilisateur"]["id"] == utilisateur["id"]
    assert "motDePasse" not in body["utilisateur"]


async def test_login_failures_are_indistinguishable(client, user_payload):
    await _create(client, user_payload)

    wrong_password = await client.post(
        "/api/users/login",
        json={"email": "marie@example.com", "motDePasse": "mauvais-mot"},
    )
    unknown_email = await client.post(
        "/api/users/login",
        json={"email": "inconnu@example.com", "motDePasse": "motdepasse123"},
    )
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {
        "error": "Email ou mot de passe incorrect",
    }


async def test_login_requires_both_fields(client):
    response = await client.post("/api/users/login", json={"email": "marie@example.com"})
    assert response.status_code == 400
    assert response.json() == {"error": "Email et mot de passe requis"}


async def test_password_update_rehashes(client, user_payload):
    utilisateur = await _create(client, user_payload)

    response = await client.put(
        f"/api/users/{utilisateur['id']}", json={"motDePasse": "nouveau-secret"},
    )
    assert response.status_code == 200
    assert "motDePasse" not in response.json()["utilisateur"]

    old = await client.post(
        "/api/users/login",
        json={"email": "marie@example.com", "motDePasse": "motdepasse123"},
    )
    new = await client.post(
        "/api/users/login",
        json={"email": "marie@example.com", "motDePasse": "nouveau-secret"},
    )
    assert old.status_code == 401
    assert new.status_code == 200


async def test_search_and_role_filter(client, user_payload):
    await _create(client, user_payload)
    await _create(
        client, user_payload, email="admin@example.com", nom="Martin", role="ADMIN",
        newsletter=True,
    )

    body = (await client.get("/api/users/search", params={"q": "Martin"})).json()
    assert [u["email"] for u in body["utilisateurs"]] == ["admin@example.com"]

    body = (await client.get("/api/users", params={"role": "ADMIN"})).json()
    assert body["pagination"]["total"] == 1

    body = (await client.get("/api/users", params={"newsletter": "false"})).json()
    assert [u["email"] for u in body["utilisateurs"]] == ["marie@example.com"]


async def test_delete_user(client, user_payload):
    utilisateur = await _create(client, user_payload)
    response = await client.delete(f"/api/users/{utilisateur['id']}")
    assert response.json() == {"message": "Utilisateur supprimé avec succès"}
    assert (await client.get(f"/api/users/{utilisateur['id']}")).status_code == 404


async def test_password_over_bcrypt_limit_is_rejected(client, user_payload):
    response = await client.post("/api/users", json={**user_payload, "motDePasse": "a" * 100})
    assert response.status_code == 400
    assert response.json()["details"] == [
        '"motDePasse" length must be less than or equal to 72 bytes',
    ]


async def test_password_limit_counts_utf8_bytes(client, user_payload):
    response = await client.post("/api/users", json={**user_payload, "motDePasse": "é" * 40})
    assert response.status_code == 400
    assert response.json()["details"] == [
        '"motDePasse" length must be less than or equal to 72 bytes',
    ]


async def test_password_update_over_bcrypt_limit_is_rejected(client, user_payload):
    utilisateur = await _create(client, user_payload)
    response = await client.put(
        f"/api/users/{utilisateur['id']}", json={"motDePasse": "b" * 100},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Données invalides"


async def test_created_user_reads_back_identically(client, user_payload):
    created = await _create(
        client, user_payload,
        role="ADMIN", adresse="12 rue des Lilas, Lyon", telephone="0601020304",
        newsletter=True,
    )

    response = await client.get(f"/api/users/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created
