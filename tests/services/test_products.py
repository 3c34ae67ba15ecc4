"""Product Routes — CRUD, active-only listing, filters and pagination.

Tests:
    - Create applies defaults (actif, empty id lists as "[]") and returns 201
    - Invalid payloads return 400 with one readable message per problem
    - List pagination metadata (pages = ceil(total / limit))
    - Inactive products never appear in list or search
    - Search filters: q, categorie, yukaMin, prixMin / prixMax
    - Update / delete envelopes and 404 on unknown ids
"""

import pytest


async def _create(client, payload, **overrides):
    response = await client.post("/api/products", json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["produit"]


async def test_create_product_applies_defaults(client, product_payload):
    response = await client.post("/api/products", json=product_payload)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Produit créé avec succès"
    produit = body["produit"]
    assert produit["id"]
    assert produit["nom"] == "Savon au Miel"
    assert produit["prix"] == 8.9
    assert produit["actif"] is True
    assert produit["ingredientIds"] == "[]"
    assert produit["bienfaits"] == "[]"
    assert produit["quantiteIds"] == "[]"
    assert produit["blogIds"] == "[]"
    assert produit["yukaScore"] is None
    assert "createdAt" in produit and "updatedAt" in produit


async def test_create_product_keeps_id_lists(client, product_payload):
    produit = await _create(
        client, product_payload,
        ingredientIds='["ing-1", "ing-2"]', bienfaits=["hydratant", "apaisant"],
    )
    assert produit["ingredientIds"] == '["ing-1","ing-2"]'
    assert produit["bienfaits"] == '["hydratant","apaisant"]'


async def test_create_product_rounds_price(client, product_payload):
    produit = await _create(client, product_payload, prix=12.499)
    assert produit["prix"] == 12.5


async def test_create_product_rejects_short_name(client, product_payload):
    response = await client.post("/api/products", json={**product_payload, "nom": "S"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Données invalides"
    assert body["details"] == ['"nom" length must be at least 2 characters long']


async def test_create_product_reports_every_problem(client):
    response = await client.post("/api/products", json={"nom": "Savon"})
    assert response.status_code == 400
    details = response.json()["details"]
    assert '"description" is required' in details
    assert '"prix" is required' in details
    assert '"categorie" is required' in details
    assert '"stock" is required' in details


async def test_create_product_rejects_negative_price(client, product_payload):
    response = await client.post("/api/products", json={**product_payload, "prix": -1})
    assert response.status_code == 400
    assert response.json()["details"] == ['"prix" must be greater than 0']


async def test_create_product_rejects_unknown_category(client, product_payload):
    response = await client.post(
        "/api/products", json={**product_payload, "categorie": "parfum"},
    )
    assert response.status_code == 400
    assert response.json()["details"][0].startswith('"categorie" must be one of [')


async def test_create_product_rejects_malformed_id_list(client, product_payload):
    response = await client.post(
        "/api/products", json={**product_payload, "ingredientIds": "not json"},
    )
    assert response.status_code == 400
    assert response.json()["details"] == ['"ingredientIds" must be a JSON array of strings']


async def test_list_products_paginates(client, product_payload):
    for i in range(3):
        await _create(client, product_payload, nom=f"Savon {i}")

    response = await client.get("/api/products", params={"page": 2, "limit": 2})
    assert response.status_code == 200
    body = response.json()
    assert len(body["produits"]) == 1
    assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "pages": 2}


async def test_list_products_empty(client):
    response = await client.get("/api/products")
    assert response.status_code == 200
    assert response.json() == {
        "produits": [],
        "pagination": {"page": 1, "limit": 10, "total": 0, "pages": 0},
    }


@pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 101}])
async def test_list_products_rejects_bad_page_window(client, params):
    response = await client.get("/api/products", params=params)
    assert response.status_code == 400
    assert response.json()["error"] == "Données invalides"


async def test_list_products_newest_first(client, product_payload):
    first = await _create(client, product_payload, nom="Premier savon")
    second = await _create(client, product_payload, nom="Second savon")

    body = (await client.get("/api/products")).json()
    ids = [p["id"] for p in body["produits"]]
    assert ids == [second["id"], first["id"]]


async def test_inactive_products_are_hidden(client, product_payload):
    await _create(client, product_payload, nom="Savon actif")
    await _create(client, product_payload, nom="Savon retiré", actif=False)

    listing = (await client.get("/api/products")).json()
    assert [p["nom"] for p in listing["produits"]] == ["Savon actif"]
    assert listing["pagination"]["total"] == 1

    search = (await client.get("/api/products/search", params={"q": "Savon"})).json()
    assert search["count"] == 1


async def test_inactive_product_still_readable_by_id(client, product_payload):
    produit = await _create(client, product_payload, actif=False)
    response = await client.get(f"/api/products/{produit['id']}")
    assert response.status_code == 200
    assert response.json()["actif"] is False


async def test_search_matches_name_or_description(client, product_payload):
    await _create(client, product_payload, nom="Savon au Miel")
    await _create(
        client, product_payload, nom="Crème de nuit",
        description="Crème riche au miel de lavande", categorie="crème",
    )
    await _create(
        client, product_payload, nom="Huile sèche",
        description="Huile légère pour le corps", categorie="huile",
    )

    body = (await client.get("/api/products/search", params={"q": "iel"})).json()
    assert body["count"] == 2
    assert {p["nom"] for p in body["produits"]} == {"Savon au Miel", "Crème de nuit"}


async def test_search_filters_by_category_and_bounds(client, product_payload):
    await _create(client, product_payload, nom="Savon A", prix=5, yukaScore=40)
    await _create(client, product_payload, nom="Savon B", prix=10, yukaScore=80)
    await _create(
        client, product_payload, nom="Masque C", prix=20, yukaScore=90,
        categorie="masque",
    )

    body = (await client.get(
        "/api/products/search", params={"categorie": "savon", "yukaMin": 50},
    )).json()
    assert [p["nom"] for p in body["produits"]] == ["Savon B"]

    body = (await client.get(
        "/api/products/search", params={"prixMin": 10, "prixMax": 20},
    )).json()
    assert {p["nom"] for p in body["produits"]} == {"Savon B", "Masque C"}


async def test_list_filters_by_max_price(client, product_payload):
    await _create(client, product_payload, nom="Savon A", prix=5)
    await _create(client, product_payload, nom="Savon B", prix=15)

    body = (await client.get("/api/products", params={"prixMax": 10})).json()
    assert [p["nom"] for p in body["produits"]] == ["Savon A"]


async def test_get_product_not_found(client):
    response = await client.get("/api/products/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Produit non trouvé"}


async def test_update_product_changes_only_given_fields(client, product_payload):
    produit = await _create(client, product_payload)

    response = await client.put(
        f"/api/products/{produit['id']}", json={"stock": 3, "ingredientIds": '["x"]'},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Produit mis à jour avec succès"
    assert body["produit"]["stock"] == 3
    assert body["produit"]["ingredientIds"] == '["x"]'
    assert body["produit"]["nom"] == produit["nom"]
    assert body["produit"]["prix"] == produit["prix"]


async def test_update_product_validates(client, product_payload):
    produit = await _create(client, product_payload)
    response = await client.put(f"/api/products/{produit['id']}", json={"stock": -2})
    assert response.status_code == 400
    assert response.json()["details"] == ['"stock" must be greater than or equal to 0']


async def test_update_missing_product(client):
    response = await client.put("/api/products/missing", json={"stock": 1})
    assert response.status_code == 404
    assert response.json()["error"] == "Produit non trouvé"


async def test_delete_product(client, product_payload):
    produit = await _create(client, product_payload)

    response = await client.delete(f"/api/products/{produit['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Produit supprimé avec succès"}

    assert (await client.get(f"/api/products/{produit['id']}")).status_code == 404
    assert (await client.delete(f"/api/products/{produit['id']}")).status_code == 404


async def test_price_rounding_to_zero_is_rejected(client, product_payload):
    response = await client.post("/api/products", json={**product_payload, "prix": 0.004})
    assert response.status_code == 400
    assert response.json()["details"] == ['"prix" must be greater than 0']


async def test_search_is_case_sensitive(client, product_payload):
    await _create(client, product_payload, nom="Savon au Miel", description="Pain lavant artisanal")

    lower = (await client.get("/api/products/search", params={"q": "savon"})).json()
    assert lower["count"] == 0

    exact = (await client.get("/api/products/search", params={"q": "Savon"})).json()
    assert exact["count"] == 1


async def test_created_product_reads_back_identically(client, product_payload):
    created = await _create(
        client, product_payload,
        yukaScore=85, provenance="France",
        imageUrl="https://cdn.example.com/savon.png",
        ingredientIds='["ing-1","ing-2"]', bienfaits='["doux"]',
        quantiteIds='["q-1"]', blogIds='["b-1"]',
    )

    response = await client.get(f"/api/products/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created
    assert created["imageUrl"] == "https://cdn.example.com/savon.png"
    assert created["quantiteIds"] == '["q-1"]'
