"""
HTTP tests for the meal plan routes.

The routes run against the in-memory stores through a dependency override,
so these tests check status codes, payload shapes and error envelopes.
"""

import uuid

from fastapi.testclient import TestClient

from test_fixtures import api_client, catalog, db_session, plan_payload, service, sql_api_client, store
from app.config import settings
from domain.models import Recipe, RecipeNutrition
from main import app

PREFIX = f"{settings.api_prefix}/meal-plans"
HEADER = settings.user_id_header


def auth(user_id: uuid.UUID) -> dict:
    return {HEADER: str(user_id)}


def create_plan(client: TestClient, owner: uuid.UUID, **overrides) -> dict:
    r = client.post(PREFIX, json=plan_payload(**overrides), headers=auth(owner))
    assert r.status_code == 201, r.text
    return r.json()


def test_health_check():
    client = TestClient(app)
    r = client.get(f"{settings.api_prefix}/health-check")
    assert r.status_code == 200
    assert r.json()["service"] == settings.app_name
    assert r.headers.get("x-request-id")


def test_create_returns_plan_with_totals_and_items(api_client):
    owner = uuid.uuid4()

    body = create_plan(api_client, owner)

    assert body["name"] == "Week 1"
    assert body["user_id"] == str(owner)
    assert body["start_date"] == "2024-01-01"
    assert body["end_date"] == "2024-01-07"
    assert body["total_calories"] == 400
    assert body["total_protein"] == 25
    assert body["total_carbs"] == 30
    assert body["total_fat"] == 15
    assert len(body["items"]) == 1
    assert body["items"][0]["meal_type"] == "breakfast"
    assert body["items"][0]["day_of_week"] == "monday"
    assert body["items"][0]["recipe_id"] == 42
    assert body["items"][0]["recipe_title"] == "Overnight Oats"


def test_create_ignores_client_supplied_totals(api_client):
    body = create_plan(api_client, uuid.uuid4(), total_calories=99999)

    assert body["total_calories"] == 400


def test_create_with_empty_meals_is_bad_request(api_client, store):
    r = api_client.post(PREFIX, json=plan_payload(meals=[]), headers=auth(uuid.uuid4()))

    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NO_MEALS"
    assert store.plans == {}


def test_create_with_blank_name_is_bad_request(api_client, store):
    r = api_client.post(PREFIX, json=plan_payload(name="   "), headers=auth(uuid.uuid4()))

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "EMPTY_NAME"
    assert store.plans == {}


def test_create_with_inverted_dates_is_bad_request(api_client):
    r = api_client.post(
        PREFIX,
        json=plan_payload(start_date="2024-01-07", end_date="2024-01-01"),
        headers=auth(uuid.uuid4()),
    )

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_DATE_RANGE"
    assert r.json()["error"]["details"]["start_date"] == "2024-01-07"


def test_create_with_malformed_body_is_unprocessable(api_client):
    bad_meal = {"meal_type": "brunch", "day_of_week": "monday", "date": "2024-01-01", "recipe_id": 42}
    r = api_client.post(PREFIX, json=plan_payload(meals=[bad_meal]), headers=auth(uuid.uuid4()))

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_missing_or_malformed_identity_is_unauthorized(api_client):
    r = api_client.post(PREFIX, json=plan_payload())
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "MISSING_USER"

    r = api_client.get(f"{PREFIX}/user", headers={HEADER: "not-a-uuid"})
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "INVALID_USER"


def test_get_plan_by_any_user(api_client):
    plan = create_plan(api_client, uuid.uuid4())

    r = api_client.get(f"{PREFIX}/{plan['id']}", headers=auth(uuid.uuid4()))

    assert r.status_code == 200
    assert r.json()["id"] == plan["id"]
    assert r.json()["total_calories"] == 400


def test_get_unknown_plan_is_not_found(api_client):
    r = api_client.get(f"{PREFIX}/{uuid.uuid4()}", headers=auth(uuid.uuid4()))

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_list_user_plans(api_client):
    owner = uuid.uuid4()
    create_plan(api_client, owner, name="January")
    create_plan(api_client, owner, name="March", start_date="2024-03-04", end_date="2024-03-10")
    create_plan(api_client, uuid.uuid4(), name="Not mine")

    r = api_client.get(f"{PREFIX}/user", headers=auth(owner))

    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["March", "January"]


def test_list_items_with_enrichment(api_client):
    meals = [
        {"meal_type": "dinner", "day_of_week": "monday", "date": "2024-01-01", "recipe_id": 8},
        {"meal_type": "breakfast", "day_of_week": "monday", "date": "2024-01-01", "recipe_id": 404},
    ]
    plan = create_plan(api_client, uuid.uuid4(), meals=meals)

    r = api_client.get(f"{PREFIX}/{plan['id']}/items", headers=auth(uuid.uuid4()))

    assert r.status_code == 200
    items = r.json()
    assert [i["meal_type"] for i in items] == ["breakfast", "dinner"]
    assert items[0]["recipe_title"] is None
    assert items[1]["recipe_title"] == "Salmon with Rice"


def test_delete_by_non_owner_is_forbidden(api_client):
    owner = uuid.uuid4()
    plan = create_plan(api_client, owner)

    r = api_client.delete(f"{PREFIX}/{plan['id']}", headers=auth(uuid.uuid4()))

    assert r.status_code == 403
    assert r.json()["error"]["code"] == "FORBIDDEN"
    assert api_client.get(f"{PREFIX}/{plan['id']}", headers=auth(owner)).status_code == 200


def test_delete_by_owner_then_gone(api_client):
    owner = uuid.uuid4()
    plan = create_plan(api_client, owner)

    r = api_client.delete(f"{PREFIX}/{plan['id']}", headers=auth(owner))
    assert r.status_code == 200
    assert r.json()["message"] == "Meal plan deleted successfully"

    assert api_client.get(f"{PREFIX}/{plan['id']}", headers=auth(owner)).status_code == 404
    assert api_client.get(f"{PREFIX}/{plan['id']}/items", headers=auth(owner)).status_code == 404
    assert api_client.delete(f"{PREFIX}/{plan['id']}", headers=auth(owner)).status_code == 404


def test_recompute_nutrition(api_client, catalog):
    plan = create_plan(
        api_client,
        uuid.uuid4(),
        meals=[{"meal_type": "lunch", "day_of_week": "monday", "date": "2024-01-01", "recipe_id": 99}],
    )
    assert plan["total_calories"] == 0
    catalog.add_recipe(99, "Mystery Stew", calories=450, protein=28, carbohydrates=35, fat=19)

    r = api_client.put(f"{PREFIX}/{plan['id']}/nutrition", headers=auth(uuid.uuid4()))
    assert r.status_code == 200

    refreshed = api_client.get(f"{PREFIX}/{plan['id']}", headers=auth(uuid.uuid4())).json()
    assert refreshed["total_calories"] == 450
    assert refreshed["total_fat"] == 19


def test_recompute_unknown_plan_is_not_found(api_client):
    r = api_client.put(f"{PREFIX}/{uuid.uuid4()}/nutrition", headers=auth(uuid.uuid4()))

    assert r.status_code == 404


def test_add_and_remove_item(api_client):
    owner = uuid.uuid4()
    plan = create_plan(api_client, owner)
    meal = {"meal_type": "snack", "day_of_week": "monday", "date": "2024-01-01", "recipe_id": 7}

    r = api_client.post(f"{PREFIX}/{plan['id']}/items", json=meal, headers=auth(owner))
    assert r.status_code == 201
    item = r.json()
    assert item["recipe_title"] == "Greek Yogurt Bowl"
    assert api_client.get(f"{PREFIX}/{plan['id']}", headers=auth(owner)).json()["total_calories"] == 700

    r = api_client.delete(f"{PREFIX}/{plan['id']}/items/{item['id']}", headers=auth(owner))
    assert r.status_code == 200
    assert api_client.get(f"{PREFIX}/{plan['id']}", headers=auth(owner)).json()["total_calories"] == 400


def test_add_item_by_non_owner_is_forbidden(api_client):
    plan = create_plan(api_client, uuid.uuid4())
    meal = {"meal_type": "snack", "day_of_week": "monday", "date": "2024-01-01", "recipe_id": 7}

    r = api_client.post(f"{PREFIX}/{plan['id']}/items", json=meal, headers=auth(uuid.uuid4()))

    assert r.status_code == 403


# =============================================================================
# SQL-BACKED ROUTES
# =============================================================================


def test_database_health_check(sql_api_client):
    r = sql_api_client.get(f"{settings.api_prefix}/health-check/db")

    assert r.status_code == 200
    assert r.json() == {"database": "ok"}


def test_create_returns_items_ordered_and_enriched(sql_api_client, db_session):
    oats = Recipe(title="Overnight Oats", image_url="https://img.example.com/oats.jpg")
    salmon = Recipe(title="Salmon with Rice")
    db_session.add_all([oats, salmon])
    db_session.flush()
    db_session.add_all([
        RecipeNutrition(recipe_id=oats.id, calories=400, protein=25, carbohydrates=30, fat=15),
        RecipeNutrition(recipe_id=salmon.id, calories=500, protein=30, carbohydrates=40, fat=20),
    ])
    db_session.commit()
    meals = [
        {"meal_type": "snack", "day_of_week": "tuesday", "date": "2024-01-02", "recipe_id": salmon.id},
        {"meal_type": "dinner", "day_of_week": "monday", "date": "2024-01-01", "recipe_id": salmon.id},
        {"meal_type": "breakfast", "day_of_week": "monday", "date": "2024-01-01", "recipe_id": oats.id},
    ]

    body = create_plan(sql_api_client, uuid.uuid4(), meals=meals)

    assert body["total_calories"] == 1400
    assert [(i["date"], i["meal_type"]) for i in body["items"]] == [
        ("2024-01-01", "breakfast"),
        ("2024-01-01", "dinner"),
        ("2024-01-02", "snack"),
    ]
    assert [i["recipe_title"] for i in body["items"]] == [
        "Overnight Oats",
        "Salmon with Rice",
        "Salmon with Rice",
    ]
    assert body["items"][0]["recipe_image"] == "https://img.example.com/oats.jpg"

    listed = sql_api_client.get(f"{PREFIX}/{body['id']}/items", headers=auth(uuid.uuid4())).json()
    assert [i["id"] for i in listed] == [i["id"] for i in body["items"]]
