"""Tests for the demo data seeding script."""

from recipebox.models import Favorite, Recipe, User
from scripts.seed_demo_data import DEMO_EMAIL, DEMO_PASSWORD, DEMO_RECIPES, seed_demo_data


def test_seed_demo_data(db):
    """Test seeding creates the demo account, its recipes and a favorite."""
    user = seed_demo_data(db)

    assert user.email == DEMO_EMAIL
    assert db.query(Recipe).filter(Recipe.user_id == user.id).count() == len(DEMO_RECIPES)
    assert db.query(Favorite).filter(Favorite.user_id == user.id).count() == 1


def test_reseeding_replaces_demo_data(db):
    """Test running the seed twice does not duplicate anything."""
    seed_demo_data(db)
    user = seed_demo_data(db)

    assert db.query(User).count() == 1
    assert db.query(Recipe).count() == len(DEMO_RECIPES)
    assert db.query(Recipe).filter(Recipe.user_id == user.id).count() == len(DEMO_RECIPES)


def test_demo_user_can_log_in(db, client):
    """Test the seeded credentials work through the API."""
    seed_demo_data(db)

    response = client.post(
        "/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD}
    )
    assert response.status_code == 200
    favorites = client.get("/api/favorites/recipes").json()["recipes"]
    assert [r["title"] for r in favorites] == ["Tomato Soup"]
