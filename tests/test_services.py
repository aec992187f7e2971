"""Tests for the user, recipe, favorite and session services."""

from datetime import timedelta

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from recipebox.errors import ConstraintViolation
from recipebox.models.favorite import Favorite
from recipebox.models.mixins import utcnow
from recipebox.models.recipe import Recipe
from recipebox.models.session import UserSession
from recipebox.models.user import User
from recipebox.schemas.auth import UserLogin, normalize_email
from recipebox.services import user_service
from recipebox.services.auth import create_session_token, decode_session_token
from recipebox.services.favorite_service import FavoriteService
from recipebox.services.recipe_service import RecipeService
from recipebox.services.session_service import SessionService
from recipebox.services.user_service import UserService

# --- Users ---


def test_create_and_find_user(db):
    """Test a created user can be found and its password is not stored in plaintext."""
    service = UserService(db)
    user_id = service.create("Ann", "Ann@X.com", "pass1")

    user = service.find_by_email("ann@x.com")
    assert user is not None
    assert user.id == user_id
    assert user.email == "ann@x.com"
    assert user.password_hash != "pass1"
    assert "pass1" not in user.password_hash
    assert service.find_by_id(user_id).name == "Ann"


def test_find_missing_user(db):
    """Test lookups for unknown accounts."""
    service = UserService(db)
    assert service.find_by_email("ghost@example.com") is None
    assert service.find_by_id(12345) is None


def test_verify_password(db):
    """Test only the right password verifies."""
    service = UserService(db)
    user = service.find_by_id(service.create("Ann", "ann@x.com", "pass1"))

    assert service.verify_password(user, "pass1") is True
    assert service.verify_password(user, "pass2") is False
    assert service.verify_password(user, "") is False
    assert service.verify_password(user, "PASS1") is False


def test_duplicate_email_is_rejected(db):
    """Test the unique email constraint, regardless of case."""
    service = UserService(db)
    service.create("Ann", "ann@x.com", "pass1")

    with pytest.raises(ConstraintViolation):
        service.create("Other Ann", "ANN@x.com", "pass2")

    assert db.query(User).count() == 1


def test_authenticate(db):
    """Test authenticate combines lookup and password check."""
    service = UserService(db)
    service.create("Ann", "ann@x.com", "pass1")

    assert service.authenticate("ann@x.com", "pass1").name == "Ann"
    assert service.authenticate("ann@x.com", "wrong") is None
    assert service.authenticate("bob@x.com", "pass1") is None


def test_authenticate_unknown_email_spends_a_hash_check(db, monkeypatch):
    """Test unknown emails still pay for a password verification."""
    calls = []
    monkeypatch.setattr(user_service, "dummy_verify_password", lambda: calls.append("dummy"))
    service = UserService(db)
    service.create("Ann", "ann@x.com", "pass1")

    assert service.authenticate("bob@x.com", "pass1") is None
    assert calls == ["dummy"]

    assert service.authenticate("ann@x.com", "wrong") is None
    assert calls == ["dummy"]


def test_lookup_uses_same_email_normalization_as_requests(db):
    """Test the service and the request schemas agree on email form."""
    service = UserService(db)
    user_id = service.create("Ann", "  Ann@X.com ", "pass1")

    email = normalize_email("  ANN@x.COM")
    assert email == "ann@x.com"
    assert UserLogin(email="  ANN@x.COM", password="pass1").email == email
    assert service.find_by_email("  ANN@x.COM").id == user_id


def test_touch_activity(db, user):
    """Test refreshing a user's activity timestamp."""
    before = user.updated_at
    service = UserService(db)

    assert service.touch_activity(user.id) is True
    db.refresh(user)
    assert user.updated_at >= before
    assert service.touch_activity(99999) is False


# --- Recipes ---


def test_create_recipe_defaults(db, user):
    """Test omitted optional fields get their defaults."""
    service = RecipeService(db)
    recipe_id = service.create(user.id, {"title": "Soup"})

    recipe = service.get_by_id(recipe_id, user.id)
    assert recipe.title == "Soup"
    assert recipe.servings == 2
    assert recipe.ingredients == []
    assert recipe.steps == []
    assert recipe.is_scraped is False
    assert recipe.time is None


def test_recipe_sequences_round_trip(db, user):
    """Test ingredient and step order survives storage."""
    service = RecipeService(db)
    ingredients = ["3 eggs", "200 g flour", "1 l milk", "pinch of salt"]
    steps = ["Whisk", "Rest 30 minutes", "Fry"]
    recipe_id = service.create(
        user.id, {"title": "Pancakes", "ingredients": ingredients, "steps": steps}
    )

    db.expire_all()
    recipe = service.get_by_id(recipe_id, user.id)
    assert recipe.ingredients == ingredients
    assert recipe.steps == steps


def test_blank_stored_sequences_read_as_empty(db, user):
    """Test a blank stored sequence is read back as an empty list."""
    service = RecipeService(db)
    recipe_id = service.create(user.id, {"title": "Soup", "steps": ["Boil"]})

    db.execute(text("UPDATE recipes SET steps = '' WHERE id = :id"), {"id": recipe_id})
    db.commit()
    db.expire_all()

    assert service.get_by_id(recipe_id, user.id).steps == []


def test_get_recipe_of_other_user(db, user, other_user):
    """Test another user's recipe is reported exactly like a missing one."""
    service = RecipeService(db)
    recipe_id = service.create(user.id, {"title": "Private"})

    assert service.get_by_id(recipe_id, other_user.id) is None
    assert service.get_by_id("missing", other_user.id) is None


def test_update_recipe(db, user):
    """Test update replaces the mutable fields."""
    service = RecipeService(db)
    recipe_id = service.create(
        user.id, {"title": "Soup", "servings": 4, "notes": "old", "is_scraped": True}
    )

    assert service.update(recipe_id, user.id, {"title": "Stew", "ingredients": ["Beef"]})

    db.expire_all()
    recipe = service.get_by_id(recipe_id, user.id)
    assert recipe.title == "Stew"
    assert recipe.ingredients == ["Beef"]
    assert recipe.servings == 2
    assert recipe.notes is None
    assert recipe.is_scraped is True


def test_update_and_delete_other_users_recipe(db, user, other_user):
    """Test foreign recipes cannot be changed or removed."""
    service = RecipeService(db)
    recipe_id = service.create(user.id, {"title": "Mine"})

    assert service.update(recipe_id, other_user.id, {"title": "Stolen"}) is False
    assert service.delete(recipe_id, other_user.id) is False

    db.expire_all()
    assert service.get_by_id(recipe_id, user.id).title == "Mine"


def test_delete_recipe(db, user):
    """Test deleting a recipe."""
    service = RecipeService(db)
    recipe_id = service.create(user.id, {"title": "Soup"})

    assert service.delete(recipe_id, user.id) is True
    assert service.get_by_id(recipe_id, user.id) is None
    assert service.delete(recipe_id, user.id) is False


def test_search_matches_listing_for_empty_query(db, user):
    """Test empty and blank queries apply no filter."""
    service = RecipeService(db)
    for title in ("Soup", "Bread", "Salad"):
        service.create(user.id, {"title": title})

    listed = [r.id for r in service.list_for_account(user.id)]
    assert [r.id for r in service.search(user.id, "")] == listed
    assert [r.id for r in service.search(user.id, None)] == listed
    assert service.search(user.id, "xyz-no-match") == []


def test_list_by_category(db, user, other_user):
    """Test category listing is exact and per user."""
    service = RecipeService(db)
    service.create(user.id, {"title": "Brownies", "category": "Dessert"})
    service.create(user.id, {"title": "Soup", "category": "Starter"})
    service.create(other_user.id, {"title": "Pie", "category": "Dessert"})

    assert [r.title for r in service.list_by_category(user.id, "Dessert")] == ["Brownies"]
    assert service.list_by_category(user.id, "dessert") == []


# --- Favorites ---


def test_add_favorite_twice(db, user):
    """Test a duplicate add is reported, not raised."""
    recipe_id = RecipeService(db).create(user.id, {"title": "Soup"})
    service = FavoriteService(db)

    assert service.add(user.id, recipe_id) is True
    assert service.add(user.id, recipe_id) is False
    assert service.is_favorited(user.id, recipe_id) is True
    assert db.query(Favorite).count() == 1


def test_favorite_missing_recipe_is_raised(db, user):
    """Test a favorite for a missing recipe fails instead of passing as a duplicate."""
    service = FavoriteService(db)

    with pytest.raises(IntegrityError):
        service.add(user.id, "no-such-recipe")
    with pytest.raises(IntegrityError):
        service.toggle(user.id, "no-such-recipe")

    assert service.is_favorited(user.id, "no-such-recipe") is False
    assert db.query(Favorite).count() == 0


def test_remove_favorite(db, user):
    """Test removing a favorite."""
    recipe_id = RecipeService(db).create(user.id, {"title": "Soup"})
    service = FavoriteService(db)
    service.add(user.id, recipe_id)

    assert service.remove(user.id, recipe_id) is True
    assert service.remove(user.id, recipe_id) is False
    assert service.is_favorited(user.id, recipe_id) is False


def test_toggle_twice_restores_state(db, user):
    """Test two toggles return to the starting state."""
    recipe_id = RecipeService(db).create(user.id, {"title": "Soup"})
    service = FavoriteService(db)

    assert service.toggle(user.id, recipe_id) is True
    assert service.toggle(user.id, recipe_id) is False
    assert service.is_favorited(user.id, recipe_id) is False


def test_favorites_are_per_user(db, user, other_user):
    """Test favorites belong to the user that made them."""
    recipe_id = RecipeService(db).create(user.id, {"title": "Soup"})
    service = FavoriteService(db)
    service.add(user.id, recipe_id)

    assert service.is_favorited(other_user.id, recipe_id) is False
    assert service.remove(other_user.id, recipe_id) is False
    assert service.list_favorite_ids(user.id) == [recipe_id]
    assert service.list_favorite_ids(other_user.id) == []


def test_list_favorite_recipes(db, user):
    """Test favorite recipes are ordered by when they were favorited."""
    recipes = RecipeService(db)
    first = recipes.create(user.id, {"title": "First", "steps": ["a", "b"]})
    second = recipes.create(user.id, {"title": "Second"})
    service = FavoriteService(db)
    service.add(user.id, first)
    service.add(user.id, second)

    favorites = service.list_favorite_recipes(user.id)
    assert [r.title for r in favorites] == ["Second", "First"]
    assert favorites[1].steps == ["a", "b"]


# --- Sessions ---


def test_session_lifecycle(db, user):
    """Test creating, resolving and destroying a session."""
    service = SessionService(db)
    session_id = service.create(user)

    user_session = service.get(session_id)
    assert user_session.user_id == user.id
    assert user_session.email == user.email

    assert service.destroy(session_id) is True
    assert service.get(session_id) is None
    assert service.destroy(session_id) is False


def test_expired_session_is_rejected_and_removed(db, user):
    """Test an expired session resolves to nothing and is cleaned up."""
    service = SessionService(db)
    session_id = service.create(user)
    db.query(UserSession).filter(UserSession.id == session_id).update(
        {UserSession.expires_at: utcnow() - timedelta(minutes=1)}
    )
    db.commit()

    assert service.get(session_id) is None
    assert db.query(UserSession).count() == 0


def test_purge_expired_sessions(db, user):
    """Test bulk removal of expired sessions keeps live ones."""
    service = SessionService(db)
    live = service.create(user)
    expired = service.create(user)
    db.query(UserSession).filter(UserSession.id == expired).update(
        {UserSession.expires_at: utcnow() - timedelta(hours=1)}
    )
    db.commit()

    assert service.purge_expired() == 1
    assert service.get(live) is not None


def test_session_token_round_trip():
    """Test signed cookie values decode to the session id and reject tampering."""
    token = create_session_token("abc123")
    assert decode_session_token(token) == "abc123"
    assert decode_session_token(token + "x") is None
    assert decode_session_token("garbage") is None


# --- Cascades ---


def test_deleting_user_cascades(db, user, other_user):
    """Test removing an account removes its recipes, favorites and sessions."""
    user_id, other_user_id = user.id, other_user.id
    recipes = RecipeService(db)
    favorites = FavoriteService(db)
    own_recipe = recipes.create(user_id, {"title": "Mine"})
    other_recipe = recipes.create(other_user_id, {"title": "Theirs"})
    favorites.add(user_id, own_recipe)
    favorites.add(user_id, other_recipe)
    favorites.add(other_user_id, own_recipe)
    favorites.add(other_user_id, other_recipe)
    SessionService(db).create(user)

    db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    db.commit()
    db.expunge_all()

    assert db.query(Recipe).filter(Recipe.user_id == user_id).count() == 0
    assert db.query(UserSession).filter(UserSession.user_id == user_id).count() == 0
    # Only other_user's favorite of their own recipe survives
    remaining = db.query(Favorite).all()
    assert [(f.user_id, f.recipe_id) for f in remaining] == [(other_user_id, other_recipe)]
