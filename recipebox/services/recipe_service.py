"""Recipe access scoped to the owning user."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Query, Session

from recipebox.models.mixins import utcnow
from recipebox.models.recipe import DEFAULT_SERVINGS, Recipe, new_recipe_id

logger = logging.getLogger(__name__)

# Fields replaced wholesale by an update; is_scraped is fixed at creation
MUTABLE_FIELDS = (
    "title",
    "time",
    "servings",
    "category",
    "source_url",
    "image_url",
    "image_path",
    "ingredients",
    "steps",
    "notes",
)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so they match literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def recipe_values(data: Mapping[str, Any]) -> dict[str, Any]:
    """Apply defaults to the mutable recipe fields."""
    return {
        "title": data["title"],
        "time": data.get("time") or None,
        "servings": data.get("servings") or DEFAULT_SERVINGS,
        "category": data.get("category") or None,
        "source_url": data.get("source_url") or None,
        "image_url": data.get("image_url") or None,
        "image_path": data.get("image_path") or None,
        "ingredients": list(data.get("ingredients") or []),
        "steps": list(data.get("steps") or []),
        "notes": data.get("notes") or None,
    }


class RecipeService:
    """CRUD and lookup for recipes.

    Every query is filtered by the caller's user id, so a recipe that belongs to
    someone else behaves exactly like one that does not exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def _owned(self, user_id: int) -> Query:
        return self.db.query(Recipe).filter(Recipe.user_id == user_id)

    def create(self, user_id: int, data: Mapping[str, Any]) -> str:
        """Create a recipe and return its new id."""
        recipe_id = new_recipe_id()
        recipe = Recipe(
            id=recipe_id,
            user_id=user_id,
            is_scraped=bool(data.get("is_scraped", False)),
            **recipe_values(data),
        )
        self.db.add(recipe)
        self.db.commit()
        logger.info(f"Recipe created: {recipe_id} for user {user_id}")
        return recipe_id

    def list_for_account(self, user_id: int) -> list[Recipe]:
        """All of the user's recipes, newest first."""
        return self._owned(user_id).order_by(Recipe.created_at.desc()).all()

    def get_by_id(self, recipe_id: str, user_id: int) -> Recipe | None:
        return self._owned(user_id).filter(Recipe.id == recipe_id).first()

    def update(self, recipe_id: str, user_id: int, data: Mapping[str, Any]) -> bool:
        """Replace the mutable fields. Returns False if nothing matched."""
        values = {getattr(Recipe, name): value for name, value in recipe_values(data).items()}
        values[Recipe.updated_at] = utcnow()
        updated = (
            self._owned(user_id)
            .filter(Recipe.id == recipe_id)
            .update(values, synchronize_session=False)
        )
        self.db.commit()
        if updated:
            logger.info(f"Recipe updated: {recipe_id} for user {user_id}")
        return updated > 0

    def delete(self, recipe_id: str, user_id: int) -> bool:
        """Delete a recipe; its favorites go with it. Returns False if nothing matched."""
        deleted = (
            self._owned(user_id)
            .filter(Recipe.id == recipe_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted:
            logger.info(f"Recipe deleted: {recipe_id} for user {user_id}")
        return deleted > 0

    def search(self, user_id: int, query: str | None) -> list[Recipe]:
        """Case-insensitive title substring search. An empty query matches everything."""
        recipes = self._owned(user_id)
        query = (query or "").strip()
        if query:
            recipes = recipes.filter(Recipe.title.ilike(f"%{escape_like(query)}%", escape="\\"))
        return recipes.order_by(Recipe.created_at.desc()).all()

    def list_by_category(self, user_id: int, category: str) -> list[Recipe]:
        """Recipes with exactly this category, newest first."""
        return (
            self._owned(user_id)
            .filter(Recipe.category == category)
            .order_by(Recipe.created_at.desc())
            .all()
        )
