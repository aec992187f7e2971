"""Favorite access for the current user."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from recipebox.models.favorite import Favorite
from recipebox.models.recipe import Recipe

logger = logging.getLogger(__name__)


class FavoriteService:
    """Link users to the recipes they favorited."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, user_id: int, recipe_id: str) -> bool:
        """Favorite a recipe. Returns False if it was already favorited.

        Any other constraint failure, such as a recipe that no longer exists,
        is raised.
        """
        self.db.add(Favorite(user_id=user_id, recipe_id=recipe_id))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.is_favorited(user_id, recipe_id):
                return False
            raise
        return True

    def remove(self, user_id: int, recipe_id: str) -> bool:
        deleted = (
            self.db.query(Favorite)
            .filter(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0

    def is_favorited(self, user_id: int, recipe_id: str) -> bool:
        return (
            self.db.query(Favorite.id)
            .filter(Favorite.user_id == user_id, Favorite.recipe_id == recipe_id)
            .first()
            is not None
        )

    def toggle(self, user_id: int, recipe_id: str) -> bool:
        """Flip the favorite state and return the new one."""
        if self.is_favorited(user_id, recipe_id):
            self.remove(user_id, recipe_id)
            logger.info(f"Recipe unfavorited: {recipe_id} by user {user_id}")
            return False

        # False here means a concurrent toggle stored the same row first
        added = self.add(user_id, recipe_id)
        if added:
            logger.info(f"Recipe favorited: {recipe_id} by user {user_id}")
        return added or self.is_favorited(user_id, recipe_id)

    def list_favorite_ids(self, user_id: int) -> list[str]:
        """Favorited recipe ids, newest favorite first."""
        rows = (
            self.db.query(Favorite.recipe_id)
            .filter(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
            .all()
        )
        return [recipe_id for (recipe_id,) in rows]

    def list_favorite_recipes(self, user_id: int) -> list[Recipe]:
        """Favorited recipes, newest favorite first."""
        return (
            self.db.query(Recipe)
            .join(Favorite, Favorite.recipe_id == Recipe.id)
            .filter(Favorite.user_id == user_id)
            .order_by(Favorite.created_at.desc(), Favorite.id.desc())
            .all()
        )
