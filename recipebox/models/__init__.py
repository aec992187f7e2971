"""SQLAlchemy models."""

from recipebox.models.favorite import Favorite
from recipebox.models.recipe import Recipe
from recipebox.models.session import UserSession
from recipebox.models.user import User

__all__ = [
    "User",
    "Recipe",
    "Favorite",
    "UserSession",
]
