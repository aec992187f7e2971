"""Pydantic schemas for API requests and responses."""

from recipebox.schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from recipebox.schemas.favorite import FavoriteIdsResponse, FavoriteToggle, FavoriteToggleResponse
from recipebox.schemas.recipe import (
    RecipeCreatedResponse,
    RecipeDetailResponse,
    RecipeListResponse,
    RecipeResponse,
    RecipeWrite,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "CurrentUserResponse",
    "MessageResponse",
    "RecipeWrite",
    "RecipeResponse",
    "RecipeListResponse",
    "RecipeDetailResponse",
    "RecipeCreatedResponse",
    "FavoriteToggle",
    "FavoriteToggleResponse",
    "FavoriteIdsResponse",
]
