"""Favorite schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FavoriteToggle(BaseModel):
    """Toggle the favorite state of one recipe."""

    model_config = ConfigDict(populate_by_name=True)

    recipe_id: str | None = Field(None, alias="recipeId", validate_default=True)

    @field_validator("recipe_id", mode="before")
    @classmethod
    def check_recipe_id(cls, value: Any) -> str:
        value = str(value).strip() if value is not None else ""
        if not value:
            raise ValueError("Recipe ID is required")
        return value


class FavoriteToggleResponse(BaseModel):
    """Resulting favorite state after a toggle."""

    success: bool = True
    favorited: bool
    message: str


class FavoriteIdsResponse(BaseModel):
    """Favorited recipe ids, newest first."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    favorite_ids: list[str] = Field(..., alias="favoriteIds")
