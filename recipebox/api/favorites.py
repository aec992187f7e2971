"""Favorite API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from recipebox.api.dependencies import (
    CurrentAccount,
    get_current_account,
    get_favorite_service,
    get_recipe_service,
)
from recipebox.api.recipes import recipe_not_found, to_list_response
from recipebox.schemas.favorite import FavoriteIdsResponse, FavoriteToggle, FavoriteToggleResponse
from recipebox.schemas.recipe import RecipeListResponse
from recipebox.services.favorite_service import FavoriteService
from recipebox.services.recipe_service import RecipeService

router = APIRouter(prefix="/api/favorites", tags=["favorites"])


@router.post("/toggle", response_model=FavoriteToggleResponse)
async def toggle_favorite(
    toggle: FavoriteToggle,
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    favorites: Annotated[FavoriteService, Depends(get_favorite_service)],
    recipes: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Favorite or unfavorite one of the current user's recipes."""
    if recipes.get_by_id(toggle.recipe_id, current_account.id) is None:
        raise recipe_not_found()

    favorited = favorites.toggle(current_account.id, toggle.recipe_id)
    message = "Recipe added to favorites" if favorited else "Recipe removed from favorites"
    return FavoriteToggleResponse(favorited=favorited, message=message)


@router.get("", response_model=FavoriteIdsResponse)
async def list_favorite_ids(
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    favorites: Annotated[FavoriteService, Depends(get_favorite_service)],
):
    """Get the current user's favorited recipe ids."""
    return FavoriteIdsResponse(favorite_ids=favorites.list_favorite_ids(current_account.id))


@router.get("/recipes", response_model=RecipeListResponse)
async def list_favorite_recipes(
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    favorites: Annotated[FavoriteService, Depends(get_favorite_service)],
):
    """Get the current user's favorited recipes with full details."""
    return to_list_response(favorites.list_favorite_recipes(current_account.id))
