"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from recipebox.api.dependencies import CurrentAccount, get_current_account, get_recipe_service
from recipebox.errors import NotFoundOrNotOwned
from recipebox.models.recipe import Recipe
from recipebox.schemas.auth import MessageResponse
from recipebox.schemas.recipe import (
    RecipeCreatedResponse,
    RecipeDetailResponse,
    RecipeListResponse,
    RecipeResponse,
    RecipeWrite,
)
from recipebox.services.recipe_service import RecipeService

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def recipe_not_found() -> NotFoundOrNotOwned:
    return NotFoundOrNotOwned(
        "Recipe does not exist or you don't have permission to access it",
        error="Recipe not found",
    )


def to_list_response(recipes: list[Recipe]) -> RecipeListResponse:
    return RecipeListResponse(recipes=[RecipeResponse.model_validate(r) for r in recipes])


# --- Static routes first (before /{recipe_id}) ---


@router.get("", response_model=RecipeListResponse)
async def list_recipes(
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    recipes: Annotated[RecipeService, Depends(get_recipe_service)],
    category: Annotated[str | None, Query(max_length=100)] = None,
):
    """List the current user's recipes, optionally limited to one category."""
    if category:
        return to_list_response(recipes.list_by_category(current_account.id, category))
    return to_list_response(recipes.list_for_account(current_account.id))


@router.get("/search", response_model=RecipeListResponse)
async def search_recipes(
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    recipes: Annotated[RecipeService, Depends(get_recipe_service)],
    q: str = "",
):
    """Search the current user's recipes by title."""
    return to_list_response(recipes.search(current_account.id, q))


@router.post("", response_model=RecipeCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    recipe_data: RecipeWrite,
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    recipes: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Create a new recipe. Only the title is required."""
    recipe_id = recipes.create(current_account.id, recipe_data.model_dump())
    return RecipeCreatedResponse(recipe_id=recipe_id)


# --- Dynamic recipe routes (must be last) ---


@router.get("/{recipe_id}", response_model=RecipeDetailResponse)
async def get_recipe(
    recipe_id: str,
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    recipes: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Get a specific recipe."""
    recipe = recipes.get_by_id(recipe_id, current_account.id)
    if recipe is None:
        raise recipe_not_found()
    return RecipeDetailResponse(recipe=RecipeResponse.model_validate(recipe))


@router.put("/{recipe_id}", response_model=MessageResponse)
async def update_recipe(
    recipe_id: str,
    recipe_data: RecipeWrite,
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    recipes: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Replace a recipe's fields."""
    if not recipes.update(recipe_id, current_account.id, recipe_data.model_dump()):
        raise recipe_not_found()
    return MessageResponse(message="Recipe updated successfully")


@router.delete("/{recipe_id}", response_model=MessageResponse)
async def delete_recipe(
    recipe_id: str,
    current_account: Annotated[CurrentAccount, Depends(get_current_account)],
    recipes: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Delete a recipe."""
    if not recipes.delete(recipe_id, current_account.id):
        raise recipe_not_found()
    return MessageResponse(message="Recipe deleted successfully")
