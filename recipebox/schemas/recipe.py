"""Recipe schemas."""

import re
from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

TITLE_MAX_LENGTH = 200
LABEL_MAX_LENGTH = 100
SERVINGS_MIN = 1
SERVINGS_MAX = 100

_http_url = TypeAdapter(HttpUrl)

# A scheme is followed by a colon that does not start a port number
_has_scheme = re.compile(r"^[a-z][a-z0-9+.-]*:(?!\d)", re.IGNORECASE)


def _blank_to_none(value: Any) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class RecipeWrite(BaseModel):
    """Body of a recipe create or update. Only the title is mandatory."""

    title: str | None = Field(None, validate_default=True)
    time: str | None = None
    servings: int | None = None
    category: str | None = None
    source_url: str | None = None
    image_url: str | None = None
    image_path: str | None = None
    ingredients: list[str] = []
    steps: list[str] = []
    notes: str | None = None
    is_scraped: bool = False  # only honoured on create

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str | None) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("Title is required")
        if len(value) > TITLE_MAX_LENGTH:
            raise ValueError("Title must be less than 200 characters")
        return value

    @field_validator("notes", "image_path", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> str | None:
        return _blank_to_none(value)

    @field_validator("time", "category", mode="before")
    @classmethod
    def check_label(cls, value: Any, info: ValidationInfo) -> str | None:
        value = _blank_to_none(value)
        if value is not None and len(value) > LABEL_MAX_LENGTH:
            raise ValueError(f"{info.field_name.capitalize()} must be less than 100 characters")
        return value

    @field_validator("servings", mode="before")
    @classmethod
    def check_servings(cls, value: Any) -> int | None:
        # Empty values fall back to the default serving count
        if value in (None, "", 0, False):
            return None
        try:
            servings = int(str(value).strip())
        except ValueError:
            raise ValueError("Servings must be between 1 and 100") from None
        if not SERVINGS_MIN <= servings <= SERVINGS_MAX:
            raise ValueError("Servings must be between 1 and 100")
        return servings

    @field_validator("source_url", "image_url", mode="before")
    @classmethod
    def check_url(cls, value: Any, info: ValidationInfo) -> str | None:
        value = _blank_to_none(value)
        if value is None:
            return None
        try:
            _http_url.validate_python(value if _has_scheme.match(value) else f"http://{value}")
        except ValidationError:
            label = "Source" if info.field_name == "source_url" else "Image URL"
            raise ValueError(f"{label} must be a valid URL") from None
        return value

    @field_validator("ingredients", "steps", mode="before")
    @classmethod
    def check_sequence(cls, value: Any, info: ValidationInfo) -> list:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError(f"{info.field_name.capitalize()} must be an array")
        return value


class RecipeResponse(BaseModel):
    """Full recipe."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: int
    title: str
    time: str | None
    servings: int
    category: str | None
    source_url: str | None
    image_url: str | None
    image_path: str | None
    ingredients: list[str]
    steps: list[str]
    notes: str | None
    is_scraped: bool
    created_at: datetime
    updated_at: datetime


class RecipeListResponse(BaseModel):
    """A list of recipes."""

    success: bool = True
    recipes: list[RecipeResponse]


class RecipeDetailResponse(BaseModel):
    """A single recipe."""

    success: bool = True
    recipe: RecipeResponse


class RecipeCreatedResponse(BaseModel):
    """Response to a successful create."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Recipe created successfully"
    recipe_id: str = Field(..., alias="recipeId")
