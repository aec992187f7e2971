"""Recipe model."""

import uuid

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text

from recipebox.database import Base
from recipebox.models.mixins import TimestampMixin
from recipebox.models.types import JSONList

DEFAULT_SERVINGS = 2


def new_recipe_id() -> str:
    """Random, non-sequential recipe key."""
    return str(uuid.uuid4())


class Recipe(Base, TimestampMixin):
    """Recipe owned by a single user."""

    __tablename__ = "recipes"

    id = Column(String(36), primary_key=True, default=new_recipe_id)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(200), nullable=False)
    time = Column(String(100), nullable=True)  # free text, e.g. "45 min"
    servings = Column(Integer, nullable=False, default=DEFAULT_SERVINGS)
    category = Column(String(100), nullable=True, index=True)
    source_url = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    image_path = Column(Text, nullable=True)
    ingredients = Column(JSONList, nullable=False, default=list)
    steps = Column(JSONList, nullable=False, default=list)
    notes = Column(Text, nullable=True)
    is_scraped = Column(Boolean, nullable=False, default=False)
