#!/usr/bin/env python3
"""Seed demo data for screenshots.

Creates a dedicated demo user with a handful of recipes and one favorite.
Re-running the script clears the demo user first; deleting the account
cascades to its recipes, favorites and sessions.

Usage:
    # From project root:
    python scripts/seed_demo_data.py

    # Or against another database:
    DATABASE_URL=sqlite:///./data/database.db python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session

from recipebox.database import SessionLocal, init_db
from recipebox.models import User
from recipebox.services.favorite_service import FavoriteService
from recipebox.services.recipe_service import RecipeService
from recipebox.services.user_service import UserService

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demopass123"

DEMO_RECIPES = [
    {
        "title": "Tomato Soup",
        "time": "40 min",
        "servings": 4,
        "category": "Soup",
        "ingredients": [
            "1 kg ripe tomatoes",
            "1 onion",
            "2 cloves garlic",
            "500 ml vegetable stock",
            "2 tbsp olive oil",
        ],
        "steps": [
            "Chop the onion and garlic.",
            "Soften them in the olive oil for 5 minutes.",
            "Add the tomatoes and stock and simmer for 25 minutes.",
            "Blend until smooth and season to taste.",
        ],
        "notes": "A spoon of cream on top is never a bad idea.",
    },
    {
        "title": "Banana Bread",
        "time": "1 h 10 min",
        "servings": 8,
        "category": "Baking",
        "source_url": "https://example.com/banana-bread",
        "ingredients": [
            "3 very ripe bananas",
            "75 g melted butter",
            "150 g sugar",
            "1 egg",
            "190 g flour",
            "1 tsp baking soda",
        ],
        "steps": [
            "Preheat the oven to 175 C.",
            "Mash the bananas and stir in the butter.",
            "Mix in sugar, egg, then flour and baking soda.",
            "Bake in a loaf tin for 55 minutes.",
        ],
    },
    {
        "title": "Quick Green Salad",
        "time": "10 min",
        "category": "Salad",
        "ingredients": ["1 head lettuce", "1 cucumber", "Lemon vinaigrette"],
        "steps": ["Wash and tear the lettuce.", "Slice the cucumber.", "Dress and toss."],
    },
]


def seed_demo_data(session: Session) -> User:
    """Seed the database with the demo user and return it."""
    users = UserService(session)

    # Check if demo user already exists
    existing_user = users.find_by_email(DEMO_EMAIL)
    if existing_user:
        print("Demo data already exists. Clearing and re-seeding...")
        session.query(User).filter(User.id == existing_user.id).delete(
            synchronize_session=False
        )
        session.commit()
        session.expunge_all()

    print("Creating demo user...")
    user_id = users.create("Demo User", DEMO_EMAIL, DEMO_PASSWORD)

    print("Creating recipes...")
    recipes = RecipeService(session)
    recipe_ids = [recipes.create(user_id, data) for data in DEMO_RECIPES]

    # Favorite the soup
    FavoriteService(session).add(user_id, recipe_ids[0])

    print("Demo data seeded successfully!")
    return users.find_by_id(user_id)


def main() -> None:
    init_db()
    session = SessionLocal()
    try:
        seed_demo_data(session)
    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    main()
