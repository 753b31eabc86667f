"""
Demo data for development databases.

Each module exposes ``load(session, faker, ...)`` which adds its rows and
commits them in a single flush at the end.
"""
from faker import Faker

from models import Category, Rating, Recipe, Tag, User, recipe_tags
from . import categories, ratings, recipes, tags, users


def purge(session):
    """Remove every row the fixtures create, children first."""
    session.execute(recipe_tags.delete())
    for model in (Rating, Recipe, Tag, Category, User):
        session.query(model).delete()
    session.commit()


def load_all(session, seed=None):
    faker = Faker()
    if seed is not None:
        faker.seed_instance(seed)

    loaded_tags = tags.load(session, faker)
    loaded_categories = categories.load(session, faker)
    loaded_users = users.load(session, faker)
    loaded_recipes = recipes.load(session, faker, loaded_users, loaded_categories, loaded_tags)
    loaded_ratings = ratings.load(session, faker, loaded_users, loaded_recipes)

    return {
        'tags': len(loaded_tags),
        'categories': len(loaded_categories),
        'users': len(loaded_users),
        'recipes': len(loaded_recipes),
        'ratings': len(loaded_ratings),
    }
