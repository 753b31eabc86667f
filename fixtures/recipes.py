from models import Recipe
from .tags import random_past_datetime

RECIPE_COUNT = 50
MAX_TAGS = 3


def load(session, faker, authors, categories, tags, count=RECIPE_COUNT):
    loaded = []
    for _ in range(count):
        recipe = Recipe(
            title=faker.sentence(nb_words=4).rstrip('.'),
            description=faker.paragraph(nb_sentences=5),
            author=faker.random_element(authors),
            category=faker.random_element(categories),
            created_at=random_past_datetime(faker),
            updated_at=random_past_datetime(faker),
        )
        if tags:
            length = faker.random_int(0, min(MAX_TAGS, len(tags)))
            recipe.tags = faker.random_elements(tags, length=length, unique=True) if length else []
        session.add(recipe)
        loaded.append(recipe)

    session.commit()
    return loaded
