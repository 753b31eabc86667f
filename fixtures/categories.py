from models import Category
from .tags import random_past_datetime

CATEGORY_COUNT = 20


def load(session, faker, count=CATEGORY_COUNT):
    taken = {title for (title,) in session.query(Category.title)}
    loaded = []
    while len(loaded) < count:
        title = faker.unique.word().capitalize()
        if title in taken:
            continue
        taken.add(title)
        category = Category(
            title=title,
            created_at=random_past_datetime(faker),
            updated_at=random_past_datetime(faker),
        )
        session.add(category)
        loaded.append(category)

    session.commit()
    return loaded
