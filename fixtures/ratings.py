from models import Rating

MAX_RATINGS_PER_RECIPE = 5


def load(session, faker, users, recipes):
    # Distinct raters per recipe keep the (user, recipe) pair unique
    loaded = []
    for recipe in recipes:
        length = faker.random_int(0, min(MAX_RATINGS_PER_RECIPE, len(users)))
        if not length:
            continue
        for user in faker.random_elements(users, length=length, unique=True):
            rating = Rating(user=user, recipe=recipe, score=faker.random_int(1, 5))
            session.add(rating)
            loaded.append(rating)

    session.commit()
    return loaded
