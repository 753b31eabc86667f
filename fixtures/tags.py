from models import Tag

TAG_COUNT = 100


def random_past_datetime(faker):
    return faker.date_time_between(start_date='-100d', end_date='-1d')


def load(session, faker, count=TAG_COUNT):
    # created_at and updated_at are drawn independently; no ordering between them
    loaded = []
    for _ in range(count):
        tag = Tag(
            title=faker.word(),
            created_at=random_past_datetime(faker),
            updated_at=random_past_datetime(faker),
        )
        session.add(tag)
        loaded.append(tag)

    session.commit()
    return loaded
