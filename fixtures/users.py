from models import User, ROLE_ADMIN, ROLE_USER

USER_COUNT = 10
ADMIN_COUNT = 2
DEFAULT_PASSWORD = 'user1234!'


def load(session, faker, count=USER_COUNT, admins=ADMIN_COUNT):
    """Create ``count`` accounts, the first ``admins`` of them administrators.

    Usernames are ``admin0``, ``admin1``, ``user2``... so they are easy to log
    in with; everyone shares ``DEFAULT_PASSWORD``.
    """
    offset = session.query(User).count()
    loaded = []
    for i in range(count):
        role = ROLE_ADMIN if i < admins else ROLE_USER
        user = User(
            username=f'{role}{offset + i}',
            email=f'{role}{offset + i}@{faker.free_email_domain()}',
            role=role,
        )
        user.set_password(DEFAULT_PASSWORD)
        session.add(user)
        loaded.append(user)

    session.commit()
    return loaded
