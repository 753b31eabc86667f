from types import SimpleNamespace

import pytest

from app import create_app
from models import db, Category, Recipe, Tag, User, ROLE_ADMIN
from tests.helpers import PASSWORD


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'WTF_CSRF_ENABLED': False,
        'SECRET_KEY': 'test-secret',
        'RECIPES_PER_PAGE': 10,
        'TOP_RATED_LIMIT': 10,
    })
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(username, password=PASSWORD):
        return client.post('/login', data={'username': username, 'password': password})
    return _login


def _user(username, role='user'):
    user = User(username=username, email=f'{username}@example.com', role=role)
    user.set_password(PASSWORD)
    return user


@pytest.fixture
def data(app):
    """Three users, two categories, two tags and three recipes.

    alice owns pancakes (breakfast, quick) and curry (dinner, spicy);
    bob owns omelette (breakfast, quick + spicy); root is an admin.
    Returns the primary keys.
    """
    with app.app_context():
        alice, bob, root = _user('alice'), _user('bob'), _user('root', ROLE_ADMIN)
        breakfast, dinner = Category(title='Breakfast'), Category(title='Dinner')
        quick, spicy = Tag(title='quick'), Tag(title='spicy')
        pancakes = Recipe(title='Fluffy pancakes', description='Mix and fry.',
                          author=alice, category=breakfast, tags=[quick])
        curry = Recipe(title='Red curry', description='Simmer slowly.',
                       author=alice, category=dinner, tags=[spicy])
        omelette = Recipe(title='Cheese omelette', description='Whisk the eggs.',
                          author=bob, category=breakfast, tags=[quick, spicy])
        db.session.add_all([alice, bob, root, breakfast, dinner, quick, spicy, pancakes, curry, omelette])
        db.session.commit()

        return SimpleNamespace(
            alice=alice.id, bob=bob.id, root=root.id,
            breakfast=breakfast.id, dinner=dinner.id,
            quick=quick.id, spicy=spicy.id,
            pancakes=pancakes.id, curry=curry.id, omelette=omelette.id,
        )

