from flask_login import AnonymousUserMixin

from models import Recipe, User, ROLE_ADMIN
from security import can_view, is_admin


def _user(user_id, role='user'):
    return User(id=user_id, username=f'user{user_id}', email=f'user{user_id}@example.com', role=role)


def test_anonymous_user():
    anonymous = AnonymousUserMixin()
    recipe = Recipe(author_id=1)
    assert not is_admin(anonymous)
    assert not can_view(anonymous, recipe)
    assert not can_view(None, recipe)


def test_author_can_view_own_recipe():
    assert can_view(_user(1), Recipe(author_id=1))


def test_other_user_cannot_view():
    assert not can_view(_user(2), Recipe(author_id=1))


def test_admin_can_view_everything():
    admin = _user(3, ROLE_ADMIN)
    assert is_admin(admin)
    assert can_view(admin, Recipe(author_id=1))
