"""Access rules for recipes.

Detail, edit and delete all gate on the same author-or-admin rule. It lives in
``can_view`` and is applied once per request by ``recipe_required``.
"""
from functools import wraps

from flask import flash, redirect, url_for
from flask_login import current_user

from models import db, Recipe

RECORD_NOT_FOUND = 'Record not found.'

# Largest value an INTEGER primary key column holds
MAX_ID = 2**31 - 1


def is_admin(user):
    return bool(user is not None and user.is_authenticated and getattr(user, 'is_admin', False))


def can_view(user, recipe):
    """True when ``user`` is an admin or the author of ``recipe``."""
    if is_admin(user):
        return True
    return bool(user is not None and user.is_authenticated and recipe.author_id == user.id)


def find_recipe(recipe_id):
    """The recipe with ``recipe_id``, or None when there is none or the id is out of range."""
    if not 0 < recipe_id <= MAX_ID:
        return None
    return db.session.get(Recipe, recipe_id)


def recipe_required(view):
    """Resolve the ``id`` route argument into a recipe the current user may see.

    A missing recipe and a hidden one produce the same warning and redirect,
    so the response never reveals whether the id exists.
    """
    @wraps(view)
    def wrapped_view(id, **kwargs):
        recipe = find_recipe(id)
        if recipe is None or not can_view(current_user, recipe):
            flash(RECORD_NOT_FOUND, 'warning')
            return redirect(url_for('recipe.index'))
        return view(recipe, **kwargs)
    return wrapped_view
