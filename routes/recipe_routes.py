"""
Recipe Blueprint
Handles listing, viewing, creating, editing, deleting and rating recipes
"""
import re

from flask import Blueprint, abort, current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user

from forms import DeleteForm, RatingForm, RecipeForm
from models import Recipe
from security import MAX_ID, find_recipe, is_admin, recipe_required
from services import CategoryService, RatingService, RecipeService, TagService

recipe_bp = Blueprint('recipe', __name__, url_prefix='/recipe')

category_service = CategoryService()
tag_service = TagService()
recipe_service = RecipeService()
rating_service = RatingService()

DIGITS = re.compile(r'[0-9]+')


def _digit_arg(name):
    # Only plain digit strings count as a filter; anything else is ignored
    value = request.args.get(name)
    if value and DIGITS.fullmatch(value):
        number = int(value)
        if number <= MAX_ID:
            return number
    return None


def _recipe_form(**kwargs):
    form = RecipeForm(**kwargs)
    form.set_choices(category_service.find_all(), tag_service.find_all())
    return form


## LISTING ##

@recipe_bp.route('', methods=['GET'])
def index():
    category_id = _digit_arg('categoryId')
    tag_id = _digit_arg('tagId')
    page = min(request.args.get('page', 1, type=int), MAX_ID)

    categories = category_service.find_all()
    tags = tag_service.find_all()

    if not current_user.is_authenticated or is_admin(current_user):
        pagination = recipe_service.get_all_paginated_list(page, category_id, tag_id)
    else:
        pagination = recipe_service.get_paginated_list(page, current_user, category_id, tag_id)

    return render_template(
        'recipe/index.html',
        pagination=pagination,
        categories=categories,
        tags=tags,
        category_id=category_id,
        tag_id=tag_id,
    )


@recipe_bp.route('/top-rated', methods=['GET'])
def top_rated():
    recipes = recipe_service.find_top_rated_recipes()
    return render_template('recipe/top_rated.html', recipes=recipes)


@recipe_bp.route('/<recipe_id:id>', methods=['GET'])
@recipe_required
def show(recipe):
    return render_template('recipe/show.html', recipe=recipe)


## CREATE / EDIT / DELETE ##

@recipe_bp.route('/create', methods=['GET', 'POST'])
def create():
    if not current_user.is_authenticated:
        flash('Access denied.', 'error')
        return redirect(url_for('auth.login'))

    form = _recipe_form()
    if form.validate_on_submit():
        recipe = Recipe(author_id=current_user.id)
        form.populate_recipe(recipe)
        recipe_service.save(recipe)

        flash('Created successfully.', 'success')
        return redirect(url_for('recipe.index'))

    return render_template('recipe/create.html', form=form)


@recipe_bp.route('/<recipe_id:id>/edit', methods=['GET', 'PUT'])
@recipe_required
def edit(recipe):
    form = _recipe_form(obj=recipe)
    if form.validate_on_submit():
        form.populate_recipe(recipe)
        recipe_service.save(recipe)

        flash('Edited successfully.', 'success')
        return redirect(url_for('recipe.index'))

    return render_template('recipe/edit.html', form=form, recipe=recipe)


@recipe_bp.route('/<recipe_id:id>/delete', methods=['GET', 'DELETE'])
@recipe_required
def delete(recipe):
    form = DeleteForm()
    if form.validate_on_submit():
        recipe_service.delete(recipe)

        flash('Deleted successfully.', 'success')
        return redirect(url_for('recipe.index'))

    return render_template('recipe/delete.html', form=form, recipe=recipe)


## RATINGS ##

@recipe_bp.route('/<recipe_id:id>/rate', methods=['GET', 'POST'])
def rate(id):
    recipe = find_recipe(id)
    if recipe is None:
        abort(404)

    if not current_user.is_authenticated:
        current_app.logger.info("Anonymous rating attempt on recipe %s", id)
        abort(403, description='Access denied.')

    existing = rating_service.find_rating(current_user, recipe)
    form = RatingForm(obj=existing)
    if form.validate_on_submit():
        rating_service.rate(current_user, recipe, form.score.data)

        flash('Rating saved.', 'success')
        return redirect(url_for('recipe.index'))

    return render_template('recipe/rate.html', form=form, recipe=recipe)
