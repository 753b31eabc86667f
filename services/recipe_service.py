"""
Recipe queries and persistence.
"""
import logging

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from models import db, Recipe, Rating, Tag

logger = logging.getLogger(__name__)


class RecipeService:
    """Paginated listings, saves and deletes for recipes."""

    def _per_page(self):
        return current_app.config.get('RECIPES_PER_PAGE', 10)

    def _filtered_query(self, category_id=None, tag_id=None):
        query = Recipe.query
        if category_id is not None:
            query = query.filter(Recipe.category_id == category_id)
        if tag_id is not None:
            query = query.filter(Recipe.tags.any(Tag.id == tag_id))
        return query.order_by(Recipe.updated_at.desc(), Recipe.id.desc())

    def get_all_paginated_list(self, page, category_id=None, tag_id=None):
        """Every recipe, optionally narrowed by category and tag."""
        query = self._filtered_query(category_id, tag_id)
        return query.paginate(page=page, per_page=self._per_page(), error_out=False)

    def get_paginated_list(self, page, user, category_id=None, tag_id=None):
        """Only the recipes authored by ``user``."""
        query = self._filtered_query(category_id, tag_id).filter(Recipe.author_id == user.id)
        return query.paginate(page=page, per_page=self._per_page(), error_out=False)

    def save(self, recipe):
        recipe_id = recipe.id
        try:
            db.session.add(recipe)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Failed to save recipe %s", recipe_id)
            raise
        logger.info("Saved recipe %s (author=%s)", recipe.id, recipe.author_id)

    def delete(self, recipe):
        recipe_id = recipe.id
        try:
            db.session.delete(recipe)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Failed to delete recipe %s", recipe_id)
            raise
        logger.info("Deleted recipe %s", recipe_id)

    def find_top_rated_recipes(self, limit=None):
        """Rated recipes ordered by average score, then by number of ratings.

        Returns rows of ``(Recipe, average_score, rating_count)``.
        """
        if limit is None:
            limit = current_app.config.get('TOP_RATED_LIMIT', 10)

        average_score = func.avg(Rating.score).label('average_score')
        rating_count = func.count(Rating.id).label('rating_count')
        return (
            db.session.query(Recipe, average_score, rating_count)
            .join(Recipe.ratings)
            .group_by(Recipe.id)
            .order_by(average_score.desc(), rating_count.desc(), Recipe.id.asc())
            .limit(limit)
            .all()
        )
