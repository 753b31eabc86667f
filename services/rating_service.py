import logging

from sqlalchemy.exc import SQLAlchemyError

from models import db, Rating

logger = logging.getLogger(__name__)


class RatingService:

    def find_rating(self, user, recipe):
        return Rating.query.filter_by(user_id=user.id, recipe_id=recipe.id).first()

    def rate(self, user, recipe, score):
        """Store ``score`` for ``recipe`` by ``user``.

        A user holds at most one rating per recipe; rating again replaces the
        previous score.
        """
        rating = self.find_rating(user, recipe)
        if rating:
            rating.score = score
            message = "Rating updated"
        else:
            rating = Rating(user_id=user.id, recipe_id=recipe.id, score=score)
            db.session.add(rating)
            message = "Rating added"

        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Failed to rate recipe %s for user %s", recipe.id, user.id)
            raise
        logger.info("%s: recipe=%s user=%s score=%s", message, recipe.id, user.id, score)
        return rating
