from datetime import datetime
from models import db


class Recipe(db.Model):
    __tablename__ = 'recipes'

    id = db.Column(db.Integer, primary_key=True)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    category_id = db.Column(db.Integer, db.ForeignKey('categories.id'), nullable=False)

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    author = db.relationship('User', back_populates='recipes')
    category = db.relationship('Category', back_populates='recipes')
    tags = db.relationship('Tag', secondary='recipe_tags', back_populates='recipes', order_by='Tag.title')
    ratings = db.relationship('Rating', back_populates='recipe', cascade="all, delete-orphan")

    @property
    def tag_ids(self):
        # Lets RecipeForm(obj=recipe) pre-select the tag choices
        return [tag.id for tag in self.tags]

    @property
    def average_rating(self):
        scores = [r.score for r in self.ratings]
        return round(sum(scores) / len(scores), 1) if scores else 0

    @property
    def rating_count(self):
        return len(self.ratings)

    def __repr__(self):
        return f'<Recipe {self.id} {self.title!r}>'
