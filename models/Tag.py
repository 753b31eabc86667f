from datetime import datetime
from models import db


class Tag(db.Model):
    __tablename__ = 'tags'

    id = db.Column(db.Integer, primary_key=True)
    # Not unique: the fixture loader draws titles from a small word list
    title = db.Column(db.String(64), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Define relationships
    recipes = db.relationship('Recipe', secondary='recipe_tags', back_populates='tags')

    def __repr__(self):
        return f'<Tag {self.title}>'
