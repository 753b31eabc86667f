from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# --- Association Tables ---
recipe_tags = db.Table('recipe_tags',
    db.Column('recipe_id', db.Integer, db.ForeignKey('recipes.id', ondelete='CASCADE'), primary_key=True),
    db.Column('tag_id', db.Integer, db.ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True)
)

# --- Import Models ---
from .User import User, ROLE_ADMIN, ROLE_USER
from .Category import Category
from .Tag import Tag
from .Recipe import Recipe
from .Rating import Rating
