from datetime import datetime
from flask_login import UserMixin
from models import db
from werkzeug.security import generate_password_hash, check_password_hash

ROLE_USER = 'user'
ROLE_ADMIN = 'admin'


class User(UserMixin, db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default=ROLE_USER)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    last_login = db.Column(db.DateTime)

    # Relationships
    recipes = db.relationship('Recipe', back_populates='author', cascade="all, delete-orphan")
    ratings = db.relationship('Rating', back_populates='user', cascade="all, delete-orphan")

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    # Hash password before storing
    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    # Check if a password matches the stored hash
    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.username}>'
