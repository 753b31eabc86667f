import logging
import os
from urllib.parse import parse_qs

import click
from flask import Flask, redirect, render_template, url_for
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_wtf.csrf import CSRFProtect
from werkzeug.routing import BaseConverter

# Database, models and blueprints
from models import db, User
from routes import recipe_bp, auth_bp
from fixtures import load_all, purge

logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
)

migrate = Migrate()
csrf = CSRFProtect()
login_manager = LoginManager()
login_manager.login_view = 'auth.login'
login_manager.login_message = 'Please log in to access this page.'
login_manager.login_message_category = 'error'


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


# --- HELPER: ROUTING ---
class RecipeIdConverter(BaseConverter):
    """Positive integer ids without a leading zero."""
    regex = r'[1-9][0-9]*'

    def to_python(self, value):
        return int(value)

    def to_url(self, value):
        return str(int(value))


class MethodOverrideMiddleware:
    """Let HTML forms reach PUT/PATCH/DELETE routes.

    A POST becomes the method named by the ``X-HTTP-Method-Override`` header
    or the ``_method`` query parameter. The body is left untouched so form
    parsing still works.
    """
    allowed_methods = frozenset(['PUT', 'PATCH', 'DELETE'])

    def __init__(self, wsgi_app):
        self.wsgi_app = wsgi_app

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            method = environ.get('HTTP_X_HTTP_METHOD_OVERRIDE')
            if not method:
                method = parse_qs(environ.get('QUERY_STRING', '')).get('_method', [''])[0]
            method = method.upper()
            if method in self.allowed_methods:
                environ['REQUEST_METHOD'] = method
        return self.wsgi_app(environ, start_response)


# --- Database Configuration ---
def database_uri():
    uri = os.environ.get('DATABASE_URL')
    if uri:
        if uri.startswith("postgres://"):
            uri = uri.replace("postgres://", "postgresql://", 1)
        return uri
    BASE_DIR = os.path.abspath(os.path.dirname(__file__))
    return f'sqlite:///{os.path.join(BASE_DIR, "recipes.db")}'


def create_app(test_config=None):
    app = Flask(__name__)

    app.config['SQLALCHEMY_DATABASE_URI'] = database_uri()
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-only-change-me')
    app.config['RECIPES_PER_PAGE'] = int(os.environ.get('RECIPES_PER_PAGE', 10))
    app.config['TOP_RATED_LIMIT'] = int(os.environ.get('TOP_RATED_LIMIT', 10))
    if test_config:
        app.config.update(test_config)

    app.url_map.converters['recipe_id'] = RecipeIdConverter
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)
    login_manager.init_app(app)

    app.register_blueprint(recipe_bp)
    app.register_blueprint(auth_bp)

    register_base_routes(app)
    register_error_handlers(app)
    register_commands(app)

    return app


def register_base_routes(app):

    @app.route("/ping")
    def ping():
        return "pong", 200

    @app.route("/")
    def home():
        return redirect(url_for('recipe.index'))


def register_error_handlers(app):

    @app.errorhandler(403)
    def forbidden(error):
        return render_template('errors/403.html', error=error), 403

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html', error=error), 404

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        app.logger.error("Unhandled error: %s", getattr(error, 'original_exception', error))
        return render_template('errors/500.html'), 500


def register_commands(app):

    @app.cli.command('load-fixtures')
    @click.option('--seed', type=int, default=None, help='Seed Faker for reproducible data.')
    @click.option('--append', is_flag=True, help='Keep existing rows instead of purging them first.')
    def load_fixtures_command(seed, append):
        """Fill the database with randomized demo data."""
        if not append:
            purge(db.session)
        counts = load_all(db.session, seed=seed)
        for name, count in counts.items():
            app.logger.info("Loaded %d %s", count, name)
        click.echo(', '.join(f'{count} {name}' for name, count in counts.items()))


app = create_app()

if __name__ == '__main__':
    app.run(debug=os.environ.get('FLASK_DEBUG') == '1')
