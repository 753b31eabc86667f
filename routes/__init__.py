from .recipe_routes import recipe_bp
from .auth_routes import auth_bp
