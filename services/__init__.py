from .category_service import CategoryService
from .tag_service import TagService
from .recipe_service import RecipeService
from .rating_service import RatingService
