from models import Category


class CategoryService:

    def find_all(self):
        return Category.query.order_by(Category.title.asc()).all()
