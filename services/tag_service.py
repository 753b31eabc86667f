from models import Tag


class TagService:

    def find_all(self):
        return Tag.query.order_by(Tag.title.asc(), Tag.id.asc()).all()
