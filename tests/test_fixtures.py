from datetime import datetime, timedelta
from unittest import mock

import pytest
from faker import Faker

from fixtures import load_all, purge, tags
from models import db, Category, Rating, Recipe, Tag, User


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


class TestTagFixtures:

    def test_loads_one_hundred_tags_in_one_commit(self, ctx):
        session = mock.Mock(wraps=db.session)
        loaded = tags.load(session, Faker())
        session.commit.assert_called_once_with()
        assert session.add.call_count == 100
        assert len(loaded) == 100
        assert Tag.query.count() == 100

    def test_titles_and_timestamps(self, ctx):
        before = datetime.now()
        tags.load(db.session, Faker())
        after = datetime.now()

        # Faker returns naive local times; allow a little slack around the window
        lower = before - timedelta(days=100, hours=1)
        upper = after - timedelta(days=1) + timedelta(hours=1)
        for tag in Tag.query.all():
            assert tag.title
            assert lower <= tag.created_at <= upper
            assert lower <= tag.updated_at <= upper


class TestLoadAll:

    def test_counts_and_relations(self, ctx):
        counts = load_all(db.session, seed=1234)

        assert counts['tags'] == Tag.query.count() == 100
        assert counts['categories'] == Category.query.count() == 20
        assert counts['users'] == User.query.count() == 10
        assert counts['recipes'] == Recipe.query.count() == 50
        assert counts['ratings'] == Rating.query.count()
        assert User.query.filter_by(role='admin').count() == 2

        pairs = [(r.user_id, r.recipe_id) for r in Rating.query.all()]
        assert len(pairs) == len(set(pairs))
        assert all(1 <= r.score <= 5 for r in Rating.query.all())
        assert all(len(recipe.tags) <= 3 for recipe in Recipe.query.all())

    def test_append_run_does_not_collide(self, ctx):
        load_all(db.session, seed=1)
        load_all(db.session, seed=1)
        assert Category.query.count() == 40
        assert User.query.count() == 20

    def test_purge_empties_every_table(self, ctx):
        load_all(db.session, seed=7)
        purge(db.session)
        for model in (Tag, Category, User, Recipe, Rating):
            assert model.query.count() == 0


def test_load_fixtures_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['load-fixtures', '--seed', '42'])
    assert result.exit_code == 0, result.output
    assert '100 tags' in result.output

    # Re-running purges first, so the totals stay the same
    result = runner.invoke(args=['load-fixtures', '--seed', '42'])
    assert result.exit_code == 0, result.output
    with app.app_context():
        assert Tag.query.count() == 100
        assert Recipe.query.count() == 50
