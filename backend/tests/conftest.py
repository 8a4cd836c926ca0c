import pytest
from storefront import create_app
from storefront.extensions import db
from storefront.models.page import Page


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_page(app):
    def _make(slug="landing", content=None, **fields):
        page = Page()
        page.slug = slug
        page.title = fields.pop("title", slug.replace("-", " ").title())
        page.content = content if content is not None else []
        for name, value in fields.items():
            setattr(page, name, value)

        db.session.add(page)
        db.session.commit()
        return page

    return _make


@pytest.fixture
def hero_block():
    return {"id": "a", "type": "hero", "content": {}}


@pytest.fixture
def faq_block():
    return {"id": "b", "type": "faq", "content": {}}
