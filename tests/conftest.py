import pytest

from fakedom import FakeDocument, TodoApp


@pytest.fixture
def doc():
    return FakeDocument()


@pytest.fixture
def todo_app(doc):
    return TodoApp(doc)
