import pytest

from backoffice.core.exceptions import ValidationFailed
from backoffice.db.models import Category
from backoffice.services.base_service import BaseService, page_offset


class CategoryCrud(BaseService[Category]):
    model = Category


@pytest.fixture
def crud(db):
    return CategoryCrud(db)


def test_create_update_delete(crud):
    created = crud.create({"name": "Lamps", "slug": "lamps", "unknown": "ignored"})
    assert created["id"] is not None
    assert "unknown" not in created

    assert crud.update(created["id"], {"name": "Lights"})["name"] == "Lights"
    assert crud.update(999, {"name": "Nope"}) is None

    assert crud.delete(created["id"]) is True
    assert crud.delete(created["id"]) is False


def test_transaction_rolls_back_on_any_error(crud):
    with pytest.raises(RuntimeError):
        with crud._transaction():
            crud._insert({"name": "Lamps", "slug": "lamps"})
            raise RuntimeError("boom")

    assert crud.get_all() == []


def test_page_offset():
    assert page_offset(1, 10) == 0
    assert page_offset(3, 5) == 10
    with pytest.raises(ValidationFailed) as exc_info:
        page_offset(0, 10)
    assert [e.field for e in exc_info.value.errors] == ["page"]
