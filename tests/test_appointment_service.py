from datetime import date, timedelta

import pytest

from backoffice.core.exceptions import ValidationFailed

TODAY = date(2024, 5, 15)


@pytest.fixture
def product(make_product):
    return make_product(name="Massage", price=40)


@pytest.fixture
def make_appointment(appointment_service, product):
    def _make(day, status="pending", units=1):
        return appointment_service.create(
            {"product_id": product["id"], "date": day, "units": units, "total_cost": 40 * units, "status": status}
        )

    return _make


def test_create_requires_product_and_date(appointment_service):
    with pytest.raises(ValidationFailed) as exc_info:
        appointment_service.create({"units": 2})
    assert [e.field for e in exc_info.value.errors] == ["product_id", "date"]


def test_create_rejects_zero_units(appointment_service, product):
    with pytest.raises(ValidationFailed):
        appointment_service.create({"product_id": product["id"], "date": TODAY, "units": 0})


def test_create_accepts_iso_date_string(appointment_service, product):
    appointment = appointment_service.create({"product_id": product["id"], "date": "2024-05-20"})
    assert appointment["date"] == date(2024, 5, 20)
    assert appointment["status"] == "pending"


def test_create_rejects_unparseable_date(appointment_service, product):
    with pytest.raises(ValidationFailed) as exc_info:
        appointment_service.create({"product_id": product["id"], "date": "15/05/2024"})
    assert [e.field for e in exc_info.value.errors] == ["date"]
    assert appointment_service.get_all() == []


def test_partial_update(make_appointment, appointment_service):
    appointment = make_appointment(TODAY)
    updated = appointment_service.update(appointment["id"], {"status": "confirmed"})
    assert updated["status"] == "confirmed"
    assert updated["date"] == TODAY

    with pytest.raises(ValidationFailed):
        appointment_service.update(appointment["id"], {"units": -1})


def test_hard_delete(make_appointment, appointment_service):
    appointment = make_appointment(TODAY)
    assert appointment_service.delete(appointment["id"]) is True
    assert appointment_service.get_by_id(appointment["id"]) is None


def test_get_by_month(make_appointment, appointment_service):
    make_appointment(date(2024, 1, 31))
    first = make_appointment(date(2024, 2, 1))
    last = make_appointment(date(2024, 2, 29))
    make_appointment(date(2024, 3, 1))

    result = appointment_service.get_by_month(2, 2024)
    assert [a["id"] for a in result] == [first["id"], last["id"]]
    assert result[0]["product"] == {"name": "Massage", "price": 40}


def test_get_by_month_rejects_invalid_month(appointment_service):
    with pytest.raises(ValidationFailed):
        appointment_service.get_by_month(13, 2024)


def test_get_future(make_appointment, appointment_service):
    make_appointment(TODAY - timedelta(days=1))
    today = make_appointment(TODAY, status="confirmed")
    make_appointment(TODAY + timedelta(days=1), status="cancelled")
    later = make_appointment(TODAY + timedelta(days=5))
    soon = make_appointment(TODAY + timedelta(days=2))

    result = appointment_service.get_future(limit=5, today=TODAY)
    assert [a["id"] for a in result] == [today["id"], soon["id"], later["id"]]

    assert len(appointment_service.get_future(limit=2, today=TODAY)) == 2


class TestPaginated:
    @pytest.fixture
    def appointments(self, make_appointment):
        offsets = [-10, -1, 0, 3, 1, -5, 7]
        return {offset: make_appointment(TODAY + timedelta(days=offset)) for offset in offsets}

    def ids(self, appointments, offsets):
        return [appointments[o]["id"] for o in offsets]

    def test_future_ascending(self, appointments, appointment_service):
        result = appointment_service.get_paginated("future", page=1, page_size=10, today=TODAY)
        assert [a["id"] for a in result["data"]] == self.ids(appointments, [0, 1, 3, 7])
        assert all(a["date"] >= TODAY for a in result["data"])
        assert result["count"] == 4

    def test_past_descending(self, appointments, appointment_service):
        result = appointment_service.get_paginated("past", page=1, page_size=10, today=TODAY)
        assert [a["id"] for a in result["data"]] == self.ids(appointments, [-1, -5, -10])
        assert result["count"] == 3

    def test_window_keeps_total(self, appointments, appointment_service):
        result = appointment_service.get_paginated("future", page=2, page_size=3, today=TODAY)
        assert [a["id"] for a in result["data"]] == self.ids(appointments, [7])
        assert result["count"] == 4

    def test_unknown_dataset(self, appointment_service):
        with pytest.raises(ValidationFailed):
            appointment_service.get_paginated("all", today=TODAY)

    def test_page_must_start_at_one(self, appointment_service):
        with pytest.raises(ValidationFailed) as exc_info:
            appointment_service.get_paginated("future", page=0, page_size=0, today=TODAY)
        assert [e.field for e in exc_info.value.errors] == ["page", "page_size"]
