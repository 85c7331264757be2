from datetime import date

import pytest

from backoffice.validators.appointment import AppointmentValidator
from backoffice.validators.category import CategoryValidator
from backoffice.validators.product import ProductValidator


def fields(errors):
    return [e.field for e in errors]


class TestCategoryValidator:
    def test_valid_category(self):
        assert CategoryValidator.validate({"name": "Shoes", "slug": "shoes-2024"}) == []

    def test_name_required(self):
        assert fields(CategoryValidator.validate({"name": "   ", "slug": "shoes"})) == ["name"]

    def test_slug_required(self):
        errors = CategoryValidator.validate({"name": "Shoes", "slug": ""})
        assert fields(errors) == ["slug"]
        assert "required" in errors[0].message

    @pytest.mark.parametrize("slug", ["Shoes", "red shoes", "shoes!", "shoes_2", "ñandú", "shoes\n"])
    def test_invalid_slug(self, slug):
        errors = CategoryValidator.validate({"name": "Shoes", "slug": slug})
        assert fields(errors) == ["slug"]
        assert "invalid characters" in errors[0].message


class TestProductValidator:
    def valid(self, **overrides):
        data = {"name": "Lamp", "slug": "lamp", "code": "L-1", "price": 0}
        data.update(overrides)
        return data

    def test_minimal_product_is_valid(self):
        assert ProductValidator.validate(self.valid()) == []

    def test_empty_product_reports_all_fields(self):
        assert fields(ProductValidator.validate({})) == ["name", "slug", "code", "price"]

    def test_short_name(self):
        assert fields(ProductValidator.validate(self.valid(name="ab"))) == ["name"]

    def test_negative_price(self):
        assert fields(ProductValidator.validate(self.valid(price=-0.01))) == ["price"]

    def test_tariff_errors_are_numbered(self):
        tariffs = [
            {"start_date": "2024-01-01", "end_date": "2024-02-01", "price": 5},
            {"start_date": "2024-03-01", "end_date": "2024-02-01", "price": -1},
            {"start_date": date(2024, 1, 1), "price": 5},
        ]
        messages = [e.message for e in ProductValidator.validate(self.valid(tariffs=tariffs))]
        assert messages == [
            "Tariff #2 has an invalid price.",
            "Tariff #2 starts after it ends.",
            "Tariff #3 must have start and end dates.",
        ]

    def test_same_day_tariff_is_valid(self):
        tariffs = [{"start_date": "2024-01-01", "end_date": "2024-01-01", "price": 1}]
        assert ProductValidator.validate(self.valid(tariffs=tariffs)) == []

    def test_tariff_without_price(self):
        tariffs = [{"start_date": "2024-01-01", "end_date": "2024-12-31"}]
        errors = ProductValidator.validate(self.valid(tariffs=tariffs))
        assert [e.message for e in errors] == ["Tariff #1 has an invalid price."]

    def test_unparseable_tariff_date(self):
        tariffs = [{"start_date": "not-a-date", "end_date": "2024-01-01", "price": 1}]
        errors = ProductValidator.validate(self.valid(tariffs=tariffs))
        assert [e.message for e in errors] == ["Tariff #1 has an invalid date."]


class TestAppointmentValidator:
    def test_create_requires_product_and_date(self):
        assert fields(AppointmentValidator.validate({})) == ["product_id", "date"]

    def test_update_allows_missing_product_and_date(self):
        assert AppointmentValidator.validate({}, is_update=True) == []

    @pytest.mark.parametrize("units", [0, -3])
    def test_units_must_be_positive(self, units):
        data = {"product_id": 1, "date": "2024-05-01", "units": units}
        assert fields(AppointmentValidator.validate(data)) == ["units"]

    def test_units_may_be_omitted(self):
        assert AppointmentValidator.validate({"product_id": 1, "date": "2024-05-01"}) == []

    def test_unknown_status(self):
        errors = AppointmentValidator.validate({"status": "done"}, is_update=True)
        assert fields(errors) == ["status"]

    def test_unparseable_date(self):
        errors = AppointmentValidator.validate({"date": "tomorrow"}, is_update=True)
        assert [e.message for e in errors] == ["Date is invalid."]
