from datetime import date

from backoffice.services.product_service import resolve_price


TARIFFS = [
    {"start_date": "2024-01-01", "end_date": "2024-06-30", "price": 100},
    {"start_date": "2024-03-01", "end_date": "2024-12-31", "price": 120},
]


def test_overlapping_tariffs_latest_start_wins():
    assert resolve_price(80, TARIFFS, date(2024, 4, 1)) == 120


def test_single_matching_tariff():
    assert resolve_price(80, TARIFFS, date(2024, 2, 15)) == 100
    assert resolve_price(80, TARIFFS, date(2024, 8, 1)) == 120


def test_interval_bounds_are_inclusive():
    assert resolve_price(80, TARIFFS, date(2024, 1, 1)) == 100
    assert resolve_price(80, TARIFFS, date(2024, 12, 31)) == 120


def test_no_matching_tariff_falls_back_to_base_price():
    assert resolve_price(80, TARIFFS, date(2023, 12, 31)) == 80
    assert resolve_price(80, TARIFFS, date(2025, 1, 1)) == 80
    assert resolve_price(80, [], date(2024, 4, 1)) == 80
    assert resolve_price(80, None, date(2024, 4, 1)) == 80


def test_open_ended_tariff_has_no_end():
    tariffs = [{"start_date": "2024-01-01", "end_date": None, "price": 50}]
    assert resolve_price(80, tariffs, date(2030, 1, 1)) == 50


def test_equal_start_dates_keep_first_in_list():
    tariffs = [
        {"start_date": "2024-01-01", "end_date": "2024-12-31", "price": 1},
        {"start_date": "2024-01-01", "end_date": "2024-12-31", "price": 2},
    ]
    assert resolve_price(80, tariffs, date(2024, 5, 5)) == 1
