"""Query Options — verifies parsing of experience listing query strings.

Tests:
    - Defaults when nothing is given
    - Every filter parsed into its typed form
    - Each malformed parameter rejected with its own message
"""

from datetime import datetime

import pytest

from trisog.core.domain_types import SortOrder
from trisog.core.errors import InvalidQueryError
from trisog.core.query_options import ExperienceFilters, create_query_options


def test_defaults():
    options = create_query_options({})
    assert options.page == 1
    assert options.limit == 10
    assert options.sort_by == "title"
    assert options.order == SortOrder.DESC
    assert options.filters == ExperienceFilters()
    assert options.offset == 0


def test_offset_follows_page_and_limit():
    options = create_query_options({"page": "3", "limit": "5"})
    assert options.offset == 10


def test_all_filters_parsed():
    options = create_query_options({
        "title": "cruise",
        "price": "150.5",
        "categoriesId": "aaa, bbb,,",
        "destinationsId": "ccc",
        "rating": "4",
        "date": "2024-07-14",
        "guests": "2",
        "sortBy": "default_price",
        "order": "asc",
    })
    f = options.filters
    assert f.title == "cruise"
    assert f.max_price == 150.5
    assert f.category_ids == ("aaa", "bbb")
    assert f.destination_ids == ("ccc",)
    assert f.min_rating == 4
    assert f.on_date == datetime(2024, 7, 14)
    assert f.guests == 2
    assert options.sort_by == "default_price"
    assert options.order == SortOrder.ASC


def test_aware_date_converted_to_naive_utc():
    options = create_query_options({"date": "2024-07-14T02:00:00+02:00"})
    assert options.filters.on_date == datetime(2024, 7, 14)


def test_empty_values_mean_unfiltered():
    options = create_query_options({"title": "", "price": "", "rating": ""})
    assert options.filters == ExperienceFilters()


@pytest.mark.parametrize("query,message", [
    ({"page": "0"}, "Invalid page value"),
    ({"page": "abc"}, "Invalid page value"),
    ({"limit": "-1"}, "Invalid limit value"),
    ({"price": "cheap"}, "Invalid price value"),
    ({"price": "-5"}, "Invalid price value"),
    ({"price": "nan"}, "Invalid price value"),
    ({"price": "inf"}, "Invalid price value"),
    ({"page": "100000000000000000000"}, "Invalid page value"),
    ({"limit": "2147483648"}, "Invalid limit value"),
    ({"guests": "99999999999"}, "Invalid guests value"),
    ({"rating": "6"}, "Invalid rating value"),
    ({"rating": "x"}, "Invalid rating value"),
    ({"date": "14/07/2024"}, "Invalid date value"),
    ({"guests": "0"}, "Invalid guests value"),
    ({"sortBy": "password"}, "Invalid sortBy value"),
    ({"order": "sideways"}, "Invalid order value"),
])
def test_malformed_parameters_rejected(query, message):
    with pytest.raises(InvalidQueryError) as exc:
        create_query_options(query)
    assert exc.value.message == message
    assert exc.value.http_status == 400


def test_largest_page_accepted():
    options = create_query_options({"page": "2147483647", "limit": "2147483647"})
    assert options.page == 2147483647
