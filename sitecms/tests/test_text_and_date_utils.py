from datetime import date, datetime, timezone

import pytest

from sitecms.utils.date_utils import display_date, format_date_human
from sitecms.utils.text_utils import estimate_read_time, strip_html


@pytest.mark.parametrize("text,expected", [
    ("", "1 min read"),
    (None, "1 min read"),
    ("word " * 200, "1 min read"),
    ("word " * 201, "2 min read"),
    ("word " * 401, "3 min read"),
])
def test_estimate_read_time(text, expected):
    assert estimate_read_time(text) == expected


def test_read_time_ignores_markup():
    html = "<p>" + "<b>word</b> " * 250 + "</p>"
    assert estimate_read_time(html) == "2 min read"


def test_strip_html():
    assert strip_html("<h1>Clean</h1><p>homes</p>") == "Clean homes"


def test_format_date_human_locales():
    value = datetime(2024, 3, 5, tzinfo=timezone.utc)
    assert format_date_human(value) == "05/03/2024"
    assert format_date_human(value, locale='en-US') == "03/05/2024"


def test_format_date_human_accepts_strings_dates_and_epoch_millis():
    assert format_date_human("2024-03-05T10:00:00Z") == "05/03/2024"
    assert format_date_human(date(2024, 1, 9)) == "09/01/2024"
    assert format_date_human(0) == "01/01/1970"


def test_format_date_human_rejects_garbage():
    with pytest.raises(ValueError):
        format_date_human("not a date")


@pytest.mark.parametrize("value", [None, "", "not a date", ["2024"]])
def test_display_date_blanks_unusable_values(value):
    assert display_date(value) == ""
