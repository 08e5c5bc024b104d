"""
Tests for glbcatalog/catalog/formatting.py
"""
from datetime import datetime

import pytest

from glbcatalog.catalog.formatting import format_added_date, format_file_size


@pytest.mark.parametrize("size,expected", [
    (0, "0 B"),
    (1023, "1023 B"),
    (1024, "1.00 KB"),
    (1536, "1.50 KB"),
    (1024 * 1024, "1.00 MB"),
    (5 * 1024 * 1024 + 512 * 1024, "5.50 MB"),
])
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


def test_format_added_date():
    millis = int(datetime(2024, 3, 5, 12, 0).timestamp() * 1000)
    assert format_added_date(millis) == "Added: Mar 05, 2024"
