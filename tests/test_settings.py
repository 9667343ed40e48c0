import logging

import pytest

from ezgif.settings import parse_log_level


@pytest.mark.parametrize("value,level", [
    (None, None),
    ("", None),
    ("debug", logging.DEBUG),
    (" INFO ", logging.INFO),
    ("40", logging.ERROR),
    ("chatty", None),
])
def test_parse_log_level(value, level):
    assert parse_log_level(value) == level
