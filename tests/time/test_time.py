"""Tests for time utilities."""

import re
import time as _time

from ps2_toolbox.time import time_iso8601, time_ms, time_ns, time_s


class TestTime:
    """Test basic time unit functionality."""

    def test_time_function_types(self):
        assert isinstance(time_s(), float)
        assert isinstance(time_ms(), float)
        assert isinstance(time_ns(), int)
        assert isinstance(time_iso8601(), str)

    def test_units_agree(self):
        s0 = time_s()
        ms0 = time_ms()
        ns0 = time_ns()
        assert abs(ms0 / 1_000.0 - s0) < 1.0
        assert abs(ns0 / 1_000_000_000 - s0) < 1.0
        assert abs(s0 - _time.time()) < 1.0

    def test_iso8601_format(self):
        stamp = time_iso8601()
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", stamp)
