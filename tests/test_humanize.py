"""Unit tests for byte and duration helpers."""

import pytest

from convertx.core.exceptions import ValidationError
from convertx.core.humanize import U64_MAX, bytes_to_human_readable, bytes_to_mb, seconds_to_human_readable


class TestBytesToMb:
    """Tests for bytes_to_mb."""

    def test_one_megabyte(self):
        assert bytes_to_mb(1048576) == 1.0

    def test_two_megabytes(self):
        assert bytes_to_mb(2097152) == pytest.approx(2.0)

    def test_zero(self):
        assert bytes_to_mb(0) == 0.0

    def test_negative(self):
        with pytest.raises(ValidationError):
            bytes_to_mb(-1)

    def test_beyond_u64(self):
        with pytest.raises(ValidationError):
            bytes_to_mb(U64_MAX + 1)


class TestBytesToHumanReadable:
    """Tests for bytes_to_human_readable."""

    @pytest.mark.parametrize("num_bytes, expected", [
        (0, "0.00 B"),
        (1023, "1023.00 B"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (1048576, "1.00 MB"),
        (1024 ** 3, "1.00 GB"),
        (1024 ** 4, "1.00 TB"),
        (1024 ** 5, "1.00 PB"),
    ])
    def test_values(self, num_bytes, expected):
        assert bytes_to_human_readable(num_bytes) == expected

    def test_stops_at_largest_unit(self):
        assert bytes_to_human_readable(1024 ** 6) == "1024.00 PB"

    def test_negative(self):
        with pytest.raises(ValidationError):
            bytes_to_human_readable(-1024)

    def test_u64_max(self):
        assert bytes_to_human_readable(U64_MAX) == "16384.00 PB"

    def test_beyond_u64(self):
        with pytest.raises(ValidationError):
            bytes_to_human_readable(U64_MAX + 1)


class TestSecondsToHumanReadable:
    """Tests for seconds_to_human_readable."""

    @pytest.mark.parametrize("seconds, expected", [
        (0, "0s"),
        (59, "59s"),
        (60, "1m"),
        (61, "1m 1s"),
        (3600, "1h"),
        (3661, "1h 1m 1s"),
        (86400, "1d"),
        (86401, "1d 1s"),
        (90061, "1d 1h 1m 1s"),
    ])
    def test_values(self, seconds, expected):
        assert seconds_to_human_readable(seconds) == expected

    def test_negative(self):
        with pytest.raises(ValidationError):
            seconds_to_human_readable(-5)

    def test_beyond_u64(self):
        with pytest.raises(ValidationError):
            seconds_to_human_readable(U64_MAX + 1)
