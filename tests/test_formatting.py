"""Tests for byte scaling, uptime formatting and palettes."""

import pytest

from snapfetch.formatting import (
    bright_palette,
    format_uptime,
    normal_palette,
    render_palette,
    scale_bytes,
    shell_name,
)


class TestScaleBytes:
    """Tests for scale_bytes."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0.00 B"),
            (999, "999.00 B"),
            (1000, "1.00 KB"),
            (1_500_000, "1.50 MB"),
            (8_000_000_000, "8.00 GB"),
            (2_500_000_000_000, "2.50 TB"),
        ],
    )
    def test_known_values(self, size, expected):
        """Test documented scaling examples."""
        assert scale_bytes(size) == expected

    def test_caps_at_terabytes(self):
        """Test values beyond 1000 TB stay in TB."""
        assert scale_bytes(5 * 10**15) == "5000.00 TB"

    def test_negative_is_clamped(self):
        """Test negative sizes render as zero bytes."""
        assert scale_bytes(-10) == "0.00 B"


class TestFormatUptime:
    """Tests for format_uptime."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "0s"),
            (59, "59s"),
            (60, "1m 0s"),
            (65, "1m 5s"),
            (3600, "1h 0m 0s"),
            (3661, "1h 1m 1s"),
            (86400, "1d 0h 0m 0s"),
            (90061, "1d 1h 1m 1s"),
        ],
    )
    def test_cascading_units(self, seconds, expected):
        """Test units appear once a larger unit is shown."""
        assert format_uptime(seconds) == expected

    def test_large_day_count(self):
        """Test day counts are not wrapped."""
        assert format_uptime(400 * 86400 + 5) == "400d 0h 0m 5s"


class TestPalette:
    """Tests for palette rendering."""

    def test_normal_palette(self):
        """Test normal colors use the 4n background codes."""
        expected = "".join(f"\x1b[4{n}m   " for n in range(8)) + "\x1b[0m"
        assert normal_palette() == expected

    def test_bright_palette(self):
        """Test bright colors use indexed 256-color backgrounds."""
        expected = "".join(f"\x1b[48;5;{n}m   " for n in range(8, 16)) + "\x1b[0m"
        assert bright_palette() == expected

    def test_empty_range(self):
        """Test an empty range is only the reset sequence."""
        assert render_palette(3, 3) == "\x1b[0m"


class TestShellName:
    """Tests for shell_name."""

    def test_basename(self):
        """Test the final path segment is returned."""
        assert shell_name("/usr/bin/zsh") == "zsh"

    def test_no_slash(self):
        """Test a value without slashes is returned unchanged."""
        assert shell_name("fish") == "fish"

    def test_trailing_slash(self):
        """Test a trailing slash yields an empty name."""
        assert shell_name("/bin/") == ""
