"""Tests for the bit ruler and binary formatter."""

import pytest

from cidrview.render import binary, binary_octets, mask_line, ruler_width

RULERS = [
    "",
    "1",
    "2 ",
    "|3|",
    "|4 |",
    "| 5 |",
    "| 6 -|",
    "|- 7 -|",
    "|- 8 --|",
    "|-- 9 ---|",
    "|-- 10 ---|",
    "|--- 11 ---|",
    "|--- 12 ----|",
    "|---- 13 ----|",
    "|---- 14 -----|",
    "|----- 15 -----|",
    "|----- 16 ------|",
    "|------ 17 -------|",
    "|------- 18 -------|",
]


class TestMaskLine:
    """Test cases for mask_line."""

    @pytest.mark.parametrize("n, expected", list(enumerate(RULERS)))
    def test_known_rulers(self, n, expected):
        """Test rulers against the reference drawings."""
        assert mask_line(n) == expected

    @pytest.mark.parametrize("n", range(0, 257))
    def test_length_law(self, n):
        """Test ruler length is n plus one column per octet boundary."""
        expected = 0 if n == 0 else n + (n - 1) // 8
        assert len(mask_line(n)) == expected

    @pytest.mark.parametrize("n", range(5, 129))
    def test_general_shape(self, n):
        """Test general rulers are bordered, labelled and dash filled."""
        line = mask_line(n)
        assert line.startswith("|") and line.endswith("|")

        left, label, right = line[1:-1].split(" ")
        assert label == str(n)
        assert set(left) <= {"-"} and set(right) <= {"-"}

    @pytest.mark.parametrize("n", range(5, 129))
    def test_odd_dash_goes_right(self, n):
        """Test the right dash run is equal to or one longer than the left."""
        left, _, right = mask_line(n)[1:-1].split(" ")
        assert len(right) - len(left) in (0, 1)

    def test_common_widths(self):
        """Test rulers for the usual address widths."""
        assert mask_line(32) == "|" + "-" * 14 + " 32 " + "-" * 15 + "|"
        assert mask_line(128) == "|" + "-" * 68 + " 128 " + "-" * 68 + "|"

    def test_negative_rejected(self):
        """Test negative bit counts are a programming error."""
        with pytest.raises(ValueError):
            mask_line(-1)


class TestRulerWidth:
    """Test cases for ruler_width."""

    def test_values(self):
        assert ruler_width(0) == 0
        assert ruler_width(1) == 1
        assert ruler_width(8) == 8
        assert ruler_width(9) == 10
        assert ruler_width(32) == 35
        assert ruler_width(128) == 143


class TestBinary:
    """Test cases for the binary formatter."""

    def test_ipv4(self):
        assert binary(bytes([10, 20, 30, 40])) == "00001010 00010100 00011110 00101000"

    def test_zero_padded(self):
        assert binary_octets(bytes([0, 1, 255])) == ["00000000", "00000001", "11111111"]

    def test_empty(self):
        assert binary(b"") == ""

    @pytest.mark.parametrize("address", [
        bytes(4),
        bytes([192, 168, 1, 10]),
        bytes(range(16)),
        b"\xff" * 16,
    ])
    def test_groups(self, address):
        """Test output splits into one 8-digit group per byte."""
        groups = binary(address).split(" ")
        assert len(groups) == len(address)
        for group, byte in zip(groups, address):
            assert len(group) == 8
            assert set(group) <= {"0", "1"}
            assert int(group, 2) == byte

    def test_full_width_matches_ruler(self):
        """Test a full-width ruler is as wide as the binary row under it."""
        assert len(mask_line(32)) == len(binary(bytes(4)))
        assert len(mask_line(128)) == len(binary(bytes(16)))
