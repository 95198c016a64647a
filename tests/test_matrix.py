"""Tests for a11ykit.matrix module."""

from a11ykit.color import Color
from a11ykit.matrix import LuminanceMatrix, luminance_matrix, to_color_list


class TestToColorList:
    """Test palette normalisation."""

    def test_csv_string(self):
        """Test a comma separated string with spaces."""
        keys = [key for key, _ in to_color_list("#00f, #0f0,#f00")]
        assert keys == ["ff0000", "00ff00", "0000ff"]

    def test_sorted_by_hue(self):
        """Test the palette is ordered by hue."""
        hues = [color.hue for _, color in to_color_list("#f0f", "#0ff", "#ff0", "#f00")]
        assert hues == sorted(hues)

    def test_invalid_entries_are_dropped(self):
        """Test values that are not colors are skipped."""
        palette = to_color_list("#fff", "nope", None, Color(), ["#000", 42])
        assert [key for key, _ in palette] == ["ffffff", "000000"]

    def test_duplicates_keep_last(self):
        """Test inputs with the same hex collapse to the later one."""
        first = Color("#fff")
        last = Color("#FFFFFF")
        palette = to_color_list(first, last)
        assert len(palette) == 1
        assert palette[0][1] is last

    def test_colors_are_not_copied(self):
        """Test Color inputs are used as given."""
        color = Color("#186276")
        assert to_color_list(color)[0][1] is color

    def test_partial_hsl_is_dropped(self):
        """Test a color with only part of its HSL set is skipped."""
        palette = to_color_list("#000", {"hue": 10, "lightness": 0.28}, "#fff")
        assert [key for key, _ in palette] == ["000000", "ffffff"]

    def test_hue_only_color_is_dropped(self):
        """Test a Color given only a hue is skipped."""
        color = Color()
        color.hue = 120
        assert [key for key, _ in to_color_list("#000", color)] == ["000000"]

    def test_empty(self):
        """Test no input."""
        assert to_color_list() == []


class TestLuminanceMatrix:
    """Test the pairwise contrast table."""

    def test_csv_string(self, primary_hexes, primary_matrix):
        """Test a single comma separated string."""
        assert luminance_matrix(",".join(primary_hexes)) == primary_matrix

    def test_string_arguments(self, primary_hexes, primary_matrix):
        """Test one hex string per argument."""
        assert luminance_matrix(*primary_hexes) == primary_matrix

    def test_color_arguments(self, primary_colors, primary_matrix):
        """Test one Color per argument."""
        assert luminance_matrix(*primary_colors) == primary_matrix

    def test_color_list(self, primary_colors, primary_matrix):
        """Test a list of Colors."""
        assert luminance_matrix(primary_colors) == primary_matrix

    def test_mixed_arguments(self, primary_hexes, primary_colors, primary_matrix):
        """Test a list mixing Colors and strings plus loose arguments."""
        mixed = [
            primary_colors[0],
            primary_hexes[1],
            primary_colors[2],
            primary_hexes[3],
            primary_colors[4],
            primary_hexes[5],
        ]
        assert luminance_matrix(mixed, primary_colors[6], primary_hexes[7]) == primary_matrix

    def test_diagonal(self, primary_matrix):
        """Test every color has a contrast of 1 with itself."""
        assert all(row[key] == "1.00" for key, row in primary_matrix.items())
        table = luminance_matrix("#186276, #777, #fff6")
        assert all(row[key] == "1.00" for key, row in table.items())

    def test_translucent_key(self):
        """Test translucent colors keep their alpha in the key."""
        table = luminance_matrix("#fff6", "#000")
        assert set(table) == {"ffffff66", "000000"}
        assert table["ffffff66"]["000000"] == "3.66"

    def test_inputs_are_not_mutated(self, primary_colors):
        """Test building the table leaves the colors alone."""
        before = [color.hcolor for color in primary_colors]
        luminance_matrix(primary_colors)
        assert [color.hcolor for color in primary_colors] == before

    def test_repeatable(self, primary_hexes):
        """Test the same palette gives the same table."""
        assert luminance_matrix(primary_hexes) == luminance_matrix(primary_hexes)

    def test_partial_color_is_skipped(self):
        """Test an incomplete color does not break the table."""
        table = luminance_matrix("#000", {"hue": 10, "lightness": 0.28}, "#fff")
        assert table == {
            "000000": {"000000": "1.00", "ffffff": "21.00"},
            "ffffff": {"000000": "21.00", "ffffff": "1.00"},
        }

    def test_alias(self):
        """Test the class style alias."""
        assert LuminanceMatrix is luminance_matrix
