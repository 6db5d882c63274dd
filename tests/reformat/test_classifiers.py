"""Unit tests for the table-line and separator-line predicates."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from file_converter.reformat.classifiers import is_separator_line, is_table_line

# ===========================================================================
# is_table_line tests
# ===========================================================================


class TestIsTableLine:

    def test_no_pipes(self):
        assert is_table_line("Plain prose without any pipes.") is False

    def test_exactly_one_pipe_is_never_a_table_line(self):
        assert is_table_line("left | right") is False

    def test_exactly_two_pipes_is_a_table_line(self):
        assert is_table_line("| cell |") is True

    def test_bordered_row(self):
        assert is_table_line("| A | B | C |") is True

    def test_borderless_row(self):
        assert is_table_line("A | B | C") is True

    def test_prose_with_two_literal_pipes_is_a_false_positive(self):
        """The heuristic is syntactic: two pipes in prose still count."""
        assert is_table_line("Use a|b or c|d in the shell.") is True

    def test_empty_line(self):
        assert is_table_line("") is False


# ===========================================================================
# is_separator_line tests
# ===========================================================================


class TestIsSeparatorLine:

    def test_compact_separator(self):
        assert is_separator_line("|----|----|") is True

    def test_spaced_separator(self):
        assert is_separator_line("| -------- | --- |") is True

    def test_alignment_colons(self):
        assert is_separator_line("| :--- | :---: | ---: |") is True

    def test_surrounding_whitespace(self):
        assert is_separator_line("   |---|---|   ") is True

    def test_blank_cells_only(self):
        assert is_separator_line("| | |") is True

    def test_data_row(self):
        assert is_separator_line("| A | B |") is False

    def test_negative_number_row(self):
        assert is_separator_line("| -1 | -2 |") is False

    def test_missing_border(self):
        assert is_separator_line("--- | ---") is False
