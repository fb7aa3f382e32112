import pytest

from nem12lite import exceptions
from nem12lite.collect import collect_lines


def test_drops_blank_lines_but_counts_them():
    out = collect_lines(["", " 100,NEM12 ", "\t", "900", "   "])
    assert out.lines == ((2, "100,NEM12"), (4, "900"))
    assert out.line_count == 5


def test_last_line_is_tail_of_filtered_list():
    out = collect_lines(["100,NEM12", "900  ", "", "  \t "])
    assert out.last_line == "900"


def test_all_blank_raises():
    with pytest.raises(exceptions.EmptyInputError):
        collect_lines(["", "  ", "\n"])
