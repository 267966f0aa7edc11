"""Tests for the sequence helpers (core/sequence.py).

Coverage:
* ``join`` / ``prepend`` / ``append`` string building.
* ``to_vec`` / ``to_map`` materializing (last write wins).
* ``print`` / ``debug`` output format, no trailing delimiter.
* ``Seq`` lazy adapters and single-pass behaviour.
"""

from __future__ import annotations

import io

import pytest

from easy_shortcuts.core.sequence import (
    Seq,
    append,
    debug_items,
    join,
    prepend,
    print_items,
    to_map,
    to_vec,
)


# ---------------------------------------------------------------------------
# String building
# ---------------------------------------------------------------------------

class TestJoin:
    def test_delimiter_between_elements(self) -> None:
        assert join(["one", "two", "three"], ",") == "one,two,three"

    def test_accepts_generators(self) -> None:
        words = (w.upper() for w in ["one", "two", "three"])
        assert join(words, ",") == "ONE,TWO,THREE"

    def test_multi_character_delimiter(self) -> None:
        assert join(["a", "b"], ", ") == "a, b"

    def test_single_element_has_no_delimiter(self) -> None:
        assert join(["only"], ",") == "only"

    def test_empty_input(self) -> None:
        assert join([], ",") == ""

    @pytest.mark.parametrize(
        "words",
        [["a"], ["a", "b", "c"], ["key", "", "value"], ["x y", "z"]],
    )
    def test_split_reconstructs_input(self, words: list[str]) -> None:
        assert join(words, "|").split("|") == words


class TestPrepend:
    def test_prefix_before_every_element(self) -> None:
        assert prepend(["one", "two", "three"], " hello ") == (
            " hello one hello two hello three"
        )

    def test_linker_flags(self) -> None:
        assert prepend(iter(["one", "two", "three"]), " -L") == " -Lone -Ltwo -Lthree"

    def test_empty_input(self) -> None:
        assert prepend([], "-x") == ""


class TestAppend:
    def test_concatenates_mapped_values(self) -> None:
        assert append(["a", "b"], lambda s: f"<{s}>") == "<a><b>"


# ---------------------------------------------------------------------------
# Materializing
# ---------------------------------------------------------------------------

class TestToVec:
    def test_preserves_order(self) -> None:
        assert to_vec("one two three".split()) == ["one", "two", "three"]

    def test_consumes_generator(self) -> None:
        assert to_vec(n * 2 for n in range(3)) == [0, 2, 4]


class TestToMap:
    def test_last_write_wins(self) -> None:
        result = to_map([("a", "1"), ("b", "2"), ("a", "3")])
        assert result == {"a": "3", "b": "2"}

    def test_empty(self) -> None:
        assert to_map([]) == {}


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------

class TestPrint:
    def test_uses_str_and_no_trailing_delimiter(self) -> None:
        out = io.StringIO()
        print_items([10, 20, 30], "\n", out)
        assert out.getvalue() == "10\n20\n30"

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_items(range(5), " ")
        assert capsys.readouterr().out == "0 1 2 3 4"

    def test_empty_sequence_prints_nothing(self) -> None:
        out = io.StringIO()
        print_items([], ",", out)
        assert out.getvalue() == ""


class TestDebug:
    def test_uses_repr(self) -> None:
        out = io.StringIO()
        debug_items([(0, 0), (1, 2)], "\n", out)
        assert out.getvalue() == "(0, 0)\n(1, 2)"

    def test_strings_are_quoted(self) -> None:
        out = io.StringIO()
        debug_items(["a", "b"], ",", out)
        assert out.getvalue() == "'a','b'"


# ---------------------------------------------------------------------------
# Seq wrapper
# ---------------------------------------------------------------------------

class TestSeq:
    def test_chained_adapters(self) -> None:
        result = Seq(range(10)).filter(lambda n: n % 2).map(str).take(3).join(",")
        assert result == "1,3,5"

    def test_filter_map_drops_none(self) -> None:
        result = Seq(["a=1", "junk", "b=2"]).filter_map(
            lambda s: tuple(s.split("=")) if "=" in s else None,
        ).to_map()
        assert result == {"a": "1", "b": "2"}

    def test_skip(self) -> None:
        assert Seq("abcd").skip(2).to_vec() == ["c", "d"]

    def test_prepend_method(self) -> None:
        assert Seq(["one", "two"]).prepend("-") == "-one-two"

    def test_print_method(self, capsys: pytest.CaptureFixture[str]) -> None:
        Seq([1, 2]).print(", ")
        assert capsys.readouterr().out == "1, 2"

    def test_debug_method(self, capsys: pytest.CaptureFixture[str]) -> None:
        Seq(["x"]).debug("\n")
        assert capsys.readouterr().out == "'x'"

    def test_single_pass(self) -> None:
        seq = Seq([1, 2, 3])
        assert seq.to_vec() == [1, 2, 3]
        assert seq.to_vec() == []
