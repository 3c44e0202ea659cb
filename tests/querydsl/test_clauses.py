"""
Unit tests for solrql.querydsl.clauses.
"""

import enum
from datetime import date

import pytest

from solrql.querydsl.clauses import and_, ex, not_, or_, quote, range_, tag, where


class Color(enum.Enum):
    RED = "red"

    def __str__(self):
        return self.value


class TestWhere:
    @pytest.mark.parametrize(
        "field,value,expected",
        [
            ("id", 12345, "id:12345"),
            ("name", "foo", "name:foo"),
            ("price", 9.5, "price:9.5"),
            ("flag", True, "flag:True"),
            ("color", Color.RED, "color:red"),
        ],
    )
    def test_where_stringifies_value(self, field, value, expected):
        assert where(field, value) == expected

    def test_where_accepts_condition(self):
        assert where("field", or_(15, 20, 25)) == "field:(15 OR 20 OR 25)"

    def test_where_passes_malformed_input_through(self):
        assert where("", "") == ":"
        assert where("bad field", "a:b") == "bad field:a:b"

    def test_not(self):
        assert not_("id", 12345) == "-id:12345"

    def test_not_with_condition(self):
        assert not_("field", or_(15, 20, 25)) == "-field:(15 OR 20 OR 25)"


class TestConditions:
    def test_and(self):
        assert and_(1, 2, 3) == "(1 AND 2 AND 3)"

    def test_and_mixed_values(self):
        assert and_("a", 2, quote("c d")) == '(a AND 2 AND "c d")'

    def test_and_empty(self):
        assert and_() == "()"

    def test_or_varargs(self):
        assert or_(15, 20, 25) == "(15 OR 20 OR 25)"

    def test_or_single_iterable(self):
        assert or_([15, 20, 25]) == "(15 OR 20 OR 25)"
        assert or_(x for x in ("a", "b")) == "(a OR b)"

    def test_or_single_string_is_a_value(self):
        assert or_("abc") == "(abc)"

    def test_or_empty(self):
        assert or_() == "()"
        assert or_([]) == "()"

    def test_nested_groups(self):
        assert or_(and_(1, 2), 3) == "((1 AND 2) OR 3)"


class TestRange:
    def test_range_two_bounds(self):
        assert range_(1, 20) == "[1 TO 20]"

    def test_range_pair(self):
        assert range_((1, 20)) == "[1 TO 20]"

    def test_range_forms_match(self):
        assert range_("a", "z") == range_(("a", "z"))

    def test_range_does_not_check_order(self):
        assert range_(20, 1) == "[20 TO 1]"

    def test_range_wildcards_and_dates(self):
        assert range_("*", date(2020, 1, 31)) == "[* TO 2020-01-31]"

    def test_range_none_is_a_bound(self):
        assert range_(None, 5) == "[None TO 5]"


class TestLocalParams:
    def test_tag(self):
        assert tag("t1", where("type", "book")) == "{!tag=t1}type:book"

    def test_ex(self):
        assert ex("t1", "type") == "{!ex=t1}type"


class TestQuote:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("hello world", '"hello world"'),
            (42, '"42"'),
            (Color.RED, '"red"'),
            ("", '""'),
        ],
    )
    def test_quote(self, value, expected):
        assert quote(value) == expected

    def test_quote_in_clause(self):
        assert where("title", quote("war and peace")) == 'title:"war and peace"'
