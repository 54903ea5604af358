"""Tests for pigsfly.syntax — statement parsing."""

import io
from unittest.mock import patch

import pytest

from pigsfly.syntax import (
    StatementError,
    load_relations,
    parse_count,
    parse_relations,
    parse_statement,
)


class TestStatements:
    def test_simple(self):
        r = parse_statement("PIGS have WINGS")
        assert r.premise == frozenset({"PIGS"})
        assert r.conclusion == frozenset({"WINGS"})

    def test_things_placeholder(self):
        r = parse_statement("things with WINGS can FLY")
        assert r.premise == frozenset({"WINGS"})
        assert r.conclusion == frozenset({"FLY"})

    def test_are_connector(self):
        r = parse_statement("things with HOOVES are PIGS with FLY")
        assert r.premise == frozenset({"HOOVES"})
        assert r.conclusion == frozenset({"PIGS", "FLY"})

    def test_and_joiner(self):
        r = parse_statement("PIGS and COWS have HOOVES and TAILS")
        assert r.premise == frozenset({"PIGS", "COWS"})
        assert r.conclusion == frozenset({"HOOVES", "TAILS"})

    def test_that_can_in_premise(self):
        r = parse_statement("PIGS that can FLY are HAPPY")
        assert r.premise == frozenset({"PIGS", "FLY"})
        assert r.conclusion == frozenset({"HAPPY"})

    def test_that_can_in_conclusion(self):
        r = parse_statement("PIGS are ANIMALS that can FLY")
        assert r.conclusion == frozenset({"ANIMALS", "FLY"})

    def test_extra_whitespace(self):
        r = parse_statement("  PIGS   have\tWINGS  \n")
        assert r.premise == frozenset({"PIGS"})
        assert r.conclusion == frozenset({"WINGS"})

    def test_duplicates_collapse(self):
        r = parse_statement("PIGS with PIGS have WINGS and WINGS")
        assert r.premise == frozenset({"PIGS"})
        assert r.conclusion == frozenset({"WINGS"})

    def test_case_preserved(self):
        r = parse_statement("Pigs have wings")
        assert r.premise == frozenset({"Pigs"})
        assert r.conclusion == frozenset({"wings"})

    def test_bare_things_premise(self):
        r = parse_statement("things can FLY")
        assert r.premise == frozenset()
        assert r.conclusion == frozenset({"FLY"})


class TestMalformedStatements:
    def test_empty(self):
        with pytest.raises(StatementError, match="empty premise"):
            parse_statement("")

    def test_no_connector(self):
        with pytest.raises(StatementError, match="connector"):
            parse_statement("PIGS")

    def test_empty_conclusion(self):
        with pytest.raises(StatementError, match="empty conclusion"):
            parse_statement("PIGS have")

    def test_unknown_word_in_premise(self):
        with pytest.raises(StatementError, match="unexpected word 'like'"):
            parse_statement("PIGS like MUD")

    def test_connector_in_conclusion(self):
        with pytest.raises(StatementError, match="unexpected word 'can'"):
            parse_statement("PIGS have WINGS can FLY")

    def test_that_without_can(self):
        with pytest.raises(StatementError, match="after 'that'"):
            parse_statement("PIGS that have WINGS")

    def test_that_at_end(self):
        with pytest.raises(StatementError, match="after 'that'"):
            parse_statement("PIGS are BIRDS that")

    def test_dangling_joiner_in_premise(self):
        with pytest.raises(StatementError, match="dangling joiner"):
            parse_statement("PIGS with")

    def test_dangling_joiner_in_conclusion(self):
        with pytest.raises(StatementError, match="dangling joiner at the end of the conclusion"):
            parse_statement("PIGS have WINGS and")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_statement("PIGS")


class TestCount:
    def test_count(self):
        assert parse_count("3") == 3

    def test_count_whitespace(self):
        assert parse_count("  2 \n") == 2

    def test_zero(self):
        assert parse_count("0") == 0

    def test_plus_sign(self):
        assert parse_count("+2") == 2

    @pytest.mark.parametrize("text", ["", "two", "-1", "1.5", "+", "++2", "2 3"])
    def test_bad_count(self, text):
        with pytest.raises(StatementError, match="statement count"):
            parse_count(text)


class TestParseRelations:
    def test_in_order(self):
        relations = parse_relations(["2", "PIGS have WINGS", "things with WINGS can FLY"])
        assert [r.premise for r in relations] == [frozenset({"PIGS"}), frozenset({"WINGS"})]

    def test_one_relation_per_line(self):
        relations = parse_relations(["2", "PIGS have WINGS", "PIGS have WINGS"])
        assert len(relations) == 2
        assert relations[0] is not relations[1]

    def test_zero_count(self):
        assert parse_relations(["0"]) == []

    def test_blank_lines_before_count_skipped(self):
        relations = parse_relations(["", "", "1", "CATS have CLAWS"])
        assert len(relations) == 1
        assert relations[0].premise == frozenset({"CATS"})

    def test_blank_statement_is_empty_relation(self):
        relations = parse_relations(["2", "", "PIGS can FLY"])
        assert len(relations) == 2
        assert relations[0].premise == frozenset()
        assert relations[0].conclusion == frozenset()
        assert relations[1].premise == frozenset({"PIGS"})

    def test_blank_statement_counts_towards_total(self):
        relations = parse_relations(["1", "", "PIGS can FLY"])
        assert len(relations) == 1
        assert relations[0].conclusion == frozenset()

    def test_missing_statement_line(self):
        with pytest.raises(StatementError, match="unexpected end of input"):
            parse_relations(["2", "CATS have CLAWS"])

    def test_trailing_lines_ignored(self):
        relations = parse_relations(["1", "CATS have CLAWS", "not a statement"])
        assert len(relations) == 1

    def test_empty_input(self):
        with pytest.raises(StatementError, match="empty input"):
            parse_relations([])

    def test_bad_count_line_number(self):
        with pytest.raises(StatementError, match="line 1") as exc_info:
            parse_relations(["many", "CATS have CLAWS"])
        assert exc_info.value.line_number == 1
        assert exc_info.value.text == "many"

    def test_too_few_statements(self):
        with pytest.raises(StatementError, match="unexpected end of input"):
            parse_relations(["3", "CATS have CLAWS"])

    def test_bad_statement_line_number(self):
        with pytest.raises(StatementError, match="line 3") as exc_info:
            parse_relations(["2", "CATS have CLAWS", "PIGS like MUD"])
        assert exc_info.value.line_number == 3
        assert exc_info.value.text == "PIGS like MUD"


class TestLoadRelations:
    def test_from_path(self, statement_file):
        path = statement_file("1", "PIGS have WINGS")
        relations = load_relations(path)
        assert len(relations) == 1

    def test_from_stream(self):
        relations = load_relations(io.StringIO("1\nPIGS have WINGS\n"))
        assert relations[0].conclusion == frozenset({"WINGS"})

    def test_from_stdin(self):
        with patch("sys.stdin", io.StringIO("1\nCATS have CLAWS\n")):
            relations = load_relations("-")
        assert relations[0].premise == frozenset({"CATS"})

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_relations(tmp_path / "missing.txt")
