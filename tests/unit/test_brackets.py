"""Tests for the bracket matcher (rescan) and the opt-in jump table."""

import pytest

from brainfuck.brackets import BracketMatch, Direction, build_jump_table, match_bracket
from brainfuck.vm_types import Program


def _program(text: str) -> Program:
    return Program(code=text.encode("utf-8"))


WELL_FORMED = "+[>[-]<[>+[>+<-]<-]]>[.[-]]"


class TestMatchBracketForward:
    def test_adjacent_pair(self):
        assert match_bracket(_program("[]"), 0, Direction.FORWARD) == BracketMatch.at(1)

    def test_outer_pair_skips_nested(self):
        assert match_bracket(_program("[[]]"), 0, Direction.FORWARD).offset == 3

    def test_inner_pair(self):
        assert match_bracket(_program("[[]]"), 1, Direction.FORWARD).offset == 2

    def test_comments_between_brackets(self):
        assert match_bracket(_program("[a+[b]c]"), 0, Direction.FORWARD).offset == 7

    def test_unmatched_open_is_not_found(self):
        result = match_bracket(_program("[[]"), 0, Direction.FORWARD)
        assert result == BracketMatch.not_found()
        assert not result.found

    def test_open_at_end_is_not_found(self):
        assert not match_bracket(_program("+["), 1, Direction.FORWARD).found


class TestMatchBracketBackward:
    def test_adjacent_pair(self):
        assert match_bracket(_program("[]"), 1, Direction.BACKWARD).offset == 0

    def test_outer_pair_skips_nested(self):
        assert match_bracket(_program("[[]]"), 3, Direction.BACKWARD).offset == 0

    def test_inner_pair(self):
        assert match_bracket(_program("[[]]"), 2, Direction.BACKWARD).offset == 1

    def test_unmatched_close_is_not_found(self):
        assert not match_bracket(_program("[]]"), 2, Direction.BACKWARD).found

    def test_close_at_start_is_not_found(self):
        assert not match_bracket(_program("]"), 0, Direction.BACKWARD).found


class TestStructuralInverse:
    def test_forward_then_backward_returns_to_open(self):
        program = _program(WELL_FORMED)
        opens = [i for i, c in enumerate(WELL_FORMED) if c == "["]
        assert opens
        for offset in opens:
            close = match_bracket(program, offset, Direction.FORWARD)
            assert close.found
            assert WELL_FORMED[close.offset] == "]"
            back = match_bracket(program, close.offset, Direction.BACKWARD)
            assert back.offset == offset


class TestBuildJumpTable:
    def test_pairs_both_directions(self):
        assert build_jump_table(_program("[[]]")) == {0: 3, 3: 0, 1: 2, 2: 1}

    def test_unmatched_brackets_are_absent(self):
        assert build_jump_table(_program("[[]")) == {1: 2, 2: 1}
        assert build_jump_table(_program("]")) == {}

    def test_no_brackets(self):
        assert build_jump_table(_program("+-<>.,")) == {}

    @pytest.mark.parametrize("text", [WELL_FORMED, "]+[[-]>[<]][", "[[[", "]]]", "[]][[]"])
    def test_agrees_with_rescan(self, text):
        program = _program(text)
        table = build_jump_table(program)
        for offset, char in enumerate(text):
            if char not in "[]":
                continue
            direction = Direction.FORWARD if char == "[" else Direction.BACKWARD
            result = match_bracket(program, offset, direction)
            if result.found:
                assert table[offset] == result.offset
            else:
                assert offset not in table
