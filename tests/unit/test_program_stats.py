"""Tests for opcode frequency statistics."""

from brainfuck.program_stats import count_opcodes


class TestCountOpcodes:
    def test_empty_program_returns_empty_dict(self):
        assert count_opcodes(b"") == {}

    def test_comments_only_returns_empty_dict(self):
        assert count_opcodes(b"hello world\n") == {}

    def test_repeated_opcodes_are_summed(self):
        assert count_opcodes(b"+++--") == {"INCREMENT": 3, "DECREMENT": 2}

    def test_all_opcodes_counted(self):
        assert count_opcodes(b"><+-[].,") == {
            "MOVE_RIGHT": 1,
            "MOVE_LEFT": 1,
            "INCREMENT": 1,
            "DECREMENT": 1,
            "LOOP_OPEN": 1,
            "LOOP_CLOSE": 1,
            "OUTPUT": 1,
            "INPUT": 1,
        }
