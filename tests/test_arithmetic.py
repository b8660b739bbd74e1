import pytest

from miniforth import DivisionByZero, StackUnderflow
from miniforth.arithmetic import truncated_div

PAIRS = [(0, 0), (3, 4), (-3, 4), (10, -7), (-8, -2), (2**40, 2**40 + 1)]


class TestBinaryOps:

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_plus(self, session, a, b):
        session(f"{a} {b} +")
        assert session.stack == [a + b]

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_minus(self, session, a, b):
        session(f"{a} {b} -")
        assert session.stack == [a - b]

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_mult(self, session, a, b):
        session(f"{a} {b} *")
        assert session.stack == [a * b]

    def test_operand_order(self, session):
        session("10 3 -")
        assert session.stack == [7]

    def test_result_lands_on_top(self, session):
        session("100 1 2 +")
        assert session.stack == [100, 3]


class TestDivision:

    @pytest.mark.parametrize("a, b, q", [
        (7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (6, 3, 2), (0, 5, 0), (1, 2, 0),
    ])
    def test_truncates_toward_zero(self, session, a, b, q):
        session(f"{a} {b} /")
        assert session.stack == [q]
        assert truncated_div(a, b) == q

    def test_by_zero_reports_and_pushes_nothing(self, session):
        session("1 7 0 /")
        assert session.stack == [1]
        assert [type(e) for e in session.errors] == [DivisionByZero]
        assert session.lines() == ["Error: Division by zero"]

    def test_execution_continues_after_zero_division(self, session):
        session("5 0 / 2 3 + .")
        assert session.lines() == ["Error: Division by zero", "5"]


class TestUnderflow:

    def test_plus_on_empty_stack(self, session):
        session("+")
        assert session.stack == [0]
        assert [type(e) for e in session.errors] == [StackUnderflow, StackUnderflow]

    def test_missing_left_operand_is_zero(self, session):
        session("5 -")
        assert session.stack == [-5]
        assert len(session.errors) == 1

    def test_division_underflow_is_zero_division(self, session):
        session("/")
        assert session.stack == []
        assert [type(e) for e in session.errors] == [StackUnderflow, StackUnderflow, DivisionByZero]
