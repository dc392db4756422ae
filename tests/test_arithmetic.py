import math

import pytest

from crisp.errors import CrispArgumentError, CrispTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 2 3 4)", 9.0),
        ("(+ 6 9)", 15.0),
        ("(- 6 9)", -3.0),
        ("(- 1 2 3)", -4.0),
        ("(* 5 2 3)", 30.0),
        ("(/ 9 2)", 4.5),
        ("(/ 30 3 2)", 5.0),
        ("(% 9 2)", 1.0),
        ("(% 35 25 6)", 4.0),
        ("(% -7 2)", -1.0),
        ("(+ 1 2.5 3)", 6.5),
        ("(* (+ 2 3) 2 (- 6 2) 2)", 80.0),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57.0),
        ("+ 1 2", 3.0),
        ("(+ -1 5 -3)", 1.0),
    ],
)
def test_arithmetic(interp, source, expected):
    result = interp.eval(source)
    assert result == expected
    assert type(result) is float


def test_division_by_zero_follows_ieee(interp):
    assert interp.eval("(/ 1 0)") == math.inf
    assert interp.eval("(/ -1 0)") == -math.inf
    assert math.isnan(interp.eval("(/ 0 0)"))
    assert math.isnan(interp.eval("(% 1 0)"))


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "%"])
@pytest.mark.parametrize("args", ["", "1"])
def test_arithmetic_needs_two_arguments(interp, op, args):
    with pytest.raises(CrispArgumentError) as exc:
        interp.eval(f"({op} {args})")
    assert (exc.value.minimum, exc.value.maximum) == (2, None)


@pytest.mark.parametrize("source", ["(+ 1 true)", '(* 2 "3")', "(- (1 2) 1)", "(/ 1 nil)"])
def test_arithmetic_needs_numbers(interp, source):
    with pytest.raises(CrispTypeError) as exc:
        interp.eval(source)
    assert exc.value.expected == "Number"
