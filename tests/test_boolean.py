import pytest

from crisp.errors import CrispArgumentError, CrispTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 5 5)", True),
        ("(= 30 30 30)", True),
        ("(= 5 (+ 3 2) (- 10 5))", True),
        ("(= 5 4)", False),
        ("(= 5 5 4 5)", False),
        ("(> 5 4)", True),
        ("(> 4 2 0)", True),
        ("(> 5 6)", False),
        ("(> 4 2 2)", False),
        ("(>= 4 2 2 1.5)", True),
        ("(>= 5 4 2.5 3)", False),
        ("(< 4 7 10)", True),
        ("(< 4 5 5)", False),
        ("(<= 4 5 5 5.5)", True),
        ("(<= 5 7 8 7.5)", False),
        ("(! true)", False),
        ("(! false)", True),
        ("(! (= 3 3))", False),
    ],
)
def test_comparisons(interp, source, expected):
    assert interp.eval(source) is expected


def test_not_maps_over_several_arguments(interp):
    assert interp.eval("(! false true false)") == [True, False, True]


@pytest.mark.parametrize("source", ["(= 1)", "(> 1)", "(<=)"])
def test_comparisons_need_two_arguments(interp, source):
    with pytest.raises(CrispArgumentError) as exc:
        interp.eval(source)
    assert (exc.value.minimum, exc.value.maximum) == (2, None)


def test_not_needs_an_argument(interp):
    with pytest.raises(CrispArgumentError):
        interp.eval("(!)")


def test_comparisons_need_numbers(interp):
    with pytest.raises(CrispTypeError):
        interp.eval("(> 1 true)")


def test_not_needs_bools(interp):
    with pytest.raises(CrispTypeError) as exc:
        interp.eval("(! 1)")
    assert exc.value.expected == "Bool"


def test_assert_passes(interp):
    assert interp.eval("(assert (> 5 4))") is True
    assert interp.eval("(assert_false (< 5 4))") is True


@pytest.mark.parametrize("source", ["(assert (= 3 4))", "(assert_false (= 4 4))"])
def test_assert_failure_exits_with_101(interp, source):
    with pytest.raises(SystemExit) as exc:
        interp.eval(source)
    assert exc.value.code == 101


def test_assert_arity_and_type(interp):
    with pytest.raises(CrispArgumentError):
        interp.eval("(assert true false)")
    with pytest.raises(CrispTypeError):
        interp.eval("(assert 1)")
