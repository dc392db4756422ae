import pytest

from crisp.errors import (
    CrispArgumentError,
    CrispError,
    CrispExit,
    CrispParseError,
    CrispStandardError,
    CrispTypeError,
    CrispUnresolvedReference,
    check_arity,
)


@pytest.mark.parametrize(
    "minimum,maximum,message",
    [
        (2, 2, "ArgumentError: 2 arguments expected."),
        (2, None, "ArgumentError: 2+ arguments expected."),
        (None, 1, "ArgumentError: Up to 1 arguments expected."),
        (1, 3, "ArgumentError: 1 to 3 arguments expected."),
    ],
)
def test_argument_error_phrasing(minimum, maximum, message):
    assert str(CrispArgumentError(minimum, maximum)) == message


def test_error_messages():
    assert str(CrispTypeError("Bool")) == "TypeError: Expected Bool."
    assert str(CrispParseError("Unexpected `)`.")) == "ParseError: Unexpected `)`."
    assert str(CrispStandardError("boom")) == "StandardError: boom"
    assert str(CrispUnresolvedReference("foo")) == "UnresolvedReferenceError: Unresolved symbol `foo`."


def test_all_errors_share_a_base():
    for err in (
        CrispArgumentError(1, 1),
        CrispTypeError("List"),
        CrispParseError("x"),
        CrispUnresolvedReference("x"),
        CrispStandardError("x"),
    ):
        assert isinstance(err, CrispError)


def test_exit_is_not_an_ordinary_error():
    assert issubclass(CrispExit, SystemExit)
    assert not issubclass(CrispExit, Exception)
    assert CrispExit(3).code == 3


@pytest.mark.parametrize(
    "args,minimum,maximum",
    [([], 1, None), ([1, 2, 3], None, 2), ([1], 2, 2), ([1, 2, 3, 4], 1, 3)],
)
def test_check_arity_rejects(args, minimum, maximum):
    with pytest.raises(CrispArgumentError):
        check_arity(args, minimum, maximum)


@pytest.mark.parametrize(
    "args,minimum,maximum",
    [([1], 1, None), ([], None, 2), ([1, 2], 2, 2), ([1, 2], 1, 3)],
)
def test_check_arity_accepts(args, minimum, maximum):
    check_arity(args, minimum, maximum)
