import pytest

from crisp.errors import CrispArgumentError, CrispStandardError, CrispTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cons 1 (2 3))", [1.0, 2.0, 3.0]),
        ("(cons 1 ())", [1.0]),
        ("(cons (1 2) (3 4))", [[1.0, 2.0], 3.0, 4.0]),
        ('(cons "test:" (4 2))', ["test:", 4.0, 2.0]),
    ],
)
def test_cons(interp, source, expected):
    assert interp.eval(source) == expected


def test_cons_needs_a_list(interp):
    with pytest.raises(CrispTypeError) as exc:
        interp.eval("(cons 1 2)")
    assert exc.value.expected == "List"


def test_cons_arity(interp):
    with pytest.raises(CrispArgumentError):
        interp.eval("(cons 1)")


def test_map(interp):
    assert interp.eval("(map (\\ a (* a 2)) (2 3 4))") == [4.0, 6.0, 8.0]


def test_map_chunks_by_parameter_count(interp):
    source = "(map (\\ (a b) (+ a b)) (1 2 10 20 100 200))"
    assert interp.eval(source) == [3.0, 30.0, 300.0]


def test_map_with_named_function(interp):
    interp.eval("(fn double (a) (* a 2))")
    assert interp.eval("(map double (2 3 4))") == [4.0, 6.0, 8.0]


def test_map_empty_list(interp):
    assert interp.eval("(map (\\ a a) ())") == []


def test_map_uneven_chunk_is_an_arity_error(interp):
    with pytest.raises(CrispArgumentError):
        interp.eval("(map (\\ (a b) (+ a b)) (1 2 3))")


def test_map_needs_a_lambda(interp):
    with pytest.raises(CrispTypeError) as exc:
        interp.eval("(map + (1 2))")
    assert exc.value.expected == "Lambda"


def test_map_needs_parameters(interp):
    with pytest.raises(CrispStandardError):
        interp.eval("(map (\\ () 1) (1 2))")


def test_map_callback_sees_caller_scope(interp):
    interp.eval("(fn scale-all (factor xs) (map (\\ x (* x factor)) xs))")
    assert interp.eval("(scale-all 10 (1 2 3))") == [10.0, 20.0, 30.0]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(foldl (\\ (acc n) (+ acc n)) 10 (1 2 3))", 16.0),
        ("(foldl (\\ (acc n) (+ acc n)) 0 ())", 0.0),
        ("(foldl (\\ (acc x) (cons x acc)) () (1 2 3 4 5))", [5.0, 4.0, 3.0, 2.0, 1.0]),
        ("(foldl1 (\\ (acc n) (+ acc n)) (1 2 3))", 6.0),
        ("(foldl1 (\\ (_ x) x) (1 2 3))", 3.0),
        ("(foldl1 (\\ (acc n) (* acc n)) (7))", 7.0),
    ],
)
def test_folds(interp, source, expected):
    assert interp.eval(source) == expected


def test_foldl_lambda_takes_two_arguments(interp):
    with pytest.raises(CrispStandardError):
        interp.eval("(foldl (\\ a a) 0 (1 2))")


def test_foldl1_empty_list(interp):
    with pytest.raises(CrispStandardError):
        interp.eval("(foldl1 (\\ (a b) a) ())")


@pytest.mark.parametrize(
    "source", ["(foldl (\\ (a b) a) 0)", "(foldl1 (\\ (a b) a))", "(map (\\ a a))"]
)
def test_list_combinator_arity(interp, source):
    with pytest.raises(CrispArgumentError):
        interp.eval(source)


def test_folds_need_a_list(interp):
    with pytest.raises(CrispTypeError):
        interp.eval("(foldl (\\ (a b) a) 0 5)")
    with pytest.raises(CrispTypeError):
        interp.eval("(foldl1 (\\ (a b) a) 5)")
