from rustlings.exercises.vecs import Wrapper, array_and_vec, vec_loop, vec_map

EVENS = [2, 4, 6, 8, 10]


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v
    assert v == [10, 20, 30, 40]


def test_vec_loop():
    values = list(EVENS)
    result = vec_loop(values)
    assert result == [4, 8, 12, 16, 20]
    assert result is values


def test_vec_map():
    values = list(EVENS)
    result = vec_map(values)
    assert result == [4, 8, 12, 16, 20]
    assert values == EVENS


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"