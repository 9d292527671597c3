from referee.strings import Strings


def _fresh(text):
    return "".join(list(text))


def test_simple():
    strings = Strings.instance()
    a = strings.get_string(_fresh("a"))
    aa = strings.get_string(_fresh("aa"))
    b = strings.get_string(_fresh("b"))
    c = strings.get_string(_fresh("b"))
    upper_a = strings.get_string(str(_fresh("a")))
    upper_b = strings.get_string(str(_fresh("b")))

    assert a is upper_a
    assert b is upper_b
    assert b is c
    assert a is not b
    assert a != b
    assert a != aa


def test_instance_is_shared():
    first = Strings.instance().get_string(_fresh("shared-text"))
    second = Strings.instance().get_string(_fresh("shared-text"))
    assert first == "shared-text"
    assert second is first


def test_pool_returns_first_object():
    pool = Strings()
    first = _fresh("hello world")
    second = _fresh("hello world")
    assert pool.get_string(first) is first
    assert pool.get_string(second) is first


def test_bytes_are_pooled_with_text():
    pool = Strings()
    text = pool.get_string(_fresh("abc"))
    assert pool.get_string(b"abc") is text