"""Column storage buffers"""
import pytest
from py_frame import INTEGER, TEXT
from py_frame.storage import IntStorage, TextStorage, choose_storage


def test_choose_storage_integer():
    assert isinstance(choose_storage(INTEGER), IntStorage)


def test_choose_storage_text():
    assert isinstance(choose_storage(TEXT), TextStorage)


def test_choose_storage_fresh_each_time():
    a = choose_storage(INTEGER)
    b = choose_storage(INTEGER)
    a.append(1)
    assert len(a) == 1
    assert len(b) == 0


def test_int_storage_append_and_read():
    s = IntStorage()
    for v in (3, -1, 2 ** 31 - 1):
        s.append(v)
    assert len(s) == 3
    assert s[1] == -1
    assert list(s) == [3, -1, 2 ** 31 - 1]
    assert s.to_tuple() == (3, -1, 2 ** 31 - 1)


def test_int_storage_is_32_bit():
    s = IntStorage()
    with pytest.raises(OverflowError):
        s.append(2 ** 31)


def test_text_storage_append_and_read():
    s = TextStorage()
    s.append("a")
    s.append("b")
    assert s[0] == "a"
    assert list(s) == ["a", "b"]
    assert s.to_tuple() == ("a", "b")
