import pytest

from gencoll.dll import DoublyLinkedList


def _filled(values):
    d = DoublyLinkedList()
    for v in values:
        d.push_back(v)
    return d


def test_push_back_keeps_order_both_ways():
    values = [3, 1, 4, 1, 5]
    d = _filled(values)
    assert list(d) == values
    assert list(reversed(d)) == values[::-1]
    assert len(d) == len(values)
    assert d.front().value == values[0]
    assert d.back().value == values[-1]


def test_push_front_reverses_order():
    values = ["a", "b", "c"]
    d = DoublyLinkedList()
    for v in values:
        d.push_front(v)
    assert list(d) == values[::-1]
    assert d.back().value == values[0]


def test_pop_front_and_back_return_values():
    values = [10, 20, 30]
    d = _filled(values)
    assert d.pop_front() == values[0]
    assert d.pop_back() == values[-1]
    assert list(d) == [values[1]]
    assert d.pop_back() == values[1]
    assert d.is_empty()
    assert d.front() is None
    assert d.back() is None


def test_pop_empty_raises():
    d = DoublyLinkedList()
    with pytest.raises(IndexError):
        d.pop_front()
    with pytest.raises(IndexError):
        d.pop_back()


def test_insert_after_middle_and_back():
    d = _filled(["a", "b"])
    first = d.front()
    d.insert_after(first, "x")
    assert list(d) == ["a", "x", "b"]
    node = d.insert_after(d.back(), "z")
    assert d.back() is node
    assert list(reversed(d)) == ["z", "b", "x", "a"]


def test_insert_before_middle_and_front():
    d = _filled(["a", "b"])
    d.insert_before(d.back(), "x")
    assert list(d) == ["a", "x", "b"]
    node = d.insert_before(d.front(), "y")
    assert d.front() is node
    assert list(reversed(d)) == ["b", "x", "a", "y"]


def test_insert_with_none_position():
    d = _filled(["m"])
    d.insert_after(None, "back")
    d.insert_before(None, "front")
    assert list(d) == ["front", "m", "back"]


def test_erase_middle_front_back():
    d = DoublyLinkedList()
    nodes = [d.push_back(v) for v in "abcde"]
    assert d.erase(nodes[2]) == "c"
    assert list(d) == ["a", "b", "d", "e"]
    assert d.erase(nodes[0]) == "a"
    assert d.erase(nodes[4]) == "e"
    assert list(d) == ["b", "d"]
    assert list(reversed(d)) == ["d", "b"]
    d.erase(nodes[1])
    d.erase(nodes[3])
    assert d.is_empty()


def test_clear_empties():
    d = _filled(range(5))
    d.clear()
    assert d.is_empty()
    assert len(d) == 0
    assert list(d) == []


def test_pprint_format(capsys):
    d = _filled([1, 2])
    d.pprint()
    assert capsys.readouterr().out == "NULL <= [1] <==> [2] => NULL\n"


def test_pprint_empty_and_custom_render(capsys):
    DoublyLinkedList().pprint()
    assert capsys.readouterr().out == "NULL <=  => NULL\n"
    _filled(["q"]).pprint(str)
    assert capsys.readouterr().out == "NULL <= q => NULL\n"