import pytest

from gencoll.sll import SinglyLinkedList


def test_push_back_keeps_order():
    lst = SinglyLinkedList()
    for v in (1, 2, 3):
        lst.push_back(v)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3
    assert lst.front() == 1
    assert lst.back() == 3


def test_push_front_reverses():
    lst = SinglyLinkedList()
    for v in (1, 2, 3):
        lst.push_front(v)
    assert list(lst) == [3, 2, 1]
    assert lst.back() == 1


def test_stack_and_queue_use():
    stack = SinglyLinkedList()
    queue = SinglyLinkedList()
    for v in (10, 20, 30):
        stack.push_front(v)
        queue.push_back(v)
    assert [stack.pop_front() for _ in range(3)] == [30, 20, 10]
    assert [queue.pop_front() for _ in range(3)] == [10, 20, 30]
    assert stack.is_empty()
    assert queue.is_empty()


def test_push_back_after_emptying():
    lst = SinglyLinkedList()
    lst.push_back(1)
    lst.pop_front()
    lst.push_back(2)
    assert list(lst) == [2]
    assert lst.front() == lst.back() == 2


def test_empty_errors():
    lst = SinglyLinkedList()
    with pytest.raises(IndexError):
        lst.pop_front()
    with pytest.raises(IndexError):
        lst.front()
    with pytest.raises(IndexError):
        lst.back()


def test_on_remove_called_on_pop_and_clear():
    removed = []
    lst = SinglyLinkedList(removed.append)
    for v in "abc":
        lst.push_back(v)
    assert lst.pop_front() == "a"
    lst.clear()
    assert removed == ["a", "b", "c"]
    assert lst.is_empty()
    assert len(lst) == 0


def test_foreach_stops_on_true():
    lst = SinglyLinkedList()
    for v in range(10):
        lst.push_back(v)
    seen = []

    def op(value):
        seen.append(value)
        return value == 3

    lst.foreach(op)
    assert seen == [0, 1, 2, 3]
    assert list(lst) == list(range(10))
    assert len(lst) == 10


def test_foreach_visits_all_values_in_order():
    lst = SinglyLinkedList()
    for v in "xyz":
        lst.push_back(v)
    seen = []

    def op(value):
        seen.append(value)
        return False

    lst.foreach(op)
    assert seen == list(lst) == ["x", "y", "z"]


def test_pprint_format(capsys):
    lst = SinglyLinkedList()
    lst.push_back(1)
    lst.push_back(2)
    lst.pprint()
    assert capsys.readouterr().out == "[1] => [2] => NULL\n"


def test_pprint_empty_and_custom_render(capsys):
    lst = SinglyLinkedList()
    lst.pprint()
    lst.push_back(7)
    lst.pprint(lambda v: f"<{v}>")
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "NULL"
    assert out[1].startswith("<7> => ")