import pytest

from hashviz.cursor import Cursor, Entry


def _buckets():
    # bucket 0: empty, bucket 1: a -> b, bucket 2: empty, bucket 3: c, bucket 4: empty
    b = Entry("b", 2)
    a = Entry("a", 1, b)
    c = Entry("c", 3)
    return [None, a, None, c, None]


def _begin(buckets):
    for index, head in enumerate(buckets):
        if head is not None:
            return Cursor(buckets, head, index)
    return Cursor(buckets, None, len(buckets))


def _walk(cursor):
    items = []
    while not cursor.at_end:
        items.append(cursor.item)
        cursor.advance()
    return items


def test_walk_visits_chains_in_bucket_order():
    buckets = _buckets()
    assert _walk(_begin(buckets)) == [("a", 1), ("b", 2), ("c", 3)]


def test_walk_single_bucket_chain():
    chain = Entry(1, 1, Entry(2, 2, Entry(30, 30)))
    buckets = [chain]
    assert _walk(_begin(buckets)) == [(1, 1), (2, 2), (30, 30)]


def test_empty_buckets_begin_is_end():
    buckets = [None, None, None]
    cursor = _begin(buckets)
    assert cursor.at_end
    assert cursor == Cursor(buckets, None, len(buckets))
    assert _walk(cursor) == []


def test_key_and_value_read_entry():
    buckets = _buckets()
    cursor = _begin(buckets)
    assert cursor.key == "a"
    assert cursor.value == 1
    assert cursor.item == ("a", 1)


def test_value_assignment_writes_through():
    buckets = _buckets()
    cursor = _begin(buckets)
    cursor.value = -2
    assert buckets[1].value == -2
    assert _begin(buckets).value == -2


def test_advance_returns_same_cursor():
    buckets = _buckets()
    cursor = _begin(buckets)
    result = cursor.advance()
    assert result is cursor
    assert cursor.key == "b"


def test_chained_advance_reaches_end():
    buckets = _buckets()
    cursor = _begin(buckets)
    cursor.advance().advance().advance()
    assert cursor.at_end
    assert cursor == Cursor(buckets, None, len(buckets))


def test_copy_is_independent():
    buckets = _buckets()
    cursor = _begin(buckets)
    saved = cursor.copy()
    cursor.advance()
    assert saved.key == "a"
    assert cursor.key == "b"
    assert saved != cursor


def test_postfix_style_copy_then_advance():
    buckets = _buckets()
    cursor = _begin(buckets)
    cursor.advance()
    before = cursor.copy()
    cursor.advance()
    assert before.key == "b"
    assert cursor.key == "c"


def test_equality_depends_on_entry_identity():
    buckets = _buckets()
    first = _begin(buckets)
    second = Cursor(buckets, buckets[1], 1)
    assert first == second
    assert hash(first) == hash(second)
    other = Cursor(buckets, Entry("a", 1), 1)
    assert first != other


def test_equality_with_non_cursor_is_false():
    buckets = _buckets()
    assert (_begin(buckets) == "a") is False


def test_cursors_usable_as_set_members():
    buckets = _buckets()
    seen = set()
    cursor = _begin(buckets)
    while not cursor.at_end:
        seen.add(cursor.copy())
        cursor.advance()
    assert len(seen) == 3


def test_dereference_end_raises():
    buckets = _buckets()
    end = Cursor(buckets, None, len(buckets))
    assert end.at_end is True
    with pytest.raises(IndexError):
        _ = end.key
    with pytest.raises(IndexError):
        _ = end.value
    with pytest.raises(IndexError):
        _ = end.item
    with pytest.raises(IndexError):
        end.value = 5
    assert end.at_end is True
    assert end.entry is None
    assert _walk(_begin(buckets)) == [("a", 1), ("b", 2), ("c", 3)]


def test_advance_end_raises():
    buckets = _buckets()
    end = Cursor(buckets, None, len(buckets))
    with pytest.raises(IndexError):
        end.advance()
    assert end.at_end is True


def test_bucket_tracks_position():
    buckets = _buckets()
    cursor = _begin(buckets)
    assert cursor.bucket == 1
    cursor.advance()
    assert cursor.bucket == 1
    cursor.advance()
    assert cursor.bucket == 3
    assert cursor.entry is buckets[3]