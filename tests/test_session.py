"""
Tests for the session-backed counter.
"""

from sessioncounter.session import COUNT_KEY, INT32_MAX, INT32_MIN, CounterSession, saturate


def test_absent_count_defaults_to_zero():
    assert CounterSession({}).count == 0


def test_increment_and_decrement_write_back():
    session = {}
    counter = CounterSession(session)

    assert counter.increment() == 1
    assert session[COUNT_KEY] == 1
    assert counter.decrement() == 0
    assert counter.decrement() == -1
    assert session[COUNT_KEY] == -1


def test_sequence_equals_algebraic_sum():
    session = {}
    counter = CounterSession(session)
    steps = [1, 1, -1, 1, -1, -1, -1, 1, 1, 1]

    for step in steps:
        counter.increment() if step > 0 else counter.decrement()

    assert counter.count == sum(steps)
    assert CounterSession(session).count == sum(steps)


def test_corrupt_values_are_treated_as_absent():
    for raw in ("7", "abc", 1.5, [1], {"n": 1}, True):
        counter = CounterSession({COUNT_KEY: raw})
        assert counter.count == 0, raw
        assert counter.increment() == 1


def test_saturates_at_int32_bounds():
    top = CounterSession({COUNT_KEY: INT32_MAX})
    assert top.increment() == INT32_MAX
    assert top.decrement() == INT32_MAX - 1

    bottom = CounterSession({COUNT_KEY: INT32_MIN})
    assert bottom.decrement() == INT32_MIN
    assert bottom.increment() == INT32_MIN + 1


def test_out_of_range_stored_value_is_clamped():
    assert CounterSession({COUNT_KEY: 2 ** 40}).count == INT32_MAX
    assert CounterSession({COUNT_KEY: -(2 ** 40)}).count == INT32_MIN
    assert saturate(5) == 5


def test_custom_key_leaves_other_entries_alone():
    session = {"other": "value"}
    counter = CounterSession(session, key="clicks")
    counter.increment()

    assert session == {"other": "value", "clicks": 1}
