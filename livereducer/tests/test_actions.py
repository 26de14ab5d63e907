"""
Tests for action creators and action records.
"""

import pytest

from livereducer.core import ids
from livereducer.core.actions import Action, action_type, batch, create_action, to_type
from livereducer.core.errors import (
    InvalidActionTypeError,
    InvalidDispatchTargetError,
    InvalidHandlerError,
)
from livereducer.tests.store import Store


def test_generated_types_are_unique():
    """Auto-typed creators never share a type."""
    types = {create_action().get_type() for _ in range(1000)}
    assert len(types) == 1000


def test_explicit_type_used_verbatim():
    add = create_action("ADD_TODO")
    assert add.get_type() == "ADD_TODO"
    assert str(add) == "ADD_TODO"
    assert add.to_key() == "ADD_TODO"


def test_default_payload_is_first_argument():
    add = create_action()
    assert add(40) == Action(type=add.get_type(), payload=40)
    assert add(1, 2, 3).payload == 1
    assert add().payload is None


def test_payload_reducer_receives_all_arguments():
    add = create_action("ADD", lambda a, b: a + b)
    assert add(40, 2).payload == 42


def test_callable_first_argument_is_payload_reducer():
    double = create_action(lambda n: n * 2)
    assert double(21).payload == 42
    assert double.get_type().startswith("[")


def test_meta_only_present_with_meta_reducer():
    plain = create_action()
    with_meta = create_action(None, None, lambda n: n * 2)

    assert plain(3).meta is None
    action = with_meta(3)
    assert action.payload == 3
    assert action.meta == 6


def test_equality_follows_type_string():
    a = create_action("SAME")
    b = create_action("SAME")
    c = create_action()

    assert a == b
    assert a == "SAME"
    assert "SAME" == a
    assert a != c
    assert hash(a) == hash("SAME")


def test_creator_and_string_share_dict_slot():
    add = create_action()
    table = {add: "handler"}
    assert table[add.get_type()] == "handler"


def test_invalid_explicit_types_rejected():
    with pytest.raises(InvalidActionTypeError):
        create_action("")
    with pytest.raises(InvalidActionTypeError):
        create_action(5)


def test_non_callable_reducers_rejected():
    with pytest.raises(InvalidHandlerError):
        create_action("X", payload_reducer=5)
    with pytest.raises(InvalidHandlerError):
        create_action("X", meta_reducer="meta")


def test_assign_to_store_dispatches():
    seen = []

    def reducer(state=0, action=None):
        if action is not None:
            seen.append(action)
        return state

    store = Store(reducer)
    add = create_action().assign_to(store)

    assert add.assigned()
    action = add(5)
    assert seen == [action]


def test_assign_to_many_targets_and_callables():
    first, second = [], []
    ping = create_action("PING").assign_to([first.append, second.append])

    ping(1)
    assert first == second == [Action(type="PING", payload=1)]


def test_raw_never_dispatches():
    seen = []
    ping = create_action().assign_to(seen.append)

    ping.raw(1)
    assert seen == []


def test_invalid_target_keeps_previous_binding():
    seen = []
    ping = create_action().assign_to(seen.append)

    with pytest.raises(InvalidDispatchTargetError):
        ping.assign_to([seen.append, object()])

    ping(1)
    assert len(seen) == 1


def test_unassigned_creator_does_not_dispatch():
    assert not create_action().assigned()


def test_batch_collects_arguments():
    a, b = create_action()(1), create_action()(2)
    assert batch.get_type() == "BATCH"
    assert batch(a, b).payload == (a, b)


def test_to_type_coercion():
    add = create_action("ADD")
    assert to_type("ADD") == "ADD"
    assert to_type(add) == "ADD"
    for value in ("", 1, 0.5, True, None, {}, [], object()):
        assert to_type(value) is None


def test_action_type_reads_records_mappings_and_objects():
    class Custom:
        type = "CUSTOM"

    assert action_type(Action(type="A")) == "A"
    assert action_type({"type": "B"}) == "B"
    assert action_type(Custom()) == "CUSTOM"
    assert action_type({"type": create_action("C")}) == "C"
    assert action_type(None) is None
    assert action_type({}) is None
    assert action_type(42) is None


def test_next_type_is_monotonic():
    first = ids.next_type()
    second = ids.next_type()
    assert int(first[1:-1]) < int(second[1:-1])
