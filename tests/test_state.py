import pytest

from tracestyler.core.state import (
    ElementState,
    ElementStateStyling,
    InteractionContext,
    resolve_state,
)


@pytest.mark.parametrize(
    "selected, highlighted, key, expected",
    [
        (None, None, "in", ElementState.NORMAL),
        (None, "in", "in", ElementState.HIGHLIGHTED),
        (None, "in", "out", ElementState.NORMAL),
        ("in", None, "in", ElementState.SELECTED),
        ("in", None, "out", ElementState.MUTED),
        # selection dominates any highlight
        ("in", "in", "in", ElementState.SELECTED),
        ("in", "out", "out", ElementState.MUTED),
        ("in", "out", "in", ElementState.SELECTED),
        ("gone", None, "in", ElementState.MUTED),
    ],
)
def test_resolve_state(selected, highlighted, key, expected):
    context = InteractionContext(selected_key=selected, highlighted_key=highlighted)
    assert resolve_state(key, context) is expected


def test_resolve_state_without_context():
    assert resolve_state("in", None) is ElementState.NORMAL
    assert InteractionContext().is_empty
    assert not InteractionContext(highlighted_key="in").is_empty


def test_only_one_selected_column():
    context = InteractionContext(selected_key="b")
    states = [resolve_state(key, context) for key in ("a", "b", "c")]
    assert states.count(ElementState.SELECTED) == 1
    assert states.count(ElementState.MUTED) == 2


def test_styling_for_state_and_dict():
    styling = ElementStateStyling(normal=1, highlighted=2, selected=3, muted=4)
    assert styling.for_state(ElementState.SELECTED) == 3
    assert styling.for_state("muted") == 4
    assert styling.to_dict() == {"normal": 1, "highlighted": 2, "selected": 3, "muted": 4}


def test_styling_map():
    styling = ElementStateStyling.uniform(10)
    doubled = styling.map(lambda state, value: value * 2 if state is ElementState.MUTED else value)
    assert doubled.to_dict() == {"normal": 10, "highlighted": 10, "selected": 10, "muted": 20}


def test_from_mapping_requires_all_states():
    with pytest.raises(ValueError, match="missing states: muted"):
        ElementStateStyling.from_mapping({"normal": 1, "highlighted": 1, "selected": 1})
    with pytest.raises(ValueError, match="Unknown states"):
        ElementStateStyling.from_mapping(
            {"normal": 1, "highlighted": 1, "selected": 1, "muted": 1, "hover": 1}
        )


def test_unknown_state_name():
    with pytest.raises(ValueError):
        ElementStateStyling.uniform(1).for_state("hover")
