import pytest

from tracestyler.core.builders import bar_style, line_style
from tracestyler.core.columns import ColumnSpec
from tracestyler.core.scheme import ColorScheme
from tracestyler.core.sources import Callback, SchemeHandle, StaticTable, resolve, resolve_columns
from tracestyler.core.state import ElementState, ElementStateStyling, InteractionContext
from tracestyler.errors import (
    MissingColumnStyleError,
    StyleCallbackError,
    StyleShapeError,
    UnknownColumnError,
)

PAIRED_FIRST = "#a6cee3"
PAIRED_SECOND = "#1f78b4"


def _four_states(normal, highlighted=None, selected=None, muted=None):
    return {
        "normal": normal,
        "highlighted": highlighted or normal,
        "selected": selected or normal,
        "muted": muted or normal,
    }


# --- scheme handle ----------------------------------------------------------


def test_scenario_no_interaction(in_out_scheme):
    source = SchemeHandle(in_out_scheme)
    assert resolve(source, "in", encoding="bar") == {"fill": PAIRED_FIRST, "opacity": 0.8}
    assert resolve(source, "out", encoding="bar") == {"fill": PAIRED_SECOND, "opacity": 0.8}


def test_scenario_selection(in_out_scheme):
    source = SchemeHandle(in_out_scheme)
    context = InteractionContext(selected_key="in")
    selected = resolve(source, "in", context, encoding="bar")
    muted = resolve(source, "out", context, encoding="bar")
    assert selected["opacity"] == pytest.approx(1.0)
    assert muted["opacity"] == pytest.approx(0.5)
    assert muted["fill"] == "#9e9e9e"


def test_scenario_highlight(in_out_scheme):
    source = SchemeHandle(in_out_scheme)
    context = InteractionContext(highlighted_key="out")
    normal_in = resolve(source, "in", encoding="line")
    assert resolve(source, "in", context, encoding="line") == normal_in
    out = resolve(source, "out", context, encoding="line")
    assert out["stroke"] == "#579ac7"
    assert out["stroke"] != resolve(source, "out", encoding="line")["stroke"]


def test_scheme_legend_and_axis(in_out_scheme):
    source = SchemeHandle(in_out_scheme)
    item = resolve(source, "out", encoding="legend", legend_type="dot")
    assert item["symbol"]["fill"] == PAIRED_SECOND
    assert resolve(source, "out", encoding="axis") == {"labelColor": PAIRED_SECOND}


def test_scheme_area(in_out_scheme):
    style = resolve(SchemeHandle(in_out_scheme), "in", encoding="area")
    assert set(style) == {"line", "area"}
    assert style["area"]["fill"] == PAIRED_FIRST


def test_scheme_unknown_column(in_out_scheme):
    with pytest.raises(UnknownColumnError):
        resolve(SchemeHandle(in_out_scheme), "pressure", encoding="line")


def test_unknown_encoding(in_out_scheme):
    with pytest.raises(ValueError):
        resolve(SchemeHandle(in_out_scheme), "in", encoding="pie")


def test_cross_encoding_consistency(in_out_scheme):
    source = SchemeHandle(in_out_scheme)
    contexts = [
        None,
        InteractionContext(highlighted_key="in"),
        InteractionContext(selected_key="in"),
        InteractionContext(selected_key="out", highlighted_key="in"),
    ]
    for context in contexts:
        for key in in_out_scheme.keys:
            bar = resolve(source, key, context, encoding="bar")
            swatch = resolve(source, key, context, encoding="legend")["symbol"]
            assert swatch["fill"] == bar["fill"]
            assert swatch["opacity"] == bar["opacity"]
            line = resolve(source, key, context, encoding="line")
            line_symbol = resolve(source, key, context, encoding="legend", legend_type="line")
            assert line_symbol["symbol"]["stroke"] == line["stroke"]


# --- static table -----------------------------------------------------------


def test_static_table_by_state():
    source = StaticTable(
        {"in": _four_states({"fill": "red", "opacity": 0.8}, muted={"fill": "grey", "opacity": 0.5})}
    )
    assert resolve(source, "in", encoding="bar") == {"fill": "red", "opacity": 0.8}
    muted = resolve(source, "in", InteractionContext(selected_key="out"), encoding="bar")
    assert muted == {"fill": "grey", "opacity": 0.5}


def test_static_table_accepts_styling_objects():
    styling = ElementStateStyling.uniform({"fill": "red", "opacity": 1.0})
    source = StaticTable({"in": styling})
    assert source.kind == "static"
    assert resolve(source, "in", encoding="scatter") == {"fill": "red", "opacity": 1.0}


def test_static_table_missing_column():
    source = StaticTable({"in": ElementStateStyling.uniform({"fill": "red"})})
    with pytest.raises(MissingColumnStyleError) as excinfo:
        resolve(source, "out", encoding="bar")
    assert excinfo.value.key == "out"


def test_static_table_is_not_consulted_for_defaults():
    source = StaticTable({"in": ElementStateStyling.uniform({"fill": "red"})})
    assert resolve(source, "in", encoding="bar") == {"fill": "red"}


def test_static_composite_area():
    source = StaticTable(
        {
            "in": {
                "line": _four_states({"stroke": "red"}),
                "area": _four_states({"fill": "pink"}, selected={"fill": "red"}),
            }
        }
    )
    style = resolve(source, "in", InteractionContext(selected_key="in"), encoding="area")
    assert style == {"line": {"stroke": "red"}, "area": {"fill": "red"}}


def test_static_composite_missing_part():
    source = StaticTable({"in": {"line": _four_states({"stroke": "red"})}})
    with pytest.raises(MissingColumnStyleError, match=r"in\.area"):
        resolve(source, "in", encoding="area")


def test_static_legend_with_only_symbol():
    source = StaticTable({"in": {"symbol": ElementStateStyling.uniform({"fill": "red"})}})
    assert resolve(source, "in", encoding="legend") == {"symbol": {"fill": "red"}}


def test_static_composite_entry_for_flat_encoding():
    source = StaticTable(
        {"in": {"line": _four_states({"stroke": "red"}), "area": _four_states({"fill": "red"})}}
    )
    with pytest.raises(StyleShapeError) as excinfo:
        resolve(source, "in", encoding="bar")
    assert excinfo.value.key == "in"
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("encoding", ["area", "legend"])
def test_static_flat_entry_for_composite_encoding(encoding):
    source = StaticTable({"in": _four_states({"fill": "red"})})
    with pytest.raises(StyleShapeError, match=encoding):
        resolve(source, "in", encoding=encoding)


def test_static_area_entry_for_legend():
    source = StaticTable(
        {"in": {"line": _four_states({"stroke": "red"}), "area": _four_states({"fill": "red"})}}
    )
    with pytest.raises(StyleShapeError, match="unknown parts line, area"):
        resolve(source, "in", encoding="legend")


def test_static_table_rejects_incomplete_states():
    with pytest.raises(ValueError):
        StaticTable({"in": {"normal": {"fill": "red"}, "muted": {"fill": "grey"}}})


def test_static_table_rejects_non_mapping():
    with pytest.raises(TypeError):
        StaticTable({"in": "red"})


# --- callback ---------------------------------------------------------------


def test_callback_receives_context_and_key():
    calls = []

    def style(subject, key):
        calls.append((subject, key))
        return {"fill": "orange", "opacity": 1.0}

    context = InteractionContext(selected_key="in")
    result = resolve(Callback(style), "in", context, encoding="bar")
    assert result == {"fill": "orange", "opacity": 1.0}
    assert calls == [(context, "in")]


def test_callback_receives_datum_when_given():
    seen = []
    resolve(
        Callback(lambda subject, key: seen.append(subject) or {"fill": "red"}),
        "in",
        encoding="scatter",
        datum={"time": 1.0, "value": 3},
    )
    assert seen == [{"time": 1.0, "value": 3}]


def test_callback_without_context_gets_empty_context():
    seen = []
    resolve(Callback(lambda subject, key: seen.append(subject) or {}), "in", encoding="bar")
    assert seen == [InteractionContext()]


def test_callback_result_replaces_defaults():
    result = {"fill": "orange"}
    resolved = resolve(Callback(lambda subject, key: result), "in", encoding="bar")
    assert resolved is result
    assert "opacity" not in resolved


def test_callback_called_every_resolution():
    counter = {"n": 0}

    def style(subject, key):
        counter["n"] += 1
        return {"stroke": "red"}

    source = Callback(style)
    resolve(source, "in", encoding="line")
    resolve(source, "in", encoding="line")
    assert counter["n"] == 2


def test_callback_exception_wrapped():
    def style(subject, key):
        raise KeyError("boom")

    with pytest.raises(StyleCallbackError) as excinfo:
        resolve(Callback(style), "in", encoding="line")
    assert excinfo.value.key == "in"
    assert isinstance(excinfo.value.__cause__, KeyError)


@pytest.mark.parametrize(
    "encoding, result",
    [
        ("bar", None),
        ("bar", "red"),
        ("bar", {"opacity": "high"}),
        ("area", {"line": {"stroke": "red"}}),
        ("axis", {}),
    ],
)
def test_callback_malformed_result(encoding, result):
    with pytest.raises(StyleCallbackError, match="malformed"):
        resolve(Callback(lambda subject, key: result), "in", encoding=encoding)


def test_callback_legend_with_only_symbol():
    result = {"symbol": {"fill": "red"}}
    assert resolve(Callback(lambda s, k: result), "in", encoding="legend") is result


def test_callback_extra_keys_allowed_by_default():
    result = {"fill": "red", "strokeLinecap": "round"}
    assert resolve(Callback(lambda s, k: result), "in", encoding="bar") == result


def test_callback_extra_keys_rejected_in_strict_mode(monkeypatch):
    from tracestyler import flags

    monkeypatch.setenv(flags.ENV_VAR, "strict_callbacks")
    flags.reload()
    with pytest.raises(StyleCallbackError, match="strokeLinecap"):
        resolve(Callback(lambda s, k: {"fill": "red", "strokeLinecap": "round"}), "in", encoding="bar")


def test_callback_requires_callable():
    with pytest.raises(TypeError):
        Callback("not callable")


# --- resolve_columns --------------------------------------------------------


def test_resolve_columns_preserves_order(in_out_scheme):
    styles = resolve_columns(SchemeHandle(in_out_scheme), ["out", "in"], encoding="bar")
    assert list(styles) == ["out", "in"]
    assert styles["in"]["fill"] == PAIRED_FIRST


def test_resolve_columns_propagates_failure():
    source = StaticTable({"in": ElementStateStyling.uniform({"fill": "red"})})
    with pytest.raises(MissingColumnStyleError):
        resolve_columns(source, ["in", "out"], encoding="bar")


def test_resolve_matches_builders_for_custom_columns():
    scheme = ColorScheme([ColumnSpec(key="a", color="#123456", dashed=True)])
    context = InteractionContext(highlighted_key="a")
    column = scheme.column("a")
    assert resolve(SchemeHandle(scheme), "a", context, encoding="line") == line_style(
        "#123456", column, ElementState.HIGHLIGHTED
    )
    assert resolve(SchemeHandle(scheme), "a", encoding="bar") == bar_style(
        "#123456", column, ElementState.NORMAL
    )
