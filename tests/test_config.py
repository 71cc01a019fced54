"""Tests for connector option resolution."""

import pytest

from arrowline import Box, ConfigurationError, ConnectorConfig, resolve_config
from arrowline.config import parse_anchor, parse_kind, parse_tip
from arrowline.models import CENTER, RelativeAnchor, RoutingKind, TipKind, TipSpec


class TestDefaults:
    def test_defaults(self):
        config = resolve_config()

        assert config.width == 2
        assert config.color == "black"
        assert config.kind is RoutingKind.DIRECT
        assert config.start_tip.kind is TipKind.NONE
        assert config.end_tip == TipSpec(TipKind.ARROW, flip=False)
        assert config.start_anchor == CENTER
        assert config.end_anchor == CENTER
        assert config.label is None
        assert config.parent is None

    def test_start_tip_flip_toggled_once(self):
        assert resolve_config(start_tip="arrow").start_tip == TipSpec(TipKind.ARROW, flip=True)
        assert resolve_config(
            start_tip={"kind": "arrow", "flip": True}
        ).start_tip == TipSpec(TipKind.ARROW, flip=False)

    def test_unset_start_matches_default_config(self):
        assert resolve_config().start_tip == ConnectorConfig().start_tip

    def test_none_means_default(self):
        assert resolve_config(end_tip=None, width=None) == resolve_config()


class TestPurity:
    def test_caller_mapping_not_mutated(self):
        options = {"width": 3, "end_tip": "circle"}
        snapshot = dict(options)

        config = resolve_config(options)

        assert options == snapshot
        assert config.width == 3
        assert config.end_tip.kind is TipKind.CIRCLE

    def test_resolved_config_is_returned_as_is(self):
        config = resolve_config(start_tip="arrow")
        assert resolve_config(config) is config

    def test_overrides_on_resolved_config(self):
        config = resolve_config(start_tip="arrow", color="red")
        changed = resolve_config(config, width=4)

        assert changed.width == 4
        assert changed.color == "red"
        assert changed.start_tip == config.start_tip
        assert config.width == 2

    def test_config_is_frozen(self):
        config = resolve_config()
        with pytest.raises(AttributeError):
            config.width = 5


class TestParsing:
    def test_aliases(self):
        parent = Box(x=1, y=2, width=3, height=4)
        config = resolve_config(
            {"line_kind": "orthogonal", "from_pos": (1, 0.5), "to_pos": {"x": 0, "y": 0.5}},
            parent=parent,
            label="x",
        )
        assert config.kind is RoutingKind.ORTHOGONAL
        assert config.start_anchor == RelativeAnchor(1, 0.5)
        assert config.end_anchor == RelativeAnchor(0, 0.5)
        assert config.parent is parent
        assert config.label == "x"

    def test_overrides_beat_options(self):
        assert resolve_config({"color": "red"}, color="blue").color == "blue"

    @pytest.mark.parametrize("value", ["Arrow", "ARROW", TipKind.ARROW, TipSpec(TipKind.ARROW)])
    def test_tip_kind_case_insensitive(self, value):
        assert parse_tip(value).kind is TipKind.ARROW

    def test_kind_parsing(self):
        assert parse_kind("Orthogonal") is RoutingKind.ORTHOGONAL
        assert parse_kind(RoutingKind.DIRECT) is RoutingKind.DIRECT

    def test_anchor_parsing(self):
        assert parse_anchor([0.25, "0.75"]) == RelativeAnchor(0.25, 0.75)


class TestErrors:
    def test_unknown_tip_kind_is_fatal(self):
        with pytest.raises(ConfigurationError, match="star"):
            resolve_config(end_tip="star")

    @pytest.mark.parametrize("flip", ["false", "true", 0, 1, None])
    def test_flip_must_be_boolean(self, flip):
        with pytest.raises(ConfigurationError, match="flip"):
            parse_tip({"kind": "arrow", "flip": flip})

    def test_boolean_flip_accepted(self):
        assert parse_tip({"kind": "arrow", "flip": True}) == TipSpec(TipKind.ARROW, flip=True)

    def test_unknown_tip_option(self):
        with pytest.raises(ConfigurationError):
            parse_tip({"kind": "arrow", "size": 3})

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError, match="thickness"):
            resolve_config(thickness=3)

    def test_unknown_kind(self):
        with pytest.raises(ConfigurationError):
            resolve_config(kind="curved")

    @pytest.mark.parametrize("width", [0, -1, "wide", float("nan"), float("inf")])
    def test_invalid_width(self, width):
        with pytest.raises(ConfigurationError):
            resolve_config(width=width)

    @pytest.mark.parametrize("anchor", [(1,), {"x": 1}, "middle", 42])
    def test_invalid_anchor(self, anchor):
        with pytest.raises(ConfigurationError):
            parse_anchor(anchor)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            resolve_config(kind="curved")
