from dataclasses import FrozenInstanceError

import pytest

from geometer import (
    ConfigurationError,
    DegeneratePolicy,
    EarNotFoundError,
    ForeignIdError,
    GeometerError,
    HullAlgorithm,
    InputTooLargeError,
    KernelConfig,
)
from geometer.core import DEFAULT_CONFIG, coerce_enum, resolve_config


class TestKernelConfig:
    """Tests for KernelConfig validation and defaults."""

    def test_defaults(self):
        config = KernelConfig()
        assert config.degenerate_policy == DegeneratePolicy.EXTREMES
        assert config.max_vertices is None
        assert config.validate_simple is False

    def test_policy_from_string(self):
        config = KernelConfig(degenerate_policy="raise")
        assert config.degenerate_policy == DegeneratePolicy.RAISE

    def test_unknown_policy(self):
        with pytest.raises(ConfigurationError):
            KernelConfig(degenerate_policy="ignore")

    @pytest.mark.parametrize("limit", [0, 2, -5])
    def test_max_vertices_too_small(self, limit):
        with pytest.raises(ConfigurationError):
            KernelConfig(max_vertices=limit)

    def test_check_size(self):
        config = KernelConfig(max_vertices=5)
        config.check_size(5)
        with pytest.raises(InputTooLargeError):
            config.check_size(6)

    def test_resolve_config(self):
        assert resolve_config(None) is DEFAULT_CONFIG
        custom = KernelConfig(max_vertices=10)
        assert resolve_config(custom) is custom

    def test_shared_default_cannot_be_mutated(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.max_vertices = 3
        with pytest.raises(FrozenInstanceError):
            resolve_config(None).degenerate_policy = DegeneratePolicy.RAISE
        assert DEFAULT_CONFIG.max_vertices is None
        assert DEFAULT_CONFIG.degenerate_policy == DegeneratePolicy.EXTREMES

    def test_configs_are_hashable(self):
        assert KernelConfig(degenerate_policy="raise") == KernelConfig(degenerate_policy=DegeneratePolicy.RAISE)
        assert len({KernelConfig(), KernelConfig()}) == 1


class TestCoerceEnum:
    """Tests for enum coercion from strings."""

    def test_enum_passthrough(self):
        assert coerce_enum(HullAlgorithm.QUICK_HULL, HullAlgorithm) is HullAlgorithm.QUICK_HULL

    def test_string_value(self):
        assert coerce_enum("graham_scan", HullAlgorithm) == HullAlgorithm.GRAHAM_SCAN

    def test_unknown_value_lists_choices(self):
        with pytest.raises(ConfigurationError) as exc_info:
            coerce_enum("jarvis", HullAlgorithm)
        assert "gift_wrapping" in str(exc_info.value)


class TestErrorHierarchy:
    """Tests for the exception family."""

    def test_all_errors_share_base(self):
        assert issubclass(EarNotFoundError, GeometerError)
        assert issubclass(ConfigurationError, GeometerError)
        assert issubclass(ForeignIdError, GeometerError)

    def test_ear_not_found_message(self):
        error = EarNotFoundError(5, "Self-intersection[1 1]")
        assert error.remaining == 5
        assert "5 vertices remaining" in str(error)
        assert "Self-intersection" in str(error)

    def test_foreign_id_message(self):
        error = ForeignIdError(42)
        assert str(error) == "vertex id 42 does not belong to this topology"
        assert isinstance(error, KeyError)
