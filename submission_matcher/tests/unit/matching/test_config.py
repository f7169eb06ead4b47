"""Unit tests for MatcherConfig."""

import pytest

from submission_matcher.matching import MatcherConfig, MatcherConfigError


class TestMatcherConfig:
    """Tests for MatcherConfig dataclass."""

    def test_defaults(self) -> None:
        """Defaults are the standard scoring constants."""
        config = MatcherConfig()

        assert (config.min_exact_length, config.max_exact_length) == (10, 20)
        assert config.min_long_length == 30
        assert config.approximate_threshold == 0.8
        assert config.fallback_window == 30
        assert config.fallback_policy == "first"
        assert (config.exact_significance, config.long_significance) == (0.2, 0.3)
        assert config.report_raw is False

    def test_fallback_stride(self) -> None:
        """Stride is a quarter window, never below 1."""
        assert MatcherConfig().fallback_stride == 7
        assert MatcherConfig(fallback_window=3).fallback_stride == 1

    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_exact_length": 0},
            {"min_exact_length": 21},
            {"min_long_length": 0},
            {"fallback_window": 0},
            {"fallback_stride_divisor": 0},
            {"fallback_policy": "last"},
            {"approximate_threshold": 0.0},
            {"exact_significance": 1.5},
            {"long_significance": -0.1},
        ],
    )
    def test_invalid_values_raise(self, overrides: dict) -> None:
        """Out-of-range values raise MatcherConfigError."""
        with pytest.raises(MatcherConfigError):
            MatcherConfig(**overrides)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_exact_length": 10.0},
            {"max_exact_length": "20"},
            {"min_long_length": True},
            {"fallback_window": 30.5},
            {"fallback_stride_divisor": None},
            {"report_raw": "false"},
            {"report_raw": 1},
            {"exact_significance": "0.2"},
            {"long_significance": False},
            {"fallback_policy": ["first"]},
        ],
    )
    def test_wrong_types_raise(self, overrides: dict) -> None:
        """Values of the wrong type raise MatcherConfigError."""
        with pytest.raises(MatcherConfigError):
            MatcherConfig(**overrides)

    def test_integer_fractions_accepted(self) -> None:
        """Whole-number fractions are valid numbers."""
        assert MatcherConfig(approximate_threshold=1).approximate_threshold == 1

    def test_from_dict_ignores_none(self) -> None:
        """None values fall back to defaults."""
        config = MatcherConfig.from_dict({"report_raw": True, "fallback_policy": None})
        assert config.report_raw is True
        assert config.fallback_policy == "first"

    def test_from_dict_rejects_unknown_keys(self) -> None:
        """Unknown keys raise MatcherConfigError."""
        with pytest.raises(MatcherConfigError, match="bogus"):
            MatcherConfig.from_dict({"bogus": 1})

    def test_to_dict_round_trip(self) -> None:
        """to_dict output rebuilds an equal config."""
        config = MatcherConfig(fallback_policy="best_ratio", min_long_length=40)
        assert MatcherConfig.from_dict(config.to_dict()) == config
