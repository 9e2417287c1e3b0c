"""Tests for fee value display formatting."""

import pytest

from feetracker.display import TIER_INFO, format_fee_value, tier_info
from feetracker.models.types import Asset, FeeTier


@pytest.mark.parametrize(
    ("asset", "value", "unit", "expected"),
    [
        (Asset.ETHEREUM, 25.0, "gwei", "25 gwei"),
        (Asset.ETHEREUM, 12.5, "gwei", "12.5 gwei"),
        (Asset.BITCOIN, 10.0, "sat/vB", "10 sat/vB"),
        (Asset.SOLANA, 0.000005, "SOL", "5 lamports"),
        (Asset.SOLANA, 0.000015, "SOL", "15 lamports"),
        ("solana", 0.0, "SOL", "0 lamports"),
    ],
)
def test_format_fee_value(asset, value, unit, expected):
    assert format_fee_value(asset, value, unit) == expected


class TestTierInfo:
    """Tests for the per-tier presentation metadata."""

    def test_every_tier_has_info(self):
        assert set(TIER_INFO) == set(FeeTier)

    @pytest.mark.parametrize(
        ("tier", "description", "confirmation_time"),
        [
            (FeeTier.SLOW, "Save money", "~5 min"),
            (FeeTier.STANDARD, "Balanced", "~2 min"),
            ("fast", "Quick confirm", "~30s"),
            ("instant", "Emergency", "~15s"),
        ],
    )
    def test_tier_info(self, tier, description, confirmation_time):
        info = tier_info(tier)

        assert info.description == description
        assert info.confirmation_time == confirmation_time

    def test_unknown_tier(self):
        with pytest.raises(ValueError):
            tier_info("ludicrous")
