"""
Test: Catalog and Views
Verifies the registry lookups, the shipped tables, and read-only view helpers.
"""

import pytest

from ai_company_sim import data
from ai_company_sim.config import Category, UpgradeType
from ai_company_sim.core.catalog import (
    CATALOG, Catalog, Effects, FundingRound, ModelSpec, UpgradeSpec,
    resolve_category,
)
from ai_company_sim.core.state import create_default_state
from ai_company_sim.core.transactions import start_research
from ai_company_sim.core.views import (
    ResearchStatus,
    describe_model,
    format_currency,
    format_number,
    get_active_model,
    get_available_funding,
    get_infrastructure,
    research_status,
)


# =============================================================================
# REGISTRY
# =============================================================================

class TestCatalog:
    """Tests for catalog construction and lookup."""

    def test_default_catalog_has_every_category(self):
        for category in Category:
            assert len(CATALOG.get_model_list(category)) > 0
            assert CATALOG.get_model_list(category.value) == CATALOG.get_model_list(category)

    def test_default_catalog_has_every_upgrade_type(self):
        for upgrade_type in UpgradeType:
            assert len(CATALOG.get_upgrades(upgrade_type)) > 0

    def test_lookup_by_position_and_id(self):
        model = CATALOG.get_model("language", 0)
        assert model.id == "gpt-1"
        assert CATALOG.get_model_by_id("gpt-1") is model
        assert CATALOG.get_model("language", len(data.LANGUAGE_MODELS)) is None
        assert CATALOG.get_model("language", -1) is None
        assert CATALOG.get_model("language", True) is None
        assert CATALOG.get_model("music", 0) is None
        assert CATALOG.get_model_by_id("missing") is None

    def test_integral_float_position_accepted(self):
        """Test 1.0 resolves like 1 while fractional positions do not."""
        assert CATALOG.get_model("language", 1.0) is CATALOG.get_model("language", 1)
        assert CATALOG.get_model("language", 1.5) is None
        assert CATALOG.get_model("language", float("nan")) is None
        assert CATALOG.get_model("language", "1") is None

    def test_table_rows_become_specs(self):
        """Test that absent effect keys stay absent."""
        gpt1 = CATALOG.get_model_by_id("gpt-1")
        assert gpt1.category is Category.LANGUAGE
        assert gpt1.effects.revenue_boost == 400
        assert gpt1.effects.efficiency_boost is None
        assert CATALOG.get_upgrade("cloud-credits").upgrade_type is UpgradeType.PARTNERSHIPS
        assert CATALOG.get_funding_round("series-a").amount == 10000000

    def test_counts_match_tables(self):
        model_rows = sum(len(rows) for rows in data.MODELS_BY_CATEGORY.values())
        upgrade_rows = sum(len(rows) for rows in data.UPGRADES_BY_TYPE.values())
        assert len(CATALOG.models) == model_rows
        assert len(CATALOG.upgrades) == upgrade_rows
        assert len(CATALOG.funding_rounds) == len(data.FUNDING_ROUNDS)

    def test_first_model_is_reachable(self):
        """Test a new company can start the first language model."""
        state = create_default_state()
        assert start_research(state, "language", 0)

    def test_duplicate_ids_rejected(self):
        model = ModelSpec("dup", Category.AUDIO, "Dup", cost=1, compute_required=1, research_time=1)
        with pytest.raises(ValueError):
            Catalog([model, model])
        upgrade = UpgradeSpec("dup", UpgradeType.COMPUTE, "Dup", cost=1)
        with pytest.raises(ValueError):
            Catalog(upgrades=[upgrade, upgrade])
        funding_round = FundingRound("dup", "Dup", amount=1)
        with pytest.raises(ValueError):
            Catalog(funding_rounds=[funding_round, funding_round])

    @pytest.mark.parametrize("field_name", ["cost", "compute_required", "research_time"])
    def test_negative_model_values_rejected(self, field_name):
        values = {"cost": 1, "compute_required": 1, "research_time": 1}
        values[field_name] = -1
        model = ModelSpec("neg", Category.VIDEO, "Neg", **values)
        with pytest.raises(ValueError, match=field_name):
            Catalog([model])

    def test_negative_money_rejected(self):
        with pytest.raises(ValueError, match="cost"):
            Catalog(upgrades=[UpgradeSpec("neg", UpgradeType.REVENUE, "Neg", cost=-5)])
        with pytest.raises(ValueError, match="amount"):
            Catalog(funding_rounds=[FundingRound("debt", "Debt", amount=-600000)])
        with pytest.raises(ValueError):
            Catalog.from_tables({}, {}, [{"id": "debt", "amount": -1}])

    def test_zero_values_allowed(self):
        free = UpgradeSpec("free", UpgradeType.COMPUTE, "Free", cost=0)
        assert Catalog(upgrades=[free]).get_upgrade("free") is free

    def test_unknown_table_keys_rejected(self):
        with pytest.raises(ValueError):
            Catalog.from_tables({"music": []}, {}, [])
        with pytest.raises(ValueError):
            Catalog.from_tables({}, {"marketing": []}, [])

    def test_resolve_category(self):
        assert resolve_category("video") is Category.VIDEO
        assert resolve_category(Category.WORLD) is Category.WORLD
        assert resolve_category("music") is None

    def test_effects_present_in_order(self):
        effects = Effects(expense_reduction=0.1, compute_gain=5)
        assert list(effects.present()) == ["compute_gain", "expense_reduction"]


# =============================================================================
# VIEWS
# =============================================================================

class TestFormatting:
    """Tests for number and currency display."""

    @pytest.mark.parametrize("value,expected", [
        (0, "0"),
        (999, "999"),
        (1000, "1.0K"),
        (1234, "1.2K"),
        (1500000, "1.50M"),
        (2000000000, "2.00B"),
        (-500, "-500"),
    ])
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_format_currency(self):
        assert format_currency(10000000) == "$10.00M"

    def test_describe_model(self):
        model = CATALOG.get_model_by_id("gpt-1")
        assert describe_model(model) == f"{model.description} Requires 120 compute and $150.0K."


class TestViews:
    """Tests for presentation lookups."""

    def test_infrastructure_flags(self):
        state = create_default_state()
        state.purchased_upgrades.add("gpu-cluster")
        views = get_infrastructure(state)
        assert [v.upgrade.id for v in views] == [row["id"] for row in data.COMPUTE_UPGRADES]
        assert {v.upgrade.id for v in views if v.purchased} == {"gpu-cluster"}

    def test_funding_flags(self):
        state = create_default_state()
        state.funding_claimed.add("series-a")
        views = get_available_funding(state)
        assert len(views) == len(data.FUNDING_ROUNDS)
        assert [v.funding_round.id for v in views if v.claimed] == ["series-a"]

    def test_active_model(self):
        state = create_default_state()
        assert get_active_model(state) is None
        assert start_research(state, "language", 0)
        state.active_research.progress = 5
        view = get_active_model(state)
        assert view.model.id == "gpt-1"
        assert view.progress_percent == pytest.approx(25.0)
        state.active_research.progress = 50
        assert get_active_model(state).progress_percent == 100.0

    def test_research_status(self):
        """Test each button state."""
        state = create_default_state()
        assert research_status(state, "language", 0) is ResearchStatus.AVAILABLE
        assert research_status(state, "language", 1) is ResearchStatus.LOCKED
        assert research_status(state, "language", 99) is None

        assert start_research(state, "language", 0)
        assert research_status(state, "language", 0) is ResearchStatus.TRAINING
        assert research_status(state, "image", 0) is ResearchStatus.BUSY

        state.completed_models.append("gpt-1")
        state.unlocked_models["language"] = 1
        state.active_research = None
        assert research_status(state, "language", 0) is ResearchStatus.DEPLOYED
        assert research_status(state, "language", 1) is ResearchStatus.AVAILABLE


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
