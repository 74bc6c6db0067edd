"""Tests for UnitRegistry and the built-in unit catalogue."""

import pytest

from periodkit.domain.errors import InvalidUnitDefinition, UnknownUnit
from periodkit.domain.registry import UnitDefinition, UnitRegistry, default_registry
from periodkit.domain.strategies import YearMultipleStrategy
from periodkit.domain.units import Unit

EXPECTED_DIVISIBILITY = {
    "millennium": {"century", "decade", "year"},
    "century": {"decade", "year"},
    "decade": {"year", "quarter", "month"},
    "year": {"quarter", "month", "day"},
    "quarter": {"month", "day"},
    "month": {"day"},
    "week": {"day"},
    "day": {"hour"},
    "hour": {"minute"},
    "minute": {"second"},
    "second": set(),
    "stableMonth": {"week", "day"},
    "custom": {"year", "quarter", "month", "week", "day", "hour", "minute", "second"},
}


class TestBuiltins:
    def test_all_units_registered(self) -> None:
        registry = default_registry()
        assert set(registry.ids()) == set(EXPECTED_DIVISIBILITY)
        assert len(registry) == len(EXPECTED_DIVISIBILITY)

    @pytest.mark.parametrize(("unit", "targets"), sorted(EXPECTED_DIVISIBILITY.items()))
    def test_divisibility_table(self, unit: str, targets: set[str]) -> None:
        assert set(default_registry().get(unit).divisible_into) == targets

    def test_month_never_divides_into_week(self) -> None:
        registry = default_registry()
        assert not registry.can_divide("month", "week")
        assert not registry.can_divide("year", "week")
        assert not registry.can_divide("week", "month")

    def test_no_self_division(self) -> None:
        for definition in default_registry():
            assert definition.id not in definition.divisible_into

    def test_tiling_units(self) -> None:
        tiling = default_registry().tiling_ids()
        assert "stableMonth" not in tiling
        assert "custom" not in tiling
        assert {"day", "week", "month", "quarter", "year", "decade"} <= set(tiling)

    def test_custom_has_no_strategy(self) -> None:
        assert default_registry().get(Unit.CUSTOM).strategy is None

    def test_descendants(self) -> None:
        registry = default_registry()
        assert registry.descendants("century") >= {"decade", "year", "month", "day", "second"}
        assert "week" not in registry.descendants("year")
        assert registry.descendants("second") == set()

    def test_fresh_instances_are_independent(self) -> None:
        a = default_registry()
        b = default_registry()
        a.register("fortnight", UnitDefinition(id="fortnight", plural_id="fortnights"))
        assert "fortnight" in a
        assert "fortnight" not in b


class TestLookup:
    def test_get_unknown_raises(self) -> None:
        with pytest.raises(UnknownUnit) as exc_info:
            default_registry().get("fortnight")
        assert exc_info.value.unit == "fortnight"
        assert exc_info.value.code == "UNKNOWN_UNIT"

    def test_can_divide_unknown_source_raises(self) -> None:
        with pytest.raises(UnknownUnit):
            default_registry().can_divide("fortnight", "day")

    def test_contains(self) -> None:
        registry = default_registry()
        assert "month" in registry
        assert Unit.STABLE_MONTH in registry
        assert "fortnight" not in registry


class TestRegister:
    def test_register_custom_unit(self) -> None:
        registry = default_registry()
        definition = UnitDefinition(
            id="biennium",
            plural_id="biennia",
            divisible_into=["year", "month"],
            strategy=YearMultipleStrategy(2),
        )
        registry.register("biennium", definition)
        assert registry.get("biennium") is definition
        assert registry.can_divide("biennium", "year")
        assert isinstance(definition.divisible_into, frozenset)

    def test_rejects_empty_id(self) -> None:
        with pytest.raises(InvalidUnitDefinition):
            UnitRegistry().register("  ", UnitDefinition(id="", plural_id=""))

    def test_rejects_mismatched_id(self) -> None:
        with pytest.raises(InvalidUnitDefinition, match="declares id"):
            UnitRegistry().register("a", UnitDefinition(id="b", plural_id="bs"))

    def test_rejects_duplicate(self) -> None:
        registry = default_registry()
        with pytest.raises(InvalidUnitDefinition, match="already registered"):
            registry.register("day", UnitDefinition(id="day", plural_id="days"))

    def test_rejects_self_division(self) -> None:
        with pytest.raises(InvalidUnitDefinition, match="itself"):
            UnitRegistry().register(
                "loop", UnitDefinition(id="loop", plural_id="loops", divisible_into={"loop"})
            )

    def test_rejects_unknown_target(self) -> None:
        with pytest.raises(InvalidUnitDefinition, match="unregistered"):
            UnitRegistry().register(
                "a", UnitDefinition(id="a", plural_id="as", divisible_into={"b"})
            )

    def test_cycle_is_impossible(self) -> None:
        registry = UnitRegistry()
        registry.register("leaf", UnitDefinition(id="leaf", plural_id="leaves"))
        registry.register(
            "branch", UnitDefinition(id="branch", plural_id="branches", divisible_into={"leaf"})
        )
        # "leaf" is taken, so it can never be redefined to divide into "branch".
        with pytest.raises(InvalidUnitDefinition):
            registry.register(
                "leaf",
                UnitDefinition(id="leaf", plural_id="leaves", divisible_into={"branch"}),
            )

    def test_copy_is_independent(self) -> None:
        registry = default_registry()
        clone = registry.copy()
        clone.register("fortnight", UnitDefinition(id="fortnight", plural_id="fortnights"))
        assert "fortnight" in clone
        assert "fortnight" not in registry
        assert clone.get("month") is registry.get("month")
