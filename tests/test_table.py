from tagunits import units
from tagunits.units import registry
import pytest  # type: ignore


def test_registry() -> None:
    assert units.registry_scale("time", "hr") == 3600.0
    assert units.registry_scale("length", "ft") == pytest.approx(0.3048)
    assert units.registry_scale("mass", "slug") == pytest.approx(32.17405 * 0.4535924)
    assert units.family_of("lbf") == "force"
    assert units.family_of("year") == "time"

    assert units.unit("ft").dims == units.Length
    assert units.unit("ft").priority == 0
    assert units.unit("ft", priority=5).priority == 5
    assert units.unit("N").dims == units.Force
    assert units.unit("N").priority == 1

    with pytest.raises(units.UnknownUnit) as excinfo:
        units.registry_scale("length", "furlong")
    assert excinfo.value.family == "length"
    assert excinfo.value.symbol == "furlong"

    with pytest.raises(units.UnknownUnit):
        units.registry_scale("length", "kg")

    with pytest.raises(units.UnknownUnit):
        units.registry_scale("temperature", "K")

    with pytest.raises(LookupError) as excinfo:
        units.unit("furlong")
    assert excinfo.value.family is None
    assert str(excinfo.value) == "Unknown unit 'furlong'"


def test_registry_read_only() -> None:
    with pytest.raises(TypeError):
        registry.LENGTH["furlong"] = 201.168  # type: ignore

    with pytest.raises(TypeError):
        registry.REGISTRIES["angle"] = {}  # type: ignore

    assert "furlong" not in registry.LENGTH


def test_symbols_unique() -> None:
    total = sum(len(table) for table in registry.REGISTRIES.values())
    assert len(units.build_table()) == total


def test_si_table() -> None:
    table = units.build_table("m", "s", "kg")
    assert table.base == ("m", "s", "kg")
    assert table["m"] == 1.0
    assert table["km"] == 1000.0
    assert table["ft"] == pytest.approx(12 * 2.54 / 100)
    assert 1 / table["ft"] == pytest.approx(3.280839895)
    assert table["hr"] == 3600.0
    assert table["g"] == pytest.approx(1e-3)
    assert table["N"] == 1.0
    assert table["kN"] == 1000.0
    assert table["lbf"] == pytest.approx(4.448221, rel=1e-6)

    assert units.build_table() == table


def test_imperial_table() -> None:
    table = units.build_table("ft", "s", "lbm")
    assert table["ft"] == 1.0
    assert table["s"] == 1.0
    assert table["lbm"] == 1.0
    assert table["mi"] == pytest.approx(5280)
    assert table["in"] == pytest.approx(1 / 12)
    assert table["slug"] == pytest.approx(32.17405)
    assert table["pdl"] == pytest.approx(1.0)
    assert table["lbf"] == pytest.approx(32.17405, rel=1e-12)

    table = units.build_table("ft", "hr", "slug")
    assert table["lbf"] == pytest.approx(3600.0**2)
    assert table["min"] == pytest.approx(1 / 60)


def test_base_units() -> None:
    for length, length_scale in registry.LENGTH.items():
        for time, time_scale in registry.TIME.items():
            for mass, mass_scale in registry.MASS.items():
                table = units.build_table(length, time, mass)
                assert table[length] == 1.0
                assert table[time] == 1.0
                assert table[mass] == 1.0
                assert table["N"] == pytest.approx(time_scale**2 / (mass_scale * length_scale))


def test_table_matches_algebra() -> None:
    table = units.build_table("ft", "s", "lbm")
    base_force = units.unit("lbm") * units.unit("ft") / units.unit("s")**2
    for symbol in registry.FORCE:
        assert units.TaggedNumber(1.0, units.unit(symbol)).in_unit(base_force) == pytest.approx(table[symbol])


def test_unknown_base() -> None:
    with pytest.raises(units.UnknownUnit) as excinfo:
        units.build_table("furlong")
    assert excinfo.value.family == "length"

    with pytest.raises(units.UnknownUnit) as excinfo:
        units.build_table("m", "kg", "s")
    assert excinfo.value.family == "time"
    assert excinfo.value.symbol == "kg"

    with pytest.raises(units.UnknownUnit) as excinfo:
        units.build_table(mass="stone")
    assert excinfo.value.family == "mass"


def test_idempotent() -> None:
    first = units.build_table("ft", "hr", "slug")
    second = units.build_table("ft", "hr", "slug")
    assert first is not second
    assert first == second
    assert dict(first) == dict(second)


def test_table_read_only() -> None:
    table = units.build_table()
    with pytest.raises(TypeError):
        table["m"] = 2.0  # type: ignore
    assert table["m"] == 1.0


def test_convert() -> None:
    table = units.build_table("m", "s", "kg")
    assert table.convert(3, "km") == 3000.0
    assert table.convert(2, "min") == 120.0

    for symbol in table:
        assert table.convert(4.2, symbol) / table[symbol] == pytest.approx(4.2)

    with pytest.raises(units.UnknownUnit) as excinfo:
        table.convert(1.0, "furlong")
    assert excinfo.value.family is None
    assert excinfo.value.symbol == "furlong"

    assert table.get("furlong") is None


def test_to_frame() -> None:
    table = units.build_table("ft", "s", "lbm")
    frame = table.to_frame()
    assert frame.index.name == "symbol"
    assert len(frame) == len(table)
    assert frame.loc["lbf", "family"] == "force"
    assert frame.loc["ft", "factor"] == 1.0
    assert frame.loc["lbf", "factor"] == pytest.approx(32.17405)
