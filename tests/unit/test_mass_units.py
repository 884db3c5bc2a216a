"""
Тесты единиц массы, объёма и плотности

Kilogram, Tonne, Liter, CubicMetre, Density: конверсии между единицами и
политика нулевого знаменателя.
"""

import math

import pytest

from mass_units import CubicMetre, Density, Kilogram, Liter, Tonne


class TestKilogram:
    """Тесты для Kilogram"""

    def test_to_tonne(self) -> None:
        assert Kilogram(1000).to_tonne() == Tonne(1)
        assert Kilogram(250).to_tonne() == Tonne(0.25)

    def test_to_liter(self) -> None:
        assert Kilogram(20).to_liter(Density(100)) == Liter(200)

    def test_to_liter_water(self) -> None:
        assert Kilogram(5).to_liter(Density.WATER) == Liter(5)

    def test_to_liter_zero_density(self) -> None:
        """Нулевая плотность → Liter(0)"""
        assert Kilogram(20).to_liter(Density(0)) == Liter(0)
        assert Kilogram(20).to_liter(Density.EMPTY) == Liter.EMPTY

    def test_to_liter_requires_density(self) -> None:
        with pytest.raises(TypeError, match="density must be Density"):
            Kilogram(20).to_liter(100.0)  # type: ignore[arg-type]


class TestTonne:
    """Тесты для Tonne"""

    def test_to_kilogram(self) -> None:
        assert Tonne(1).to_kilogram() == Kilogram(1000)

    def test_roundtrip(self) -> None:
        assert Tonne(3.5).to_kilogram().to_tonne() == Tonne(3.5)


class TestLiter:
    """Тесты для Liter"""

    def test_to_cubic_metre(self) -> None:
        assert Liter(1000).to_cubic_metre() == CubicMetre(1)

    def test_to_kilogram(self) -> None:
        assert Liter(200).to_kilogram(Density(100)) == Kilogram(20)

    def test_to_kilogram_zero_density(self) -> None:
        assert Liter(200).to_kilogram(Density(0)) == Kilogram(0)

    def test_to_kilogram_requires_density(self) -> None:
        with pytest.raises(TypeError):
            Liter(200).to_kilogram(Kilogram(100))  # type: ignore[arg-type]


class TestCubicMetre:
    """Тесты для CubicMetre"""

    def test_to_liter(self) -> None:
        assert CubicMetre(1).to_liter() == Liter(1000)

    def test_roundtrip(self) -> None:
        assert CubicMetre(2.5).to_liter().to_cubic_metre() == CubicMetre(2.5)


class TestDensity:
    """Тесты для Density"""

    def test_water(self) -> None:
        assert Density.WATER == Density(1000)

    def test_from_mass_and_volume(self) -> None:
        assert Density.from_mass_and_volume(Kilogram(2300), Liter(1000)) == Density(2300)

    @pytest.mark.parametrize("mass", [0.0, 2300.0, -5.0, math.inf])
    def test_from_mass_and_zero_volume(self, mass: float) -> None:
        """Нулевой объём → Density(0), для любой массы"""
        assert Density.from_mass_and_volume(Kilogram(mass), Liter(0)) == Density(0)

    def test_from_mass_and_volume_requires_units(self) -> None:
        with pytest.raises(TypeError, match="kilogram must be Kilogram"):
            Density.from_mass_and_volume(Tonne(1), Liter(1))  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="liter must be Liter"):
            Density.from_mass_and_volume(Kilogram(1), CubicMetre(1))  # type: ignore[arg-type]

    def test_consistency_with_conversions(self) -> None:
        """Плотность из (kg, L) переводит тот же kg обратно в тот же L"""
        mass, volume = Kilogram(850), Liter(1000)
        density = Density.from_mass_and_volume(mass, volume)
        assert mass.to_liter(density).value == pytest.approx(volume.value)
        assert volume.to_kilogram(density).value == pytest.approx(mass.value)
