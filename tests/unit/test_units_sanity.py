"""
Sanity-тест для модуля формул конверсии units

Проверяет:
1. Корректность конверсий kg ↔ t, L ↔ m3, kg ↔ L через плотность
2. Инварианты преобразований (обратимость)
3. Политику safe division (нулевой знаменатель → 0)
4. Отсутствие защиты в percentage_total / percentage_remainder
"""

import math

import pytest

from mass_units.core.domain.units import (
    KILOGRAMS_PER_TONNE,
    LITERS_PER_CUBIC_METRE,
    PERCENT_SCALE,
    WATER_DENSITY_KG_PER_M3,
    cubic_metre_to_liter,
    density_from_mass_and_volume,
    kilogram_to_liter,
    kilogram_to_tonne,
    liter_to_cubic_metre,
    liter_to_kilogram,
    percentage_fraction,
    percentage_from_ratio,
    percentage_of,
    percentage_remainder,
    percentage_total,
    tonne_to_kilogram,
)


class TestConstants:
    """Тесты констант"""

    def test_constants(self) -> None:
        assert KILOGRAMS_PER_TONNE == 1000.0
        assert LITERS_PER_CUBIC_METRE == 1000.0
        assert WATER_DENSITY_KG_PER_M3 == 1000.0
        assert PERCENT_SCALE == 100.0


class TestMassConversions:
    """Тесты конверсий kg ↔ t"""

    def test_tonne_to_kilogram(self) -> None:
        assert tonne_to_kilogram(1.0) == 1000.0
        assert tonne_to_kilogram(0.5) == 500.0

    def test_kilogram_to_tonne(self) -> None:
        assert kilogram_to_tonne(1000.0) == 1.0
        assert kilogram_to_tonne(250.0) == 0.25

    def test_roundtrip_t_kg_t(self) -> None:
        """Инвариант: t → kg → t возвращает исходное значение"""
        assert kilogram_to_tonne(tonne_to_kilogram(2.75)) == pytest.approx(2.75)


class TestVolumeConversions:
    """Тесты конверсий L ↔ m3"""

    def test_cubic_metre_to_liter(self) -> None:
        assert cubic_metre_to_liter(1.0) == 1000.0

    def test_liter_to_cubic_metre(self) -> None:
        assert liter_to_cubic_metre(1000.0) == 1.0

    def test_roundtrip_l_m3_l(self) -> None:
        assert cubic_metre_to_liter(liter_to_cubic_metre(123.0)) == pytest.approx(123.0)


class TestDensityConversions:
    """Тесты конверсий через плотность"""

    def test_kilogram_to_liter(self) -> None:
        assert kilogram_to_liter(20.0, 100.0) == 200.0

    def test_kilogram_to_liter_water(self) -> None:
        """1 kg воды = 1 L"""
        assert kilogram_to_liter(1.0, WATER_DENSITY_KG_PER_M3) == 1.0

    def test_kilogram_to_liter_zero_density(self) -> None:
        """Нулевая плотность → 0 L, не inf"""
        assert kilogram_to_liter(20.0, 0.0) == 0.0

    def test_liter_to_kilogram(self) -> None:
        assert liter_to_kilogram(200.0, 100.0) == 20.0

    def test_liter_to_kilogram_zero_density(self) -> None:
        """Мультипликативная формула: защита не нужна"""
        assert liter_to_kilogram(200.0, 0.0) == 0.0

    def test_density_from_mass_and_volume(self) -> None:
        assert density_from_mass_and_volume(2300.0, 1000.0) == 2300.0

    def test_density_zero_volume(self) -> None:
        """Нулевой объём → 0, не inf"""
        assert density_from_mass_and_volume(2300.0, 0.0) == 0.0
        assert density_from_mass_and_volume(0.0, 0.0) == 0.0

    def test_roundtrip_kg_l_kg(self) -> None:
        """Инвариант: kg → L → kg при ненулевой плотности"""
        density = 850.0
        liters = kilogram_to_liter(42.0, density)
        assert liter_to_kilogram(liters, density) == pytest.approx(42.0)


class TestPercentageFormulas:
    """Тесты процентных формул"""

    def test_from_ratio(self) -> None:
        assert percentage_from_ratio(10.0, 100.0) == 10.0

    def test_from_ratio_zero_total(self) -> None:
        """Нулевой total → 0"""
        assert percentage_from_ratio(10.0, 0.0) == 0.0

    def test_fraction(self) -> None:
        assert percentage_fraction(100.0) == 1.0
        assert percentage_fraction(50.0) == 0.5
        assert percentage_fraction(25.0) == 0.25

    def test_of(self) -> None:
        assert percentage_of(10.0, 100.0) == 10.0

    def test_total(self) -> None:
        assert percentage_total(10.0, 10.0) == 100.0

    def test_remainder(self) -> None:
        assert percentage_remainder(10.0, 10.0) == 90.0

    def test_total_zero_percent_unguarded(self) -> None:
        """percent == 0: total не защищён, в отличие от from_ratio"""
        assert percentage_total(0.0, 10.0) == math.inf
        assert percentage_total(0.0, -10.0) == -math.inf
        assert math.isnan(percentage_total(0.0, 0.0))

    def test_remainder_zero_percent_unguarded(self) -> None:
        assert percentage_remainder(0.0, 10.0) == math.inf
        assert math.isnan(percentage_remainder(0.0, 0.0))
