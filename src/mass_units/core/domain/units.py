"""
Units — Централизованный модуль формул конверсии единиц

Единственный допустимый способ преобразований между:
- Kilogram ↔ Tonne
- Liter ↔ CubicMetre
- Kilogram ↔ Liter (через Density)
- (Kilogram, Liter) → Density
- Percentage → доля / часть / полное количество / остаток

Функции работают с сырыми магнитудами (float); классы единиц делегируют сюда.
ЗАПРЕЩЕНО дублировать множители в классах единиц.

Политика деления:
- конструкторы из отношения (density, percentage, kg → L) — safe_divide:
  нулевой знаменатель → 0
- percentage_total / percentage_remainder — БЕЗ защиты: при percent == 0
  результат ±inf/nan
"""

from typing import Final

from mass_units.core.math.numerical_safeguards import ieee_divide, safe_divide

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# 1 t = 1000 kg
KILOGRAMS_PER_TONNE: Final[float] = 1000.0

# 1 m3 = 1000 L
LITERS_PER_CUBIC_METRE: Final[float] = 1000.0

# Плотность воды (kg/m3), именованное опорное значение
WATER_DENSITY_KG_PER_M3: Final[float] = 1000.0

# Проценты → доля
PERCENT_SCALE: Final[float] = 100.0


# =============================================================================
# МАССА
# =============================================================================


def tonne_to_kilogram(tonne: float) -> float:
    """kg = t × 1000"""
    return tonne * KILOGRAMS_PER_TONNE


def kilogram_to_tonne(kilogram: float) -> float:
    """t = kg / 1000"""
    return kilogram / KILOGRAMS_PER_TONNE


# =============================================================================
# ОБЪЁМ
# =============================================================================


def cubic_metre_to_liter(cubic_metre: float) -> float:
    """L = m3 × 1000"""
    return cubic_metre * LITERS_PER_CUBIC_METRE


def liter_to_cubic_metre(liter: float) -> float:
    """m3 = L / 1000"""
    return liter / LITERS_PER_CUBIC_METRE


# =============================================================================
# ПЛОТНОСТЬ
# =============================================================================


def kilogram_to_liter(kilogram: float, density: float) -> float:
    """
    Конверсия: масса → объём через плотность.

    L = density == 0 ? 0 : kg / density × 1000

    Args:
        kilogram: Масса (kg)
        density: Плотность (kg/m3)

    Returns:
        Объём (L), 0.0 при нулевой плотности
    """
    return safe_divide(kilogram, density) * LITERS_PER_CUBIC_METRE


def liter_to_kilogram(liter: float, density: float) -> float:
    """
    Конверсия: объём → масса через плотность.

    kg = L × density / 1000 (мультипликативная формула, защита не нужна)
    """
    return liter * density / LITERS_PER_CUBIC_METRE


def density_from_mass_and_volume(kilogram: float, liter: float) -> float:
    """
    Плотность из массы и объёма.

    density = liter == 0 ? 0 : kg / L × 1000

    Returns:
        Плотность (kg/m3), 0.0 при нулевом объёме
    """
    return safe_divide(kilogram, liter) * LITERS_PER_CUBIC_METRE


# =============================================================================
# ПРОЦЕНТЫ
# =============================================================================


def percentage_from_ratio(amount: float, total: float) -> float:
    """percent = total == 0 ? 0 : amount / total × 100"""
    return safe_divide(amount, total) * PERCENT_SCALE


def percentage_fraction(percent: float) -> float:
    """Доля: percent / 100"""
    return percent / PERCENT_SCALE


def percentage_of(percent: float, value: float) -> float:
    """Часть от value: value × (percent / 100)"""
    return value * percentage_fraction(percent)


def percentage_total(percent: float, value: float) -> float:
    """
    Полное количество, частью которого является value.

    total = value / (percent / 100), без защиты от нуля:
    percent == 0 даёт ±inf (или nan при value == 0).
    """
    return ieee_divide(value, percentage_fraction(percent))


def percentage_remainder(percent: float, value: float) -> float:
    """Остаток: total(value) − value"""
    return percentage_total(percent, value) - value
