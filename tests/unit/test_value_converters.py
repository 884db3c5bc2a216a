"""
Тесты persistence adapters

Проверяет:
1. ValueConverter: unit ⇄ double
2. NullableValueConverter: None сохраняется без изменений
3. UnitColumnType: запись и чтение через SQLAlchemy (in-memory SQLite)
"""

import math

import pytest
from sqlalchemy import Column, Integer, create_engine, select
from sqlalchemy.orm import Session, declarative_base

from mass_units import CubicMetre, Density, Kilogram, Liter, Percentage, Tonne
from mass_units.persistence import (
    DENSITY_CONVERTER,
    KILOGRAM_CONVERTER,
    KILOGRAM_NULLABLE_CONVERTER,
    PERCENTAGE_NULLABLE_CONVERTER,
    TONNE_CONVERTER,
    NullableValueConverter,
    UnitColumnType,
    ValueConverter,
)

Base = declarative_base()


class StockRecord(Base):
    """Тестовая таблица с колонками-единицами."""

    __tablename__ = "stock_records"

    id = Column(Integer, primary_key=True)
    mass = Column(UnitColumnType(Kilogram), nullable=False)
    volume = Column(UnitColumnType(Liter), nullable=True)
    density = Column(UnitColumnType(Density), nullable=True)
    moisture = Column(UnitColumnType(Percentage), nullable=True)


@pytest.fixture
def session():
    """In-memory SQLite сессия со схемой StockRecord."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


# =============================================================================
# VALUE CONVERTERS
# =============================================================================


class TestValueConverter:
    """Тесты ValueConverter"""

    def test_to_storage(self) -> None:
        assert KILOGRAM_CONVERTER.to_storage(Kilogram(10.5)) == 10.5

    def test_from_storage(self) -> None:
        assert KILOGRAM_CONVERTER.from_storage(10.5) == Kilogram(10.5)
        assert TONNE_CONVERTER.from_storage(2.0) == Tonne(2)

    def test_non_finite_passthrough(self) -> None:
        """Магнитуда передаётся как есть, включая NaN"""
        assert math.isnan(DENSITY_CONVERTER.to_storage(Density(math.nan)))
        assert DENSITY_CONVERTER.from_storage(math.inf) == Density(math.inf)

    def test_wrong_unit_rejected(self) -> None:
        with pytest.raises(TypeError, match="Expected Kilogram"):
            KILOGRAM_CONVERTER.to_storage(Liter(10))

    def test_generic_construction(self) -> None:
        converter = ValueConverter(CubicMetre)
        assert converter.from_storage(converter.to_storage(CubicMetre(3))) == CubicMetre(3)


class TestNullableValueConverter:
    """Тесты NullableValueConverter"""

    def test_none_preserved(self) -> None:
        assert KILOGRAM_NULLABLE_CONVERTER.to_storage(None) is None
        assert KILOGRAM_NULLABLE_CONVERTER.from_storage(None) is None

    def test_values_converted(self) -> None:
        assert PERCENTAGE_NULLABLE_CONVERTER.to_storage(Percentage(10)) == 10.0
        assert PERCENTAGE_NULLABLE_CONVERTER.from_storage(10.0) == Percentage(10)

    def test_wrong_unit_rejected(self) -> None:
        with pytest.raises(TypeError):
            NullableValueConverter(Liter).to_storage(Kilogram(1))


# =============================================================================
# SQLALCHEMY
# =============================================================================


class TestUnitColumnType:
    """Тесты UnitColumnType"""

    def test_roundtrip(self, session: Session) -> None:
        session.add(
            StockRecord(
                id=1,
                mass=Kilogram(2300),
                volume=Liter(1000),
                density=Density(2300),
                moisture=Percentage(12.5),
            )
        )
        session.commit()
        session.expunge_all()

        record = session.get(StockRecord, 1)
        assert record.mass == Kilogram(2300)
        assert type(record.mass) is Kilogram
        assert record.volume == Liter(1000)
        assert record.density == Density(2300)
        assert record.moisture == Percentage(12.5)

    def test_null_roundtrip(self, session: Session) -> None:
        session.add(StockRecord(id=1, mass=Kilogram(1), volume=None))
        session.commit()
        session.expunge_all()

        record = session.get(StockRecord, 1)
        assert record.volume is None
        assert record.density is None

    def test_query_by_unit(self, session: Session) -> None:
        """Параметры запроса тоже проходят через process_bind_param"""
        session.add_all(
            [
                StockRecord(id=1, mass=Kilogram(10)),
                StockRecord(id=2, mass=Kilogram(20)),
                StockRecord(id=3, mass=Kilogram(30)),
            ]
        )
        session.commit()

        rows = session.scalars(
            select(StockRecord.id).where(StockRecord.mass >= Kilogram(20)).order_by(StockRecord.id)
        ).all()
        assert rows == [2, 3]

    def test_wrong_unit_rejected(self, session: Session) -> None:
        session.add(StockRecord(id=1, mass=Liter(10)))
        with pytest.raises(Exception) as exc_info:
            session.commit()
        assert "Expected Kilogram" in str(exc_info.value)

    def test_python_type(self) -> None:
        assert UnitColumnType(Kilogram).python_type is Kilogram
