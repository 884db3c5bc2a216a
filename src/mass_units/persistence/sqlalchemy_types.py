"""
SQLAlchemy column type для значений единиц.

Колонка хранится как Float; значение единицы ⇄ магнитуда через
NullableValueConverter, NULL ⇄ None.
"""

from typing import Any, Optional

from sqlalchemy import Float
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from mass_units.core.domain import ScalarUnit
from mass_units.persistence.value_converters import NullableValueConverter


class UnitColumnType(TypeDecorator):
    """
    Type decoration handler for unit values.

    Usage:
        mass = Column(UnitColumnType(Kilogram), nullable=True)
    """

    impl = Float
    cache_ok = True

    def __init__(self, unit_cls: type[ScalarUnit], *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.unit_cls = unit_cls
        self._converter = NullableValueConverter(unit_cls)

    def process_bind_param(self, value: Optional[ScalarUnit], dialect: Dialect) -> Optional[float]:
        return self._converter.to_storage(value)

    def process_result_value(self, value: Optional[float], dialect: Dialect) -> Optional[ScalarUnit]:
        if value is None:
            return None
        return self._converter.from_storage(float(value))

    @property
    def python_type(self) -> type:
        return self.unit_cls

    def __repr__(self) -> str:
        return f"UnitColumnType({self.unit_cls.__name__})"
