from datetime import date
from typing import Self

from dateutil.relativedelta import relativedelta


class _Period:
    """
    A whole number of calendar units. Subclasses name the unit.
    """
    __slots__ = ('_value',)

    @classmethod
    def _check_value(cls, value):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f'{cls.__name__} value must be an int')

    def __init__(self, value: int = 1):
        self._check_value(value)
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __reduce__(self):
        return type(self), (self._value,)

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __neg__(self) -> Self:
        return type(self)(-self._value)

    def __add__(self, other):
        if type(other) is type(self):
            return type(self)(self._value + other._value)
        if isinstance(other, date):
            return other + self.to_relativedelta()
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, date):
            return other + self.to_relativedelta()
        return NotImplemented

    def __sub__(self, other):
        if type(other) is type(self):
            return type(self)(self._value - other._value)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, date):
            return other - self.to_relativedelta()
        return NotImplemented

    def to_relativedelta(self) -> relativedelta:
        raise NotImplementedError

    def __repr__(self):
        return f'{type(self).__name__}({self._value})'


class Year(_Period):
    __slots__ = ()

    def to_months(self) -> 'Month':
        return Month(12 * self._value)

    def to_relativedelta(self) -> relativedelta:
        return relativedelta(years=self._value)


class Month(_Period):
    __slots__ = ()

    def to_relativedelta(self) -> relativedelta:
        return relativedelta(months=self._value)
