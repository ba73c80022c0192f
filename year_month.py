import re
from datetime import date
from typing import Iterator, Self

from dateutil.relativedelta import relativedelta

from int_width import UINT64, IntWidth, narrowest_signed, promote_unsigned
from periods import Month, Year
from year_month_config import default_width

# yyyy-mm and yyyymm. ASCII digits only, unlike \d
YYYY_MM_PATTERN = re.compile(r'[0-9]+-[0-9][0-9]')
YYYYMM_PATTERN = re.compile(r'[0-9]+[0-9][0-9]')


class RangeError(ValueError):
    def __init__(self):
        super().__init__('Month should be between 1 and 12')


class FormatError(ValueError):
    def __init__(self, message: str, value: str):
        super().__init__(message)
        self.value = value


class YearMonth:
    """
    Immutable (year, month) pair. The year is held at a signed integer width,
    which year arithmetic preserves. Equality and hashing use only the year
    and month.
    """
    __slots__ = ('_year', '_month', '_width')

    @classmethod
    def _check_year(cls, year: int, width: IntWidth | None) -> IntWidth:
        if not isinstance(year, int) or isinstance(year, bool):
            raise TypeError('year must be an int')
        if width is None:
            width = default_width()
            return width if width.contains(year) else narrowest_signed(year)
        if not width.signed:
            raise ValueError(f'year width must be signed, not {width}; use from_unsigned_year')
        width.check(year)
        return width

    @classmethod
    def _check_month(cls, month: int):
        if not isinstance(month, int) or isinstance(month, bool):
            raise TypeError('month must be an int')
        if month not in range(1, 13):
            raise RangeError()

    def __init__(self, year: int, month: int, width: IntWidth | None = None):
        width = self._check_year(year, width)
        self._check_month(month)
        object.__setattr__(self, '_year', year)
        object.__setattr__(self, '_month', month)
        object.__setattr__(self, '_width', width)

    def __setattr__(self, name, value):
        raise AttributeError('YearMonth is immutable')

    def __reduce__(self):
        return YearMonth, (self._year, self._month, self._width)

    @classmethod
    def from_parts(cls, year: int, month: int, width: IntWidth | None = None) -> Self:
        return cls(year, month, width)

    @classmethod
    def from_date(cls, value: date, width: IntWidth | None = None) -> Self:
        return cls(value.year, value.month, width)

    @classmethod
    def from_unsigned_year(cls, year: int, month: int, width: IntWidth = UINT64) -> Self:
        """
        Build from an unsigned year, stored at the smallest signed width that
        holds it without overflow (same size, else the next wider tier)
        """
        if not isinstance(year, int) or isinstance(year, bool):
            raise TypeError('year must be an int')
        year, signed_width = promote_unsigned(year, width)
        return cls(year, month, signed_width)

    @classmethod
    def from_string(cls, value: str, width: IntWidth | None = None) -> Self:
        """
        Accepts "yyyy-mm" or "yyyymm". The year may have any number of digits,
        so "201" is year 2, month 1.
        """
        if not isinstance(value, str):
            raise TypeError('value must be a str')
        if not value:
            raise FormatError('Cannot convert empty string to YearMonth', value)
        if YYYY_MM_PATTERN.fullmatch(value):
            year, month = int(value[:-3]), int(value[-2:])
        elif YYYYMM_PATTERN.fullmatch(value):
            year, month = int(value[:-2]), int(value[-2:])
        else:
            raise FormatError(f'Invalid format to create a YearMonth: {value}', value)
        if width is None:
            width = default_width()
        return cls(year, month, width)

    @classmethod
    def from_integer(cls, value: int, width: IntWidth | None = None) -> Self:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('value must be an int')
        return cls.from_string(str(value), width)

    def year(self) -> int:
        return self._year

    def month(self) -> int:
        return self._month

    def year_month(self) -> tuple[int, int]:
        return self._year, self._month

    def width(self) -> IntWidth:
        return self._width

    def to_date(self) -> date:
        """
        First day of the month. Raises ValueError for years outside the range
        of datetime.date.
        """
        return date(self._year, self._month, 1)

    def first_day_of_month(self) -> date:
        return self.to_date()

    def last_day_of_month(self) -> date:
        return self.to_date() + relativedelta(day=31)

    def to_integer(self, width: IntWidth | None = None) -> int:
        """
        yyyymm as an integer, e.g. 201001 for 2010-01 and -201001 for -2010-01.
        Raises OverflowError if width is given and cannot hold the result.
        """
        sign = -1 if self._year < 0 else 1
        value = self._year * 100 + sign * self._month
        if width is not None:
            width.check(value)
        return value

    def to_signed(self) -> tuple[int, IntWidth]:
        value = self.to_integer()
        return value, narrowest_signed(value)

    def __int__(self) -> int:
        return self.to_integer()

    def _index(self) -> int:
        # Months since year 0, month 1
        return self._year * 12 + self._month - 1

    def _shift_months(self, months: int) -> Self:
        year, month = divmod(self._index() + months, 12)
        return YearMonth(year, month + 1, self._width)

    def __eq__(self, other) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._year == other._year and self._month == other._month

    def __ne__(self, other) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return not self == other

    def __gt__(self, other) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._index() > other._index()

    def __lt__(self, other) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._index() < other._index()

    def __ge__(self, other) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._index() >= other._index()

    def __le__(self, other) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self == other or self < other

    def __hash__(self):
        return hash((self._year, self._month))

    def __add__(self, other):
        if isinstance(other, Year):
            return YearMonth(self._year + other.value, self._month, self._width)
        if isinstance(other, Month):
            return self._shift_months(other.value)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, YearMonth):
            return Month(12 * (self._year - other._year) + self._month - other._month)
        if isinstance(other, Year):
            return YearMonth(self._year - other.value, self._month, self._width)
        if isinstance(other, Month):
            return self._shift_months(-other.value)
        return NotImplemented

    def __str__(self):
        return f'{self._year}-{self._month:02d}'

    def __repr__(self):
        return f'YearMonth({self._year}, {self._month}, {self._width})'


def year_month_range(start: YearMonth, stop: YearMonth, step: Year | Month = Month(1)) -> Iterator[YearMonth]:
    """
    Iterate start, start + step, ... up to and including stop. A negative step
    walks backwards; the range is empty if stop is on the other side of start.
    """
    if not isinstance(step, (Year, Month)):
        raise TypeError('step must be a Year or a Month')
    if step.value == 0:
        raise ValueError('step must not be zero')
    months = step.to_months().value if isinstance(step, Year) else step.value
    count = max((stop - start).value // months + 1, 0)
    # Offsets from start, so nothing past stop is ever built
    return (start + type(step)(i * step.value) for i in range(count))
