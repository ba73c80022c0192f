from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class IntWidth:
    """
    Storage width of an integer. bits=None means arbitrary precision.
    """
    name: str
    bits: Optional[int]
    signed: bool = True

    @property
    def min_value(self) -> Optional[int]:
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> Optional[int]:
        if self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value

    def check(self, value: int) -> int:
        if not self.contains(value):
            raise OverflowError(f'{value} does not fit in {self.name}')
        return value

    def __str__(self):
        return self.name


INT8 = IntWidth('Int8', 8)
INT16 = IntWidth('Int16', 16)
INT32 = IntWidth('Int32', 32)
INT64 = IntWidth('Int64', 64)
INT128 = IntWidth('Int128', 128)
BIGINT = IntWidth('BigInt', None)

UINT8 = IntWidth('UInt8', 8, signed=False)
UINT16 = IntWidth('UInt16', 16, signed=False)
UINT32 = IntWidth('UInt32', 32, signed=False)
UINT64 = IntWidth('UInt64', 64, signed=False)
UINT128 = IntWidth('UInt128', 128, signed=False)

# Narrowest first
SIGNED_WIDTHS = (INT8, INT16, INT32, INT64, INT128, BIGINT)
UNSIGNED_WIDTHS = (UINT8, UINT16, UINT32, UINT64, UINT128)

_WIDTHS_BY_NAME = {width.name.lower(): width for width in SIGNED_WIDTHS + UNSIGNED_WIDTHS}


def width_named(name: str) -> IntWidth:
    """
    Look up a width by name, ignoring case, e.g. 'int64' or 'UInt8'
    """
    width = _WIDTHS_BY_NAME.get(name.strip().lower())
    if width is None:
        raise ValueError(f'Unknown integer width: {name}')
    return width


def signed_counterpart(width: IntWidth) -> IntWidth:
    if width.signed:
        return width
    for candidate in SIGNED_WIDTHS:
        if candidate.bits == width.bits:
            return candidate
    raise ValueError(f'No signed width with {width.bits} bits')


def next_signed(width: IntWidth) -> IntWidth:
    if not width.signed:
        raise ValueError(f'{width} is not a signed width')
    index = SIGNED_WIDTHS.index(width)
    if index == len(SIGNED_WIDTHS) - 1:
        raise ValueError(f'There is no signed width wider than {width}')
    return SIGNED_WIDTHS[index + 1]


def promote_unsigned(value: int, width: IntWidth) -> tuple[int, IntWidth]:
    """
    Convert an unsigned value to the signed width of the same size, or to the
    next wider signed width when the value is above the same-size maximum.
    Never narrows below the size of the unsigned width.
    """
    if width.signed:
        raise ValueError(f'{width} is not an unsigned width')
    width.check(value)
    same_size = signed_counterpart(width)
    if value > same_size.max_value:
        return value, next_signed(same_size)
    return value, same_size


def narrowest_signed(value: int) -> IntWidth:
    for width in SIGNED_WIDTHS[:-1]:
        if width.contains(value):
            return width
    return BIGINT
