"""Half- and single-precision float arithmetic on raw bit patterns."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, replace
from enum import IntEnum

_MASK64 = (1 << 64) - 1
_LONG_BITS = 64
ERROR_ARGUMENTS_INVALID = 4


class Kind(IntEnum):
    """Category of a decoded number; values take part in classification sums."""

    ZERO = -9
    INF = 9
    NAN = 18
    NUM = 2


class InvalidArguments(ValueError):
    """Raised for malformed command arguments or operations."""


@dataclass
class Num:
    """Unpacked float with an explicit leading mantissa bit."""

    sign: int
    len_exp: int
    exp: int
    len_mant: int
    mant: int
    kind: Kind
    invisible_bits: int = 0
    last_bit: int = 0


def _int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _high_bit(n: int) -> int:
    return max(0, min(n.bit_length() - 1, _LONG_BITS - 1))


def decode(bits: int, precision: str) -> Num:
    """Unpack a bit pattern as 'h' (half) or 'f' (single) precision."""
    len_exp, len_mant = (5, 10) if precision == "h" else (8, 23)
    bits &= 0xFFFFFFFF
    mant = bits % (1 << len_mant)
    bits >>= len_mant
    bias = (1 << (len_exp - 1)) - 1
    exp = bits % (1 << len_exp)
    if exp:
        exp -= bias
        if exp != bias + 1:
            kind = Kind.NUM
        else:
            kind = Kind.NAN if mant else Kind.INF
        mant += 1 << len_mant
    else:
        kind = Kind.NUM if mant else Kind.ZERO
        diff = len_mant - _high_bit(mant) if mant else 0
        mant <<= diff
        exp = 1 - bias - diff if diff else 0
    bits >>= len_exp
    return Num(1 if bits else 0, len_exp, exp, len_mant, mant, kind)


def multiply(a: Num, b: Num) -> Num:
    """Return the unrounded product."""
    res = replace(a, sign=a.sign ^ b.sign)
    if a.kind == Kind.NUM and b.kind == Kind.NUM:
        res.last_bit = res.invisible_bits = 0
        res.mant = (a.mant * b.mant) & _MASK64
        res.exp = _int16(a.exp + b.exp + (res.mant >> ((res.len_mant + 1) * 2 - 1)))
    else:
        total = a.kind + b.kind
        if a.kind == Kind.NAN or b.kind == Kind.NAN or total == 0:
            res.kind = Kind.NAN
        else:
            res.kind = Kind.ZERO if total < 0 else Kind.INF
    return res


def divide(a: Num, b: Num) -> Num:
    """Return the unrounded quotient."""
    res = replace(a, sign=a.sign ^ b.sign)
    if a.kind == Kind.NUM and b.kind == Kind.NUM:
        shift = _LONG_BITS - (a.len_mant + 1)
        shifted = (a.mant << shift) & _MASK64
        res.last_bit = 0
        res.mant, remainder = divmod(shifted, b.mant)
        res.invisible_bits = 1 if remainder else 0
        exp = a.exp - b.exp
        exp -= res.len_mant - _high_bit(res.mant >> (shift - res.len_mant))
        res.exp = _int16(exp)
    elif abs(a.kind) + abs(b.kind) >= Kind.NAN and a.kind + b.kind:
        res.kind = Kind.NAN
    else:
        res.kind = Kind.INF if a.kind > b.kind else Kind.ZERO
    return res


def _align(a: Num, b: Num) -> int:
    """Bring both operands to a common exponent; 1 if the smaller was lost."""
    if a.exp != b.exp and a.kind * b.kind == 2 * Kind.NUM:
        gap = abs(_int16(a.exp - b.exp))
        if gap <= _LONG_BITS - (a.len_mant + 1):
            larger = a if a.exp >= b.exp else b
            larger.exp -= gap
            larger.mant = (larger.mant << gap) & _MASK64
            return 0
        smaller = a if a.exp <= b.exp else b
        smaller.mant = 0
        return 1
    return 0


def add(a: Num, b: Num) -> Num:
    """Return the unrounded sum."""
    a, b = replace(a), replace(b)
    res = replace(a)
    if a.kind <= Kind.NUM and b.kind <= Kind.NUM:
        res.invisible_bits = _align(a, b)
        if a.mant > b.mant:
            greater = a
        elif b.mant > a.mant:
            greater = b
        else:
            greater = b if a.sign >= b.sign else a
        lesser = b if greater is a else a
        res.exp = greater.exp
        if res.invisible_bits:
            res.mant = greater.mant
            res.last_bit = a.sign ^ b.sign
            if res.last_bit:
                res.mant -= 1
                res.invisible_bits += 1
        else:
            res.last_bit = 0
            if a.sign ^ b.sign:
                res.mant = greater.mant - lesser.mant
            else:
                res.mant = (greater.mant + lesser.mant) & _MASK64
            if res.mant:
                res.exp = _int16(res.exp - (res.len_mant - _high_bit(res.mant)))
        res.sign = greater.sign
        res.kind = greater.kind if res.mant else Kind.ZERO
    else:
        mixed = ((abs(a.kind) + abs(b.kind) + a.sign) ^ b.sign) > Kind.NAN
        res.kind = Kind.NAN if (a.kind + b.kind) and mixed else Kind.INF
        res.sign = a.sign if a.kind == Kind.INF else b.sign
    return res


def subtract(a: Num, b: Num) -> Num:
    """Return the unrounded difference."""
    return add(a, replace(b, sign=0 if b.sign else 1))


def round_num(num: Num, mode: int) -> Num:
    """Normalise and round: 0 toward zero, 1 nearest even, 2 up, 3 down."""
    num = replace(num)
    if num.kind != Kind.NUM:
        return num
    upper = (1 << (num.len_exp - 1)) - 1
    lower = 1 - upper - num.len_mant
    against = (num.sign + mode) & 1
    if lower <= num.exp <= upper:
        diff = _high_bit(num.mant) - num.len_mant
        if diff > 0:
            for _ in range(diff):
                num.last_bit = num.mant & 1
                if num.last_bit:
                    num.invisible_bits += 1
                num.mant >>= 1
        else:
            num.mant = (num.mant << -diff) & _MASK64
        nearest = mode == 1 and num.last_bit and (num.invisible_bits > 1 or num.mant & 1)
        directed = mode > 1 and num.invisible_bits and not against
        if nearest or directed:
            num.mant += 1
            if _high_bit(num.mant) != num.len_mant:
                num.exp += 1
                num.mant >>= 1
    elif num.exp > upper:
        if mode == 1 or (mode and not against):
            num.kind = Kind.INF
        else:
            num.mant = (1 << (num.len_mant + 1)) - 1
            num.exp = upper
    else:
        if mode <= 1 or against:
            num.kind = Kind.ZERO
        else:
            num.mant = 1 << num.len_mant
            num.exp = 1 - upper - num.len_mant
    return num


def format_num(num: Num) -> str:
    """Format as 'nan', '[-]inf' or a hexadecimal float literal."""
    if num.kind == Kind.NAN:
        return "nan"
    if num.kind == Kind.INF:
        return "-inf" if num.sign else "inf"
    mant, exp = (0, 0) if num.kind == Kind.ZERO else (num.mant, num.exp)
    width = 3 if num.len_mant == 10 else 6
    shift = 1 if num.len_mant == 23 else 2
    fraction = (((mant - (1 << num.len_mant)) & _MASK64) << shift) & _MASK64 if mant else 0
    sign = "-" if num.sign else ""
    return f"{sign}0x{1 if mant else 0}.{fraction:0{width}x}p{exp:+d}"


_OPERATIONS = {"*": multiply, "/": divide, "+": add, "-": subtract}


def compute(precision, mode, operand, operation=None, other=None) -> str:
    """Evaluate one operand, or one binary operation, and format the result."""
    if precision not in ("f", "h") or mode not in (0, 1, 2, 3):
        raise InvalidArguments("Incorrect input data")
    num = decode(operand, precision)
    if operation is not None:
        try:
            func = _OPERATIONS[operation]
        except KeyError:
            raise InvalidArguments("Not supported operation") from None
        num = round_num(func(num, decode(other, precision)), mode)
    return format_num(num)


def _parse_int8(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    if not match:
        raise InvalidArguments("Incorrect input data")
    value = int(match.group(1)) & 0xFF
    return value - 0x100 if value & 0x80 else value


def _parse_hex(text: str) -> int:
    match = re.match(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)", text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    return (-value if match.group(1) == "-" else value) & 0xFFFFFFFF


def main(argv=None) -> int:
    """Command entry: PRECISION MODE HEX [OP HEX]."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) not in (3, 5) or args[0] not in ("f", "h"):
            raise InvalidArguments("Incorrect input data")
        mode = _parse_int8(args[1])
        if not 0 <= mode <= 3:
            raise InvalidArguments("Incorrect input data")
        operation = other = None
        if len(args) == 5:
            if len(args[3]) != 1:
                raise InvalidArguments("Incorrect input data")
            operation, other = args[3], _parse_hex(args[4])
        result = compute(args[0], mode, _parse_hex(args[2]), operation, other)
    except InvalidArguments as exc:
        sys.stderr.write(str(exc))
        return ERROR_ARGUMENTS_INVALID
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())