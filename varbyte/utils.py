from argparse import ArgumentTypeError
from typing import Iterable, Iterator

from varbyte.common import WIDTHS


def argparse_bits(s: str) -> int:
    """
    >>> argparse_bits('7')
    7
    >>> argparse_bits('0')
    0
    """
    try:
        n = int(s)
    except ValueError:
        raise ArgumentTypeError(f"invalid bit count: {s!r}")

    if not 0 <= n <= WIDTHS[-1]:
        raise ArgumentTypeError(f"bit count must be in 0..{WIDTHS[-1]}")

    return n


def parse_uints(lines: Iterable[str]) -> Iterator[int]:
    """
    Parse whitespace separated unsigned integers, prefixes allowed.
    >>> list(parse_uints(['1 0x1f', '', '0b101  0o7']))
    [1, 31, 5, 7]
    """
    for line in lines:
        for token in line.split():
            x = int(token, 0)
            if x < 0:
                raise ValueError(f"Negative value: {token}")
            yield x


def smallest_width(n: int) -> int:
    """
    Smallest entry point width holding n bits.
    >>> smallest_width(0)
    8
    >>> smallest_width(9)
    16
    >>> smallest_width(64)
    64
    """
    for w in WIDTHS:
        if n <= w:
            return w
    raise ValueError(f"No entry point holds {n} bits.")
