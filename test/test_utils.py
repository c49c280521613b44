from argparse import ArgumentTypeError

import pytest

from varbyte.utils import argparse_bits, parse_uints, smallest_width


# [(bits, width)]
WIDTH_TESTS = [
    (0, 8),
    (8, 8),
    (9, 16),
    (16, 16),
    (17, 32),
    (33, 64),
    (64, 64)
]


@pytest.mark.parametrize(('bits', 'width'), WIDTH_TESTS)
def test_smallest_width(bits, width):
    assert smallest_width(bits) == width


def test_smallest_width_too_large():
    with pytest.raises(ValueError):
        smallest_width(65)


@pytest.mark.parametrize('s', ['-1', '65', 'seven'])
def test_argparse_bits_invalid(s):
    with pytest.raises(ArgumentTypeError):
        argparse_bits(s)


def test_parse_uints_negative():
    with pytest.raises(ValueError):
        list(parse_uints(['1 -2']))
