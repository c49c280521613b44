from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
from pathlib import Path
from timeit import default_timer as timer
from typing import Optional

from varbyte.binary import Packer
from varbyte.common import WIDTHS
from varbyte.utils import argparse_bits, parse_uints, smallest_width


# -----------------------------------------------------------------------------

ACTION_PACK = 'pack'

DEFAULT_WIDTH = None  # smallest entry point holding the bit count


# -----------------------------------------------------------------------------

def cmd_pack(
        path_in: Path,
        path_out: Path,
        bits: int,
        width: int
) -> tuple[int, int, int]:
    with (
        path_in.open('r') as f_in,
        path_out.open('wb') as f_out
    ):
        packer = Packer()
        count = 0

        time_start = timer()

        for x in parse_uints(f_in):
            packer.write(f_out, x, bits, width)
            count += 1

        padding = packer.flush(f_out)

        time_end = timer()

        size = f_out.tell()

    delta = '{0:.6g}'.format(time_end - time_start)
    print(f"Packed {count} values into {size} bytes "
          f"({padding} padding bits) in {delta} seconds")

    return count, size, padding


# -----------------------------------------------------------------------------

def make_argument_parser():
    parser = ArgumentParser(
        prog='varbyte',
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    # -------------------------------------------------------------------------

    action = parser.add_subparsers(
        title='action',
        dest='action',
        required=True
    )

    # -------------------------------------------------------------------------

    pack = action.add_parser(
        ACTION_PACK,
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    pack.add_argument('infile', type=Path)
    pack.add_argument('outfile', type=Path)

    pack.add_argument(
        '-n', '--bits',
        type=argparse_bits,
        required=True,
        help=(
            "Number of low bits written for each value. "
            "Higher bits of the values are ignored."
        ),
        metavar='N'
    )

    pack.add_argument(
        '-w', '--width',
        type=int,
        choices=WIDTHS,
        default=DEFAULT_WIDTH,
        help=(
            "Width of the write entry point. Values must fit in it. "
            "Defaults to the smallest width holding N bits."
        )
    )

    # -------------------------------------------------------------------------

    return parser


def main(argv: Optional[list[str]] = None):
    parser = make_argument_parser()
    args = parser.parse_args(argv)

    if args.action == ACTION_PACK:
        width = args.width or smallest_width(args.bits)

        if args.bits > width:
            parser.error(f"cannot write {args.bits} bits with width {width}")

        try:
            cmd_pack(args.infile, args.outfile, args.bits, width)
        except (ValueError, OSError) as e:
            parser.exit(1, f"{parser.prog}: error: {e}\n")


# -----------------------------------------------------------------------------

if __name__ == '__main__':
    main()
