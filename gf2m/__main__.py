"""List the catalogue of irreducible polynomials shipped with gf2m.

Run as:

    python -m gf2m [-d DEGREE] [--check] [--log-level LL] [--no-log]

For each polynomial the degree, the polynomial as hexadecimal integer, the order
of the multiplicative group of the generated field, and the polynomial in terms
of powers of x are printed. With --check each listed polynomial is also tested
for irreducibility, and the exit status is 1 if any test fails.
"""

import sys
import argparse
import logging
import gf2m
from gf2m import gf2x
from gf2m import primes


def get_arg_parser():
    """Return parser for command line arguments."""
    parser = argparse.ArgumentParser(prog='python -m gf2m',
                                     description='Catalogue of irreducible polynomials.')
    parser.add_argument('-V', '--VERSION', action='store_true',
                        help='print gf2m version number and exit')
    parser.add_argument('-d', '--degree', type=int, metavar='d', action='append',
                        help='list polynomial of degree d only (repeat as needed)')
    parser.add_argument('--check', action='store_true',
                        help='test polynomials for irreducibility')
    parser.add_argument('--log-level', type=str, metavar='ll',
                        help='logging level ll=debug/info(default)/warning/error')
    parser.add_argument('--no-log', action='store_true',
                        help='disable logging messages')
    parser.set_defaults(log_level='info')
    return parser


def set_logging(options):
    """Set logging level as given by options."""
    if options.no_log:
        logging.basicConfig(level=logging.WARNING, force=True)
        return

    ch = options.log_level[0].upper()
    ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
    ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
    level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
             logging.CRITICAL)[int(ch)]
    if sys.flags.dev_mode:
        level = logging.DEBUG
    logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout,
                        force=True)
    logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')


def main(args=None):
    """Print (and optionally check) the catalogue, return exit status."""
    options = get_arg_parser().parse_args(args)
    if options.VERSION:
        print(f'gf2m {gf2m.__version__}')
        return 0

    set_logging(options)
    degrees = options.degree or sorted(primes.PRIMES)
    status = 0
    for d in degrees:
        try:
            p = primes.prime_polynomial(d)
        except ValueError as exc:
            logging.error(exc)
            return 2

        print(f'{d:2d} {p:#12x} {primes.field_order(p):10d}  {gf2x.to_terms(p)}')
        if options.check:
            if gf2x.is_irreducible(p):
                logging.debug(f'Degree {d} polynomial is irreducible')
            else:
                logging.error(f'Degree {d} polynomial {gf2x.to_terms(p)} is not irreducible')
                status = 1
    if options.check and status == 0:
        logging.info(f'All {len(degrees)} polynomials are irreducible')
    return status


if __name__ == '__main__':
    sys.exit(main())
