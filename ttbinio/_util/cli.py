#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
parse is installed as an executable console_script with this package.

Exit codes: 0 for a clean pass to the end of the file, 1 if the file can't
be opened or decoded to the end, 2 for bad arguments.

"""
from argparse import ArgumentParser, ArgumentTypeError
import logging
import sys

import pytz

import ttbinio
from ttbinio._util.exceptions import TTBinIOError, UsageError


logger = logging.getLogger('ttbinio')

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'

EXIT_OK, EXIT_FAILURE, EXIT_USAGE = 0, 1, 2


class Parser(ArgumentParser):
    """Raise on bad arguments rather than exiting from inside argparse."""

    def error(self, message):
        raise UsageError(message)


def timezone(name):
    try:
        pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise ArgumentTypeError('unknown time zone: %r' % name)
    return name


def make_parser():
    parser = Parser(prog='ttbin', description='dump a *.ttbin activity file')

    parser.add_argument('input',
                        type=str,
                        help='raw file to read')
    parser.add_argument('--tz',
                        type=timezone,
                        metavar='zone',
                        default=None,
                        help='optional; zone for local times, e.g. '
                             'Europe/London (default: system zone)')
    parser.add_argument('--csv',
                        action='store_true',
                        help='print the samples as CSV instead')
    parser.add_argument('-v', '--verbose',
                        action='store_true',
                        help='log decoding details to stderr')
    parser.add_argument('--version',
                        action='version',
                        version='%(prog)s ' + ttbinio.__version__)
    return parser


def parse(argv=None):
    parser = make_parser()

    # Argument handling
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print('%s: error: %s' % (parser.prog, e), file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING)

    # Script begins
    try:
        if args.csv:
            data = ttbinio.read(args.input, tz_str=args.tz)
            print(data.to_csv(na_rep='NA', index_label='time'), end='')
        else:
            ttbinio.dump(args.input, tz_str=args.tz)
    except TTBinIOError as e:
        sys.stdout.flush()
        logger.error('%s', e)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(parse())
