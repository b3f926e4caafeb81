#!/usr/bin/env python3
"""
Command-line front end over the boundary operations.

Usage:
    python -m primelib.cli is-prime 97
    python -m primelib.cli factors 360
    python -m primelib.cli goldbach 28 --json
    python -m primelib.cli sieve 100000 --config config/custom.yaml
"""

import argparse
import json
import sys

from .api import PrimeLib
from .config import load_config
from .results import ArrayResult


# command -> (PrimeLib method, argument names)
COMMANDS = {
    'is-prime': ('is_prime', ['n']),
    'ferma': ('ferma_test', ['n']),
    'gcd': ('gcd', ['a', 'b']),
    'lcm': ('lcm', ['a', 'b']),
    'sieve': ('sieve', ['limit']),
    'count': ('prime_count', ['n']),
    'factors': ('prime_factors', ['n']),
    'goldbach': ('goldbach', ['n']),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='primelib',
                                     description='Number-theory primitives')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file (default: config/default.yaml)')
    parser.add_argument('--json', action='store_true',
                        help='Print result as JSON')

    sub = parser.add_subparsers(dest='command', required=True)
    for command, (method, arg_names) in COMMANDS.items():
        p = sub.add_parser(command, help=method.replace('_', ' '))
        for name in arg_names:
            p.add_argument(name, type=int)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    lib = PrimeLib.from_config(load_config(args.config))

    method, arg_names = COMMANDS[args.command]
    result = getattr(lib, method)(*(getattr(args, name) for name in arg_names))

    if isinstance(result, ArrayResult):
        with result:
            ok, error, value = result.ok, result.error, result.tolist()
    else:
        ok, error, value = result.ok, result.error, result.value

    if not ok:
        if args.json:
            print(json.dumps({'error': error.name, 'code': int(error)}))
        print(f"error: {error.name}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({'command': args.command, 'result': value}))
    elif isinstance(value, list):
        print(' '.join(str(v) for v in value))
    else:
        print(value)
    return 0


if __name__ == '__main__':
    sys.exit(main())
