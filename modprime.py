#!/usr/bin/env python3
"""modprime command line tool

Thin wrapper exposing the number-theory primitives: modular reduction,
extended gcd, inverses, powers, linear congruences, floor square roots and
deterministic primality checks.  ``table`` writes the small-prime table
resource that ``--table`` can load back.
"""

from __future__ import annotations

import argparse
import logging
import sys

from int_sqrt import integer_square_root
from int_width import DEFAULT_BITS, SUPPORTED_WIDTHS
from logger import set_verbose_mode, setup_logger
from modular import extended_gcd, inv_modulo, modulo, power_mod, solve_linear_congruence
from primality import is_prime, primes_in_range
from prime_table import TABLE_SIZE, PrimeTable

log = logging.getLogger(__name__)


def fmt(value) -> str:
    return "none" if value is None else str(value)


def table_from_args(args) -> PrimeTable | None:
    """Prime table named by ``--table``, or ``None`` for the built-in one."""
    if not args.table:
        return None
    table = PrimeTable.load(args.table)
    log.debug("Using %r from %s", table, args.table)
    return table


# ─────────────────────────────────────────────────────────────────────────────
# Subcommands
# ─────────────────────────────────────────────────────────────────────────────

def cmd_mod(args):
    print(modulo(args.a, args.m, bits=args.bits))


def cmd_egcd(args):
    s, t, g = extended_gcd(args.a, args.b, bits=args.bits)
    print(f"s={s} t={t} gcd={g}")


def cmd_inv(args):
    print(fmt(inv_modulo(args.x, args.m, bits=args.bits)))


def cmd_powmod(args):
    print(fmt(power_mod(args.b, args.e, args.m, bits=args.bits)))


def cmd_solve(args):
    print(fmt(solve_linear_congruence(args.a, args.b, args.m, bits=args.bits)))


def cmd_isqrt(args):
    print(integer_square_root(args.n, bits=args.bits))


def cmd_isprime(args):
    table = table_from_args(args)
    for n in args.n:
        verdict = "prime" if is_prime(n, bits=args.bits, table=table) else "composite"
        print(f"{n}: {verdict}")


def cmd_scan(args):
    table = table_from_args(args)
    found = primes_in_range(args.lo, args.hi, bits=args.bits, table=table, progress=args.progress)
    if args.list:
        for p in found:
            print(p)
    print(f"{len(found)} primes in [{args.lo}, {args.hi})")


def cmd_table(args):
    new_table = PrimeTable.generate(args.count)
    new_table.save(args.out)
    print(f"Wrote {len(new_table)} primes (max {new_table.max}) to {args.out}")


# ─────────────────────────────────────────────────────────────────────────────
# Command-line interface
# ─────────────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modprime", description="Modular arithmetic and primality toolkit")
    parser.add_argument("--bits", type=int, choices=SUPPORTED_WIDTHS, default=DEFAULT_BITS,
                        help=f"Signed integer width (default {DEFAULT_BITS})")
    parser.add_argument("--table", help="Load the prime table from an .npy file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("mod", help="a mod m in [0, m)")
    p.add_argument("a", type=int)
    p.add_argument("m", type=int)
    p.set_defaults(func=cmd_mod)

    p = sub.add_parser("egcd", help="Extended gcd: s, t, g with a*s + b*t = g")
    p.add_argument("a", type=int)
    p.add_argument("b", type=int)
    p.set_defaults(func=cmd_egcd)

    p = sub.add_parser("inv", help="Inverse of x modulo m")
    p.add_argument("x", type=int)
    p.add_argument("m", type=int)
    p.set_defaults(func=cmd_inv)

    p = sub.add_parser("powmod", help="b**e mod m (naive, O(e))")
    p.add_argument("b", type=int)
    p.add_argument("e", type=int)
    p.add_argument("m", type=int)
    p.set_defaults(func=cmd_powmod)

    p = sub.add_parser("solve", help="Solve a*x = b (mod m)")
    p.add_argument("a", type=int)
    p.add_argument("b", type=int)
    p.add_argument("m", type=int)
    p.set_defaults(func=cmd_solve)

    p = sub.add_parser("isqrt", help="floor(sqrt(n))")
    p.add_argument("n", type=int)
    p.set_defaults(func=cmd_isqrt)

    p = sub.add_parser("isprime", help="Deterministic primality test")
    p.add_argument("n", type=int, nargs="+")
    p.set_defaults(func=cmd_isprime)

    p = sub.add_parser("scan", help="Count primes in [lo, hi)")
    p.add_argument("lo", type=int)
    p.add_argument("hi", type=int)
    p.add_argument("--list", action="store_true", help="Print every prime found")
    p.add_argument("--no-progress", dest="progress", action="store_false", help="Hide the progress bar")
    p.set_defaults(func=cmd_scan)

    p = sub.add_parser("table", help="Write the small-prime table to an .npy file")
    p.add_argument("out", help="Output path")
    p.add_argument("--count", type=int, default=TABLE_SIZE, help=f"Number of primes (default {TABLE_SIZE})")
    p.set_defaults(func=cmd_table)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    set_verbose_mode(args.verbose)
    setup_logger()

    try:
        args.func(args)
    except (ValueError, OverflowError, OSError) as e:
        print("Error:", e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
