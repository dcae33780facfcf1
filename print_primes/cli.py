"""
Command-line entry point: print the first N primes.

Usage:
    print-primes 10
    print-primes 10 --trace
    print-primes 10 --save --output data/results
    print-primes 10 --config config/default.yaml

stdout carries only the 'Prime: <value>' lines. Everything else
(errors, trace table, status) goes to stderr.
"""

import argparse
import json
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
import yaml

from .metrics import check_sequence
from .primes import generate
from .trials import record, summarize_trials, trials_to_frame

DEFAULT_CONFIG = {
    'trace': False,
    'save': False,
    'output_dir': 'data/results',
}


class InvocationError(ValueError):
    """Bad command line. Raised before any generation happens."""


class UsageError(InvocationError):
    """Wrong number of positional arguments."""


class ParseError(InvocationError):
    """Argument is not an integer."""


class InvalidCount(InvocationError):
    """Count is negative."""


def parse_count(values: List[str]) -> int:
    """
    Turn the positional arguments into the requested count.

    Raises
    ------
    UsageError
        If there is not exactly one argument.
    ParseError
        If the argument is not a base-10 integer.
    InvalidCount
        If the integer is negative.
    """
    if len(values) != 1:
        raise UsageError(f"expected exactly one argument, got {len(values)}")

    raw = values[0]
    # ASCII decimal digits with an optional sign; int() alone also takes
    # '1_000' and non-ASCII digits
    digits = raw.strip()
    if digits[:1] in ('+', '-'):
        digits = digits[1:]
    if not (digits.isascii() and digits.isdigit()):
        raise ParseError(f"not an integer: {raw!r}")

    n = int(raw, 10)

    if n < 0:
        raise InvalidCount(f"count must be non-negative, got {n}")
    return n


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Defaults overlaid with the YAML file at path, if given."""
    config = dict(DEFAULT_CONFIG)
    if path is None:
        return config

    with open(path) as f:
        loaded = yaml.safe_load(f) or {}

    for key in DEFAULT_CONFIG:
        if key in loaded:
            config[key] = loaded[key]
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='print-primes',
                                     description='Print the first N prime numbers')
    parser.add_argument('count', nargs='*', metavar='COUNT',
                        help='Number of primes to print')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to YAML config file')
    parser.add_argument('--trace', action='store_true',
                        help='Write the per-candidate trial table to stderr')
    parser.add_argument('--save', action='store_true',
                        help='Save primes, trial table and metadata')
    parser.add_argument('--output', type=str, default=None,
                        help='Output directory (overrides config output_dir)')
    return parser


def save_results(n: int, primes: List[int], df_trials: pd.DataFrame,
                 output_dir: Path, elapsed: float) -> None:
    """
    Write primes.csv, trials.csv and metadata.json under output_dir.

    Parameters
    ----------
    n : int
        Requested count.
    primes : list of int
        Generated primes.
    df_trials : pd.DataFrame
        Output of trials_to_frame.
    output_dir : Path
        Created if missing.
    elapsed : float
        Generation time in seconds.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    df_primes = pd.DataFrame({
        'index': range(1, len(primes) + 1),
        'prime': primes,
    })
    df_primes.to_csv(output_dir / 'primes.csv', index=False)
    df_trials.to_csv(output_dir / 'trials.csv', index=False)

    metadata = {
        'n': n,
        'generated': datetime.now().isoformat(),
        'elapsed_s': elapsed,
        'summary': summarize_trials(df_trials),
        'checks': check_sequence(primes, n),
    }
    with open(output_dir / 'metadata.json', 'w') as f:
        json.dump(metadata, f, indent=2)

    print(f"Results saved to {output_dir}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        n = parse_count(args.count)
    except InvocationError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    config = load_config(args.config)
    trace = args.trace or bool(config['trace'])
    save = args.save or bool(config['save'])

    if not (trace or save):
        generate(n)
        return 0

    start = time.time()
    primes, trials = record(n)
    elapsed = time.time() - start
    df_trials = trials_to_frame(trials)

    if trace:
        summary = summarize_trials(df_trials)
        print(df_trials.to_string(index=False), file=sys.stderr)
        print(f"\n{summary['candidates']} candidates, "
              f"{summary['accepted']} accepted, "
              f"{summary['total_checks']} divisibility checks",
              file=sys.stderr)

    if save:
        output_dir = Path(args.output or config['output_dir'])
        save_results(n, primes, df_trials, output_dir, elapsed)

    return 0
