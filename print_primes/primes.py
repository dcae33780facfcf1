"""
Prime generation by incremental trial division.

Responsibility: produce the first n primes and write them as text lines.
No sieve, no square-root cutoff: every candidate is tested against all
primes found so far, in the order they were found.
"""

import sys
from typing import Callable, List, NamedTuple, Optional, TextIO

SEED_PRIME = 2
LINE_PREFIX = 'Prime:'


class Trial(NamedTuple):
    """One candidate tested against the primes known at that moment."""

    candidate: int
    known: int
    checks: int
    divisor: Optional[int]

    @property
    def accepted(self) -> bool:
        return self.divisor is None


def trial_divide(candidate: int, primes: List[int]) -> Trial:
    """
    Test candidate for divisibility by each of primes, in order.

    The scan stops at the first divisor found.

    Parameters
    ----------
    candidate : int
        Integer under test.
    primes : list of int
        Primes found so far, increasing.

    Returns
    -------
    Trial
        divisor is None when no prime in the list divides candidate.
    """
    checks = 0
    for p in primes:
        checks += 1
        if candidate % p == 0:
            return Trial(candidate, len(primes), checks, p)
    return Trial(candidate, len(primes), checks, None)


def format_prime(p: int) -> str:
    """Output line for one prime, without newline."""
    return f"{LINE_PREFIX} {p}"


def emit(primes: List[int], out: Optional[TextIO] = None) -> None:
    """Write one 'Prime: <value>' line per prime to out (stdout by default)."""
    if out is None:
        out = sys.stdout
    for p in primes:
        out.write(format_prime(p) + '\n')


def generate(n: int, out: Optional[TextIO] = None,
             on_trial: Optional[Callable[[Trial], None]] = None) -> List[int]:
    """
    Return the first n primes and write them to out.

    Parameters
    ----------
    n : int
        Number of primes, n >= 0. Not validated here.
    out : TextIO, optional
        Text sink for the output lines. Defaults to sys.stdout.
    on_trial : callable, optional
        Called with the Trial of every candidate tested, in order.

    Returns
    -------
    list of int
        Exactly n primes, increasing, starting at 2 when n >= 1.
    """
    if n < 1:
        return []

    primes = [SEED_PRIME]
    candidate = SEED_PRIME
    while len(primes) < n:
        candidate += 1
        trial = trial_divide(candidate, primes)
        if on_trial is not None:
            on_trial(trial)
        if trial.accepted:
            primes.append(candidate)

    emit(primes, out)
    return primes
