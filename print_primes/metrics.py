"""
Reference checks for generated prime sequences.

Responsibility: independent verification only. The generator never calls
anything in this module.
"""

import numpy as np
from typing import Dict, Sequence


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Boolean primality table for 0..N, sieved.

    Bounds below 1 still give a table covering 0 and 1, so callers can
    size it from an arbitrary maximum.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length max(N, 1) + 1; flags[i] is True iff i is prime.
    """
    limit = max(N, 1)
    flags = np.ones(limit + 1, dtype=bool)
    flags[:2] = False
    p = 2
    while p * p <= limit:
        if flags[p]:
            flags[p*p::p] = False
        p += 1
    return flags


def primes_upto(N: int) -> np.ndarray:
    """Primes <= N, increasing. Empty for N < 2."""
    return np.flatnonzero(prime_flags_upto(N))


def is_prime_reference(value: int) -> bool:
    """True iff value >= 2 and no integer in [2, value-1] divides it."""
    if value < 2:
        return False
    return all(value % d != 0 for d in range(2, value))


def check_sequence(primes: Sequence[int], n: int) -> Dict[str, bool]:
    """
    Check a generated sequence against the first-n-primes contract.

    Parameters
    ----------
    primes : sequence of int
        Output of generate(n).
    n : int
        Requested count.

    Returns
    -------
    dict
        'length'     -- exactly n values
        'seed'       -- starts with 2 (empty when n == 0)
        'increasing' -- strictly increasing
        'all_prime'  -- every value is prime
        'no_gaps'    -- equals every prime up to its maximum
    """
    values = np.asarray(primes, dtype=np.int64)
    upper = int(values.max()) if values.size else 1
    flags = prime_flags_upto(upper)

    if n >= 1:
        seed = bool(values.size) and int(values[0]) == 2
    else:
        seed = values.size == 0

    # values below 2 would index flags from the end
    in_range = values.size == 0 or int(values.min()) >= 2
    return {
        'length': int(values.size) == n,
        'seed': seed,
        'increasing': bool(np.all(np.diff(values) > 0)),
        'all_prime': in_range and bool(np.all(flags[values])),
        'no_gaps': bool(np.array_equal(values, primes_upto(upper))),
    }
