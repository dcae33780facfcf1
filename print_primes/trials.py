"""
Per-candidate record of trial division.

Makes the loop structure of generate() observable: how many candidates
were tested, how many divisibility checks each needed, and which prime
(if any) rejected it.
"""

import io
import pandas as pd
from typing import Dict, List, Optional, TextIO, Tuple

from .primes import Trial, generate

COLUMNS = ['candidate', 'known', 'checks', 'divisor', 'accepted']


def record(n: int, out: Optional[TextIO] = None) -> Tuple[List[int], List[Trial]]:
    """
    Run generate(n) and collect every Trial.

    Parameters
    ----------
    n : int
        Number of primes.
    out : TextIO, optional
        Sink for the 'Prime:' lines. Defaults to sys.stdout.

    Returns
    -------
    tuple
        (primes, trials)
    """
    trials = []
    primes = generate(n, out=out, on_trial=trials.append)
    return primes, trials


def trials_to_frame(trials: List[Trial]) -> pd.DataFrame:
    """
    Tabulate trials, one row per candidate.

    divisor is a nullable integer column, missing for accepted candidates.
    """
    rows = [{
        'candidate': t.candidate,
        'known': t.known,
        'checks': t.checks,
        'divisor': t.divisor,
        'accepted': t.accepted,
    } for t in trials]

    df = pd.DataFrame(rows, columns=COLUMNS)
    df['divisor'] = df['divisor'].astype('Int64')
    df['accepted'] = df['accepted'].astype(bool)
    return df


def trial_table(n: int) -> pd.DataFrame:
    """Trial table for generate(n), discarding the printed lines."""
    _, trials = record(n, out=io.StringIO())
    return trials_to_frame(trials)


def summarize_trials(df: pd.DataFrame) -> Dict[str, int]:
    """
    Summary counts for a trial table.

    Returns
    -------
    dict
        candidates, accepted, rejected, total_checks, max_checks
        (plain ints, JSON-serializable).
    """
    accepted = int(df['accepted'].sum())
    return {
        'candidates': len(df),
        'accepted': accepted,
        'rejected': len(df) - accepted,
        'total_checks': int(df['checks'].sum()),
        'max_checks': int(df['checks'].max()) if len(df) else 0,
    }
