"""
Tests for the trial-division prime generator.

Covers the first-n-primes contract, the 'Prime: <value>' output lines,
and the short-circuit rule of the divisibility scan.
"""

import io

import pytest

from print_primes.primes import Trial, format_prime, generate, trial_divide
from print_primes.metrics import is_prime_reference


FIRST_TEN = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

SCENARIOS = [
    (0, []),
    (1, [2]),
    (2, [2, 3]),
    (3, [2, 3, 5]),
    (5, [2, 3, 5, 7, 11]),
    (10, FIRST_TEN),
]


def run(n):
    """generate(n) into a buffer; return (primes, lines)."""
    buf = io.StringIO()
    primes = generate(n, out=buf)
    return primes, buf.getvalue().splitlines()


class TestScenarios:
    """Known outputs for small counts."""

    @pytest.mark.parametrize("n, expected", SCENARIOS)
    def test_return_value(self, n, expected):
        primes, _ = run(n)
        assert primes == expected, f"generate({n}) returned {primes}"

    @pytest.mark.parametrize("n, expected", SCENARIOS)
    def test_printed_lines(self, n, expected):
        _, lines = run(n)
        assert lines == [f"Prime: {p}" for p in expected]

    def test_zero_prints_nothing(self):
        """n = 0 is not an error, it just produces no output."""
        buf = io.StringIO()
        assert generate(0, out=buf) == []
        assert buf.getvalue() == ""

    def test_lines_are_newline_terminated(self):
        buf = io.StringIO()
        generate(3, out=buf)
        assert buf.getvalue() == "Prime: 2\nPrime: 3\nPrime: 5\n"

    def test_default_sink_is_stdout(self, capsys):
        generate(2)
        captured = capsys.readouterr()
        assert captured.out == "Prime: 2\nPrime: 3\n"
        assert captured.err == ""

    def test_format_prime(self):
        assert format_prime(2) == "Prime: 2"
        assert format_prime(104729) == "Prime: 104729"


class TestInvariants:
    """Properties that hold for every n."""

    @pytest.mark.parametrize("n", range(0, 60))
    def test_length(self, n):
        primes, lines = run(n)
        assert len(primes) == n
        assert len(lines) == n

    @pytest.mark.parametrize("n", [1, 2, 7, 40])
    def test_starts_with_two(self, n):
        primes, _ = run(n)
        assert primes[0] == 2

    def test_strictly_increasing(self):
        primes, _ = run(100)
        assert all(a < b for a, b in zip(primes, primes[1:]))

    def test_every_value_is_prime(self):
        primes, _ = run(100)
        for p in primes:
            assert is_prime_reference(p), f"{p} is not prime"

    def test_deterministic(self):
        assert run(50) == run(50)

    @pytest.mark.parametrize("n, m", [(0, 5), (1, 1), (3, 10), (10, 25), (25, 80)])
    def test_prefix(self, n, m):
        """generate(n) is a prefix of generate(m) for m >= n."""
        short, _ = run(n)
        long_, _ = run(m)
        assert long_[:n] == short

    def test_hundredth_prime(self):
        primes, _ = run(100)
        assert primes[-1] == 541


class TestTrialDivide:
    """The divisibility scan stops at the first divisor."""

    def test_three_against_seed(self):
        """Candidate 3 sees only [2]: one comparison, accepted."""
        trial = trial_divide(3, [2])
        assert trial == Trial(candidate=3, known=1, checks=1, divisor=None)
        assert trial.accepted

    def test_four_rejected_by_two(self):
        """4 is the first composite: rejected by 2 after one check."""
        trial = trial_divide(4, [2, 3])
        assert trial.divisor == 2
        assert trial.checks == 1
        assert not trial.accepted

    def test_nine_rejected_by_three(self):
        """9 needs two checks: 2 does not divide it, 3 does."""
        trial = trial_divide(9, [2, 3, 5, 7])
        assert trial.divisor == 3
        assert trial.checks == 2

    def test_no_square_root_cutoff(self):
        """A prime is checked against every known prime, not only those <= sqrt."""
        trial = trial_divide(11, [2, 3, 5, 7])
        assert trial.accepted
        assert trial.checks == 4

    def test_scan_order_is_insertion_order(self):
        """30 is divisible by 2, 3 and 5; 2 is reported because it is first."""
        assert trial_divide(30, [2, 3, 5]).divisor == 2

    def test_on_trial_sees_every_candidate(self):
        seen = []
        generate(5, out=io.StringIO(), on_trial=seen.append)
        assert [t.candidate for t in seen] == [3, 4, 5, 6, 7, 8, 9, 10, 11]
        assert [t.candidate for t in seen if t.accepted] == [3, 5, 7, 11]

    def test_on_trial_not_called_for_small_n(self):
        """n <= 1 never enters the while loop."""
        seen = []
        generate(0, out=io.StringIO(), on_trial=seen.append)
        generate(1, out=io.StringIO(), on_trial=seen.append)
        assert seen == []


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
