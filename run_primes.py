#!/usr/bin/env python3
"""
Print the first N prime numbers.

Usage:
    python run_primes.py 10
    python run_primes.py 10 --trace --save
    python run_primes.py 10 --config config/default.yaml
"""

import sys

from print_primes.cli import main


if __name__ == '__main__':
    sys.exit(main())
