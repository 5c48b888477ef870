"""
Small classic exercises: series approximation, recursion, memoization,
a toy cipher and bit-level compression.
"""

from .pi import calculate_pi
from .fibonacci import fib_recursive, fib_memoized, fib_iterative
from .hanoi import Stack, hanoi, solve_towers
from .otp import random_key, encrypt, decrypt
from .gene import CompressedGene

__all__ = [
    'calculate_pi',
    'fib_recursive',
    'fib_memoized',
    'fib_iterative',
    'Stack',
    'hanoi',
    'solve_towers',
    'random_key',
    'encrypt',
    'decrypt',
    'CompressedGene',
]
