"""
Approximate pi with the Leibniz series 4/1 - 4/3 + 4/5 - 4/7 + ...
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_PI_TERMS = 1000


def calculate_pi(n_terms: int = DEFAULT_PI_TERMS) -> float:
    """
    Sum the first n_terms of the Leibniz series.

    Args:
        n_terms: Number of series terms to add

    Returns:
        Absolute value of the partial sum (0.0 when n_terms is 0)

    Raises:
        ValueError: If n_terms is negative
    """
    if n_terms < 0:
        raise ValueError(f"Number of terms must be non-negative, got {n_terms}")

    denominators = 1.0 + 2.0 * np.arange(n_terms)
    # the series is accumulated starting from a negative term
    signs = np.where(np.arange(n_terms) % 2 == 0, -1.0, 1.0)
    pi = abs(float(np.sum(signs * 4.0 / denominators)))

    logger.debug(f"Approximated pi with {n_terms} terms: {pi}")
    return pi
