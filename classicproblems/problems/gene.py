"""
Compress a gene string to two bits per nucleotide.

Each nucleotide occupies a pair of bits in a boolean bit vector:
A = 00, C = 01, G = 10, T = 11.
"""

import logging
from typing import Dict, Tuple

import numpy as np

logger = logging.getLogger(__name__)

NUCLEOTIDE_BITS: Dict[str, Tuple[bool, bool]] = {
    "A": (False, False),
    "C": (False, True),
    "G": (True, False),
    "T": (True, True),
}

BITS_NUCLEOTIDE: Dict[Tuple[bool, bool], str] = {bits: nucleotide for nucleotide, bits in NUCLEOTIDE_BITS.items()}


class CompressedGene:
    """
    Gene sequence stored as a 2-bit-per-nucleotide bit vector.

    Input is case-insensitive. Characters other than A, C, G and T are
    logged and left out of the compressed sequence.
    """

    def __init__(self, original: str):
        """
        Compress a gene string.

        Args:
            original: Nucleotide string, e.g. "ATGAATGCC"
        """
        self.bit_vector = self._compress(original)
        self.length = len(self.bit_vector) // 2

    @staticmethod
    def _compress(gene: str) -> np.ndarray:
        bits = np.zeros(len(gene) * 2, dtype=bool)
        position = 0
        for index, nucleotide in enumerate(gene.upper()):
            pair = NUCLEOTIDE_BITS.get(nucleotide)
            if pair is None:
                logger.warning(f"Unexpected character {nucleotide!r} at {index}")
                continue
            bits[position], bits[position + 1] = pair
            position += 2
        return bits[:position]

    def decompress(self) -> str:
        """Rebuild the nucleotide string from the bit vector."""
        pairs = self.bit_vector.reshape(-1, 2)
        return "".join(BITS_NUCLEOTIDE[(bool(first), bool(second))] for first, second in pairs)

    @property
    def nbytes(self) -> int:
        """Size in bytes of the bit vector when packed eight bits to a byte."""
        return np.packbits(self.bit_vector).nbytes

    def __len__(self):
        return self.length

    def __str__(self):
        return self.decompress()
