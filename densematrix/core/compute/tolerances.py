"""
Tolerance tiers for numerical comparison.

All arithmetic uses naive sequential summation in float64, so results
can drift from a pairwise or BLAS reference by a few ulps per term.

Used by the test suite and by Matrix.allclose().
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Bit-for-bit: element access, copies, entry-wise add
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No rounding involved',
)

# Sequential float64 accumulation compared against numpy references
NAIVE_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='naive_fp64',
    description='Naive summation vs. pairwise/BLAS reference',
)

# Long accumulations (large inner dimension or many entries)
NAIVE_FP64_LONG = ToleranceTier(
    rtol=1e-9,
    atol=1e-11,
    name='naive_fp64_long',
    description='Naive summation over more than ~1e4 terms',
)

# Above this many accumulated terms NAIVE_FP64 is no longer reliable
LONG_ACCUMULATION_THRESHOLD = 10_000


def select_tolerance(n_terms: int) -> ToleranceTier:
    """Select a tolerance tier for a sum of n_terms products or entries."""
    if n_terms <= 1:
        return EXACT
    if n_terms > LONG_ACCUMULATION_THRESHOLD:
        return NAIVE_FP64_LONG
    return NAIVE_FP64
