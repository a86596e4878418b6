"""
Compatibility mode constants for densematrix.

This module is the SINGLE SOURCE OF TRUTH for mode strings.
Import from here, never use raw strings.

Usage:
    from densematrix.core.modes import MODE_LEGACY

    res = multiply(A, B, mode=MODE_LEGACY)
"""

# Standard linear algebra semantics:
#   multiply requires A.ncols == B.nrows
#   l2_norm validates its operand exactly like l1_norm
MODE_STANDARD = 'standard'

# Reproduces the historical library behaviour:
#   multiply additionally requires A.nrows == B.ncols
#   l2_norm returns 0.0 without signalling for absent or unallocated operands
MODE_LEGACY = 'legacy'

ALL_MODES = frozenset({
    MODE_STANDARD,
    MODE_LEGACY,
})

__all__ = [
    'MODE_STANDARD',
    'MODE_LEGACY',
    'ALL_MODES',
]
