"""Operations module for high-level minivcs operations.

This module contains the logic for:
- Checkout and branch switching
- Status computation
"""

from minivcs.operations.checkout import CheckoutResult, checkout, switch_branch
from minivcs.operations.status import StatusReport, compute_status

__all__ = [
    'CheckoutResult', 'checkout', 'switch_branch',
    'StatusReport', 'compute_status',
]
