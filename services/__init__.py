"""
Lot services — modular organization of lot selection.

    from lotman.services import AllocationPlan, LotAllocation, allocate, find_expiring_lots
"""

from lotman.services.allocation import AllocationPlan, LotAllocation, allocate
from lotman.services.expiry import find_expiring_lots

__all__ = [
    'AllocationPlan',
    'LotAllocation',
    'allocate',
    'find_expiring_lots',
]
