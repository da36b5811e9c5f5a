"""
Meal: the join entity between a Customer and a Waiter.

A meal records who ate, who served, what the bill came to and what was
left as a tip. It carries no queries of its own: customers and waiters
find their meals by scanning the meal registry.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diner.domain.customer import Customer
    from diner.domain.waiter import Waiter

STANDARD_TIP_RATE = 0.20


@dataclass(eq=False)
class Meal:
    waiter: "Waiter"
    customer: "Customer"
    total: float
    tip: float = 0

    @classmethod
    def with_standard_tip(cls, waiter: "Waiter", customer: "Customer", total: float) -> "Meal":
        """Build a meal whose tip is STANDARD_TIP_RATE of the total."""
        return cls(waiter=waiter, customer=customer, total=total, tip=total * STANDARD_TIP_RATE)
