"""Waiter: the other side of the Customer and Waiter relationship."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from diner.domain.meal import Meal
from diner.domain.registry import Registry

if TYPE_CHECKING:
    from diner.domain.customer import Customer


@dataclass(eq=False)
class Waiter:
    name: str
    experience: int  # years
    meal_registry: Registry[Meal] = field(repr=False)

    def new_meal(self, customer: "Customer", total: float, tip: float = 0) -> Meal:
        """Record a meal this waiter served to customer."""
        return self.meal_registry.add(Meal(waiter=self, customer=customer, total=total, tip=tip))

    def meals(self) -> list[Meal]:
        """Meals served by this waiter, oldest first."""
        return self.meal_registry.select(lambda m: m.waiter is self)

    def customers(self) -> list["Customer"]:
        return [m.customer for m in self.meals()]

    def best_tipper(self) -> "Customer | None":
        """
        Customer who left the largest tip on one of this waiter's meals.

        Only a strictly larger tip replaces the current best, so ties go
        to the earliest meal. Returns None when the waiter has served nobody.
        """
        best: Meal | None = None
        for meal in self.meals():
            if best is None or meal.tip > best.tip:
                best = meal
        if best is None:
            return None
        return best.customer
