"""Customer: one side of the Customer and Waiter has-many-through relationship."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from diner.domain.meal import Meal
from diner.domain.registry import Registry

if TYPE_CHECKING:
    from diner.domain.waiter import Waiter


@dataclass(eq=False)
class Customer:
    """
    A diner. Knows nothing about its meals directly; every query scans
    the meal registry it was created with.

    eq=False keeps identity semantics: two customers with the same name
    and age are still two customers.
    """

    name: str
    age: int
    meal_registry: Registry[Meal] = field(repr=False)

    def new_meal(self, waiter: "Waiter", total: float, tip: float = 0) -> Meal:
        """Record a meal this customer had with waiter."""
        return self.meal_registry.add(Meal(waiter=waiter, customer=self, total=total, tip=tip))

    def meals(self) -> list[Meal]:
        """Meals eaten by this customer, oldest first."""
        return self.meal_registry.select(lambda m: m.customer is self)

    def waiters(self) -> list["Waiter"]:
        """The waiter of each meal, in meal order. A waiter seen twice appears twice."""
        return [m.waiter for m in self.meals()]
