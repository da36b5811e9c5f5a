"""
Restaurant: owns the three registries and builds the entities.

Customers and waiters are linked only through meals:

  Customer ──< Meal >── Waiter

Each entity is registered at creation. Customers and waiters receive
the meal registry so their relationship queries can scan it; nothing
else is shared between them.
"""

import logging
from dataclasses import dataclass

from diner.adapters.factory import create_registry
from diner.domain.customer import Customer
from diner.domain.meal import Meal
from diner.domain.registry import Registry
from diner.domain.waiter import Waiter

log = logging.getLogger(__name__)


@dataclass
class RestaurantConfig:
    customers: Registry[Customer]
    waiters: Registry[Waiter]
    meals: Registry[Meal]


class Restaurant:
    """
    Composition root for one dining room.

    Two restaurants never share state, so tests can build a fresh one
    per case or call reset() on a shared one.
    """

    def __init__(self, config: RestaurantConfig):
        self._customers = config.customers
        self._waiters = config.waiters
        self._meals = config.meals

    @classmethod
    def create(cls, backend: str | None = None) -> "Restaurant":
        """Build a restaurant whose registries all use the same backend."""
        return cls(
            RestaurantConfig(
                customers=create_registry(backend),
                waiters=create_registry(backend),
                meals=create_registry(backend),
            )
        )

    # -- construction --------------------------------------------------------

    def new_customer(self, name: str, age: int) -> Customer:
        customer = self._customers.add(Customer(name=name, age=age, meal_registry=self._meals))
        log.debug("Customer registered: %s (age %s)", name, age)
        return customer

    def new_waiter(self, name: str, experience: int) -> Waiter:
        waiter = self._waiters.add(
            Waiter(name=name, experience=experience, meal_registry=self._meals)
        )
        log.debug("Waiter registered: %s (%s yr)", name, experience)
        return waiter

    def new_meal(self, waiter: Waiter, customer: Customer, total: float, tip: float = 0) -> Meal:
        """Register a meal. References are stored as given, not checked."""
        meal = self._meals.add(Meal(waiter=waiter, customer=customer, total=total, tip=tip))
        log.debug("Meal registered: %r served %r, total=%s tip=%s", waiter, customer, total, tip)
        return meal

    def new_meal_with_standard_tip(self, waiter: Waiter, customer: Customer, total: float) -> Meal:
        meal = self._meals.add(Meal.with_standard_tip(waiter, customer, total))
        log.debug("Meal registered: %r served %r, total=%s tip=%s (standard)",
                  waiter, customer, total, meal.tip)
        return meal

    # -- registry views ------------------------------------------------------

    def all_customers(self) -> list[Customer]:
        return self._customers.all()

    def all_waiters(self) -> list[Waiter]:
        return self._waiters.all()

    def all_meals(self) -> list[Meal]:
        return self._meals.all()

    def reset(self) -> None:
        """Empty every registry. Entities created before keep working but see no meals."""
        self._customers.clear()
        self._waiters.clear()
        self._meals.clear()
        log.info("Restaurant reset: all registries cleared")
