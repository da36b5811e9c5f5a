"""
Demo dining room for the interactive console.

Extracted from scripts/console.py so the seeding and the summary can be
imported and tested without starting a shell.
"""

import logging

from diner.restaurant import Restaurant

log = logging.getLogger(__name__)


def seed_demo(restaurant: Restaurant) -> dict:
    """
    Fill restaurant with a small cast and return it by lower-case name.

    Howard and Daniel share Terrance; Lisa is Terrance's best tipper;
    Andrew has never served anyone.
    """
    people = {
        "howard": restaurant.new_customer("Howard", 30),
        "daniel": restaurant.new_customer("Daniel", 30),
        "lisa": restaurant.new_customer("Lisa", 27),
        "terrance": restaurant.new_waiter("Terrance", 1),
        "joe": restaurant.new_waiter("Joe", 10),
        "esmery": restaurant.new_waiter("Esmery", 2),
        "andrew": restaurant.new_waiter("Andrew", 3),
    }

    people["howard"].new_meal(people["terrance"], 15, 2)
    people["howard"].new_meal(people["joe"], 15, 4)
    people["daniel"].new_meal(people["terrance"], 20, 1)
    people["daniel"].new_meal(people["esmery"], 15, 3)
    people["lisa"].new_meal(people["terrance"], 30, 6)
    restaurant.new_meal_with_standard_tip(people["joe"], people["lisa"], 25)

    log.info(
        "Demo seeded: %d customer(s), %d waiter(s), %d meal(s)",
        len(restaurant.all_customers()),
        len(restaurant.all_waiters()),
        len(restaurant.all_meals()),
    )
    return people


def summarize(restaurant: Restaurant) -> list[str]:
    """One line per waiter: meals served and best tipper."""
    lines = []
    for waiter in restaurant.all_waiters():
        best = waiter.best_tipper()
        lines.append(
            f"{waiter.name:<10} meals={len(waiter.meals()):<3} "
            f"best_tipper={best.name if best is not None else '-'}"
        )
    return lines
