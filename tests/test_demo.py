"""Demo seeding used by scripts/console.py."""

import logging

from diner.demo import seed_demo, summarize
from diner.restaurant import Restaurant


def test_seed_demo_populates_registries():
    restaurant = Restaurant.create("memory")
    people = seed_demo(restaurant)

    assert [c.name for c in restaurant.all_customers()] == ["Howard", "Daniel", "Lisa"]
    assert [w.name for w in restaurant.all_waiters()] == ["Terrance", "Joe", "Esmery", "Andrew"]
    assert len(restaurant.all_meals()) == 6
    assert people["terrance"].best_tipper() is people["lisa"]
    assert people["joe"].best_tipper() is people["lisa"]
    assert people["andrew"].best_tipper() is None


def test_seed_demo_logs_counts(caplog):
    restaurant = Restaurant.create("memory")
    with caplog.at_level(logging.INFO, logger="diner.demo"):
        seed_demo(restaurant)
    assert "3 customer(s), 4 waiter(s), 6 meal(s)" in caplog.text


def test_summarize_one_line_per_waiter():
    restaurant = Restaurant.create("memory")
    seed_demo(restaurant)
    lines = summarize(restaurant)

    assert len(lines) == 4
    assert lines[0].startswith("Terrance")
    assert "best_tipper=Lisa" in lines[0]
    assert "best_tipper=Daniel" in lines[2]
    assert lines[3].startswith("Andrew")
    assert "best_tipper=-" in lines[3]


def test_reset_logs_at_info(caplog):
    restaurant = Restaurant.create("memory")
    with caplog.at_level(logging.INFO, logger="diner.restaurant"):
        restaurant.reset()
    assert "registries cleared" in caplog.text
