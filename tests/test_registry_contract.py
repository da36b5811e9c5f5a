"""
Contract tests for Registry implementations.

Runs against both InMemoryRegistry and LockedRegistry.
"""

import threading

from diner.adapters.locked_registry import LockedRegistry
from diner.adapters.memory_registry import InMemoryRegistry
from tests.contracts.registry_contract import RegistryContract


class TestInMemoryRegistry(RegistryContract):

    def create_registry(self):
        return InMemoryRegistry()

    def test_isolation_between_instances(self):
        """Two in-memory instances must not share state."""
        r1 = InMemoryRegistry()
        r2 = InMemoryRegistry()
        r1.add(object())
        assert r2.all() == []


class TestLockedRegistry(RegistryContract):

    def create_registry(self):
        return LockedRegistry()

    def test_concurrent_adds_are_all_kept(self):
        registry = LockedRegistry()
        per_thread = 500

        def worker(tag):
            for i in range(per_thread):
                registry.add((tag, i))

        threads = [threading.Thread(target=worker, args=(tag,)) for tag in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        items = registry.all()
        assert len(items) == 8 * per_thread
        # each thread's own items stay in the order it added them
        for tag in range(8):
            assert [i for (t, i) in items if t == tag] == list(range(per_thread))
