import threading
import unittest

from configstore.core.item import Item, ItemList
from configstore.core.provider import ConfigProvider, ErrorProvider, InMemoryProvider


class TestInMemoryProvider(unittest.TestCase):
    """Test the lock protected in-memory item buffer."""

    def setUp(self):
        self.provider = InMemoryProvider()

    def test_starts_empty(self):
        self.assertEqual(self.provider.items(), ItemList())

    def test_add_appends_and_chains(self):
        result = self.provider.add(Item("a", "1")).add(Item("b", "2"), Item("c", "3"))
        self.assertIs(result, self.provider)
        self.assertEqual([it.key for it in self.provider.items()], ["a", "b", "c"])

    def test_items_returns_snapshot(self):
        self.provider.add(Item("a", "1"))
        snapshot = self.provider.items()
        self.provider.add(Item("b", "2"))
        self.assertEqual(len(snapshot), 1)
        self.assertEqual(len(self.provider.items()), 2)

    def test_replace_swaps_whole_list(self):
        self.provider.add(Item("a", "1"), Item("b", "2"))
        self.provider.replace([Item("c", "3")])
        self.assertEqual(self.provider.items(), ItemList([Item("c", "3")]))

    def test_is_a_config_provider(self):
        self.assertIsInstance(self.provider, ConfigProvider)

    def test_concurrent_add(self):
        """Test thread safety during concurrent additions."""
        errors = []

        def add_items(thread_id):
            try:
                for i in range(100):
                    self.provider.add(Item(f"key_{thread_id}_{i}", str(i)))
            except Exception as e:
                errors.append(e)

        threads = []
        for i in range(8):
            thread = threading.Thread(target=add_items, args=(i,))
            threads.append(thread)
            thread.start()

        for thread in threads:
            thread.join()

        self.assertEqual(len(errors), 0)
        self.assertEqual(len(self.provider.items()), 800)


class TestErrorProvider(unittest.TestCase):

    def test_always_raises_its_error(self):
        error = FileNotFoundError("missing.yaml")
        provider = ErrorProvider(error)
        for _ in range(2):
            with self.assertRaises(FileNotFoundError) as context:
                provider.items()
            self.assertIs(context.exception, error)

    def test_traceback_does_not_grow_across_queries(self):
        error = FileNotFoundError("missing.yaml")
        provider = ErrorProvider(error)

        for _ in range(500):
            try:
                provider.items()
            except FileNotFoundError:
                pass

        depth = 0
        tb = error.__traceback__
        while tb is not None:
            depth += 1
            tb = tb.tb_next
        self.assertLess(depth, 10)


if __name__ == '__main__':
    unittest.main()
