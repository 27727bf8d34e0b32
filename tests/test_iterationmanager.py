import unittest

from itersolve import IterSolve
from itersolve.typing import IterationEvent, IterationListener, IterationManager
from itersolve import ErrorKind, MaxCountExceededError
from utils import backends

class Recorder(IterationListener):

    def __init__(self, name: str, calls: list) -> None:
        self.name = name
        self.calls = calls

    def initialization_performed(self, event) -> None:
        self.calls.append((self.name, "initialization", event.iterations))

    def iteration_started(self, event) -> None:
        self.calls.append((self.name, "started", event.iterations))

    def iteration_performed(self, event) -> None:
        self.calls.append((self.name, "performed", event.iterations))

    def termination_performed(self, event) -> None:
        self.calls.append((self.name, "termination", event.iterations))

class TestIterationManager(unittest.TestCase):

    def setUp(self):
        self.itersolve = [IterSolve(backend) for backend in backends]

    def test_count(self) -> None:
        manager = IterationManager(3)
        self.assertEqual(manager.iterations, 0)
        for i in range(3):
            manager.increment_iteration_count()
            self.assertEqual(manager.iterations, i + 1)

        with self.assertRaises(MaxCountExceededError) as ctx:
            manager.increment_iteration_count()
        self.assertEqual(ctx.exception.max_count, 3)
        self.assertEqual(ctx.exception.kind, ErrorKind.RESOURCE_EXHAUSTED)
        self.assertTrue(ctx.exception.retryable)
        self.assertEqual(manager.iterations, 3)

        manager.reset_iteration_count()
        self.assertEqual(manager.iterations, 0)
        manager.increment_iteration_count()
        self.assertEqual(manager.iterations, 1)

    def test_invalid_limit(self) -> None:
        with self.assertRaises(ValueError):
            IterationManager(0)
        with self.assertRaises(ValueError):
            IterationManager(-5)

    def test_callback(self) -> None:
        limits = []
        manager = IterationManager(1, callback=limits.append)
        manager.increment_iteration_count()
        self.assertEqual(limits, [])
        with self.assertRaises(MaxCountExceededError):
            manager.increment_iteration_count()
        self.assertEqual(limits, [1])

        class Exhausted(Exception):
            pass

        def raise_exhausted(limit: int) -> None:
            raise Exhausted(limit)

        manager = IterationManager(1, callback=raise_exhausted)
        manager.increment_iteration_count()
        with self.assertRaises(Exhausted):
            manager.increment_iteration_count()

    def test_dispatch_order(self) -> None:
        calls = []
        manager = IterationManager(10)
        first = Recorder("first", calls)
        second = Recorder("second", calls)
        manager.add_listener(first)
        manager.add_listener(second)
        self.assertEqual(manager.listeners, (first, second))

        event = IterationEvent(self, 4)
        manager.fire_initialization_event(event)
        manager.fire_iteration_started_event(event)
        manager.fire_iteration_performed_event(event)
        manager.fire_termination_event(event)
        self.assertEqual(calls, [("first", "initialization", 4), ("second", "initialization", 4),
                                 ("first", "started", 4), ("second", "started", 4),
                                 ("first", "performed", 4), ("second", "performed", 4),
                                 ("first", "termination", 4), ("second", "termination", 4)])

    def test_remove_listener(self) -> None:
        calls = []
        manager = IterationManager(10)
        listener = Recorder("listener", calls)
        manager.add_listener(listener)
        manager.remove_listener(listener)
        manager.remove_listener(listener)
        manager.remove_listener(Recorder("unknown", calls))
        self.assertEqual(manager.listeners, ())

        manager.fire_initialization_event(IterationEvent(self, 0))
        self.assertEqual(calls, [])

    def test_listener_error_propagates(self) -> None:
        calls = []

        class Failing(IterationListener):
            def iteration_performed(self, event) -> None:
                raise RuntimeError("failing listener")

        manager = IterationManager(10)
        manager.add_listener(Failing())
        manager.add_listener(Recorder("after", calls))
        with self.assertRaises(RuntimeError):
            manager.fire_iteration_performed_event(IterationEvent(self, 1))
        self.assertEqual(calls, [])

    def test_listener_added_during_dispatch(self) -> None:
        calls = []
        manager = IterationManager(10)
        late = Recorder("late", calls)

        class Adding(IterationListener):
            def initialization_performed(self, event) -> None:
                manager.add_listener(late)

        manager.add_listener(Adding())
        manager.fire_initialization_event(IterationEvent(self, 0))
        self.assertEqual(calls, [])
        manager.fire_iteration_started_event(IterationEvent(self, 1))
        self.assertEqual(calls, [("late", "started", 1)])

    def test_shared_manager(self) -> None:
        for its in self.itersolve:
            calls = []
            manager = its.iteration_manager(100)
            manager.add_listener(Recorder("shared", calls))
            first = its.conjugate_gradient(max_iterations=manager)
            second = its.conjugate_gradient(max_iterations=manager)
            self.assertIs(first.iteration_manager, second.iteration_manager)

            a = its.matrix_operator([[4.0, 1.0], [1.0, 3.0]])
            b = its.vector([1.0, 2.0])
            first.solve(a, b)
            second.solve(a, b)
            self.assertEqual([call[1] for call in calls].count("initialization"), 2)
            self.assertEqual([call[1] for call in calls].count("termination"), 2)

    def test_listeners_persist_across_solves(self) -> None:
        for its in self.itersolve:
            calls = []
            solver = its.conjugate_gradient(max_iterations=100, delta=1e-12)
            solver.iteration_manager.add_listener(Recorder("listener", calls))
            a = its.matrix_operator([[4.0, 1.0], [1.0, 3.0]])
            solver.solve(a, its.vector([1.0, 2.0]))
            count = len(calls)
            self.assertGreater(count, 0)
            solver.solve(a, its.vector([2.0, 1.0]))
            self.assertGreater(len(calls), count)
            self.assertEqual(calls[count], ("listener", "initialization", 1))

if __name__ == "__main__":
    unittest.main()
