"""Property-based tests for undo ordering, memento opacity and singleton uniqueness."""

import random
import string
import threading

import hypothesis.strategies as st
from hypothesis import given, settings

from pattern_catalogue.caretaker import Caretaker
from pattern_catalogue.models.memento import ConcreteMemento
from pattern_catalogue.originator import Originator
from pattern_catalogue.singleton import ThreadSafeSingleton

letter_states = st.text(alphabet=string.ascii_letters, min_size=10, max_size=80)


class TestUndoProperties:
    """Undo restores snapshots in reverse save order."""

    @given(
        initial=st.text(alphabet=string.ascii_letters, min_size=1, max_size=40),
        backups=st.integers(min_value=0, max_value=8),
        seed=st.integers(min_value=0, max_value=2**32 - 1),
    )
    @settings(max_examples=50, deadline=None)
    def test_undo_is_lifo(self, initial, backups, seed):
        """Property: N undos replay N snapshots newest first, then stop."""
        originator = Originator(initial, rng=random.Random(seed))
        caretaker = Caretaker(originator)
        saved = []

        for _ in range(backups):
            caretaker.backup()
            saved.append(originator.state)
            originator.do_something()

        for expected in reversed(saved):
            assert caretaker.undo() is True
            assert originator.state == expected

        final_state = originator.state
        assert caretaker.undo() is False
        assert originator.state == final_state

    @given(states=st.lists(letter_states, min_size=1, max_size=10))
    @settings(max_examples=50, deadline=None)
    def test_history_matches_save_order(self, states):
        """Property: history labels follow the order mementos were saved."""
        originator = Originator(states[0])
        caretaker = Caretaker(originator)
        mementos = []

        for state in states:
            originator._state = state
            mementos.append(caretaker.backup())

        assert list(caretaker.show_history()) == [memento.name for memento in mementos]


class TestMementoProperties:
    """Mementos never leak the full state through their label."""

    @given(state=letter_states)
    @settings(max_examples=100)
    def test_label_hides_full_state(self, state):
        """Property: the label only carries a bounded prefix of the state."""
        memento = ConcreteMemento(_state=state, owner="owner")

        assert state not in memento.name
        assert state[:9] in memento.name


class TestSingletonProperties:
    """Concurrent callers always agree on a single instance."""

    @given(values=st.lists(st.text(max_size=10), min_size=2, max_size=8, unique=True))
    @settings(max_examples=25, deadline=None)
    def test_one_instance_per_race(self, values):
        """Property: every caller gets the same instance holding one caller's value."""
        singleton_class = type("RacedSingleton", (ThreadSafeSingleton,), {})
        barrier = threading.Barrier(len(values))
        results = [None] * len(values)

        def request(index, value):
            barrier.wait()
            results[index] = singleton_class.instance(value)

        threads = [
            threading.Thread(target=request, args=(index, value))
            for index, value in enumerate(values)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(result is results[0] for result in results)
        assert results[0].value in values
