"""Unit tests for Originator, Memento and Caretaker."""

import dataclasses
import logging
import random
import string

import pytest
from unittest.mock import patch

from pattern_catalogue.caretaker import Caretaker, HistoryView, demo
from pattern_catalogue.config import DEFAULT_INITIAL_STATE, CatalogueConfig
from pattern_catalogue.exceptions.catalogue_exception import (
    CatalogueException,
    InvalidMemento,
)
from pattern_catalogue.models.memento import ConcreteMemento, Memento
from pattern_catalogue.originator import Originator


class ForeignMemento(Memento):
    """Memento produced outside of any Originator."""

    @property
    def name(self) -> str:
        return "foreign"

    @property
    def date(self) -> str:
        return "never"


@pytest.fixture
def originator():
    """Provide an Originator with the catalogue's initial state."""
    return Originator(DEFAULT_INITIAL_STATE, rng=random.Random(42))


@pytest.fixture
def caretaker(originator):
    """Provide a Caretaker bound to the originator fixture."""
    return Caretaker(originator)


class TestOriginator:
    """Test Originator state handling."""

    def test_initial_state(self, originator):
        """Test the originator keeps its initial state."""
        assert originator.state == DEFAULT_INITIAL_STATE

    @patch("builtins.print")
    def test_initial_state_is_announced(self, mock_print):
        """Test the originator narrates its initial state."""
        Originator("abc")

        mock_print.assert_called_once_with("Originator: My initial state is: abc")

    def test_do_something_replaces_state(self, originator):
        """Test business logic produces a 30 character letter string."""
        originator.do_something()

        assert originator.state != DEFAULT_INITIAL_STATE
        assert len(originator.state) == 30
        assert all(char in string.ascii_letters for char in originator.state)

    def test_do_something_custom_length(self):
        """Test the generated state honours the configured length."""
        originator = Originator("start", state_length=12)
        originator.do_something()

        assert len(originator.state) == 12

    def test_do_something_reproducible_with_seed(self):
        """Test two originators with equally seeded generators agree."""
        first = Originator("start", rng=random.Random(7))
        second = Originator("start", rng=random.Random(7))

        first.do_something()
        second.do_something()

        assert first.state == second.state

    def test_state_is_read_only(self, originator):
        """Test the state cannot be assigned from outside."""
        with pytest.raises(AttributeError):
            originator.state = "tampered"


class TestMemento:
    """Test memento capture and opacity."""

    def test_save_does_not_change_state(self, originator):
        """Test saving leaves the originator untouched."""
        memento = originator.save()

        assert originator.state == DEFAULT_INITIAL_STATE
        assert isinstance(memento, ConcreteMemento)
        assert memento.state == DEFAULT_INITIAL_STATE
        assert memento.owner == originator.token

    def test_memento_name_truncates_state(self, originator):
        """Test the label shows only a prefix of the state."""
        memento = originator.save()

        assert memento.name == f"{memento.date} / (Super-dup...)"
        assert DEFAULT_INITIAL_STATE not in memento.name

    def test_memento_date_format(self):
        """Test the date is rendered from the capture timestamp."""
        memento = ConcreteMemento(_state="abcdefghijk", owner="x", timestamp=0.0)

        assert len(memento.date) == len("1970-01-01 00:00:00")
        assert memento.date[4] == "-" and memento.date[13] == ":"

    def test_memento_repr_hides_state(self, originator):
        """Test the repr never reveals the raw state."""
        memento = originator.save()

        assert DEFAULT_INITIAL_STATE not in repr(memento)

    def test_memento_is_immutable(self, originator):
        """Test a memento cannot be modified after capture."""
        memento = originator.save()

        with pytest.raises(dataclasses.FrozenInstanceError):
            memento._state = "tampered"

        with pytest.raises(dataclasses.FrozenInstanceError):
            memento.owner = "someone else"

    def test_memento_has_no_public_state(self, originator):
        """Test holders only get the label, not the raw state."""
        memento = originator.save()

        assert not hasattr(memento, "state")
        public = [name for name in dir(memento) if not name.startswith("_")]
        assert all(getattr(memento, name) != DEFAULT_INITIAL_STATE for name in public)

    def test_memento_interface_is_abstract(self):
        """Test the base Memento cannot be instantiated."""
        with pytest.raises(TypeError):
            Memento()

    def test_memento_abstract_name_raises(self, originator):
        """Test the abstract name body signals a missing override."""
        with pytest.raises(NotImplementedError, match="has not implemented method 'name'"):
            Memento.name.fget(originator.save())


class TestRestore:
    """Test restoring originator state from mementos."""

    def test_restore_own_memento(self, originator):
        """Test restoring a memento brings the saved state back."""
        memento = originator.save()
        originator.do_something()

        originator.restore(memento)

        assert originator.state == DEFAULT_INITIAL_STATE

    def test_restore_foreign_originator_memento(self, originator):
        """Test mementos from another originator are refused."""
        other = Originator("other state value")
        foreign = other.save()

        with pytest.raises(InvalidMemento, match="belongs to another originator"):
            originator.restore(foreign)

        assert originator.state == DEFAULT_INITIAL_STATE

    def test_restore_unknown_memento_type(self, originator):
        """Test mementos of an unknown class are refused."""
        with pytest.raises(InvalidMemento, match="expected ConcreteMemento"):
            originator.restore(ForeignMemento())

    def test_restore_malformed_state(self, originator):
        """Test mementos holding a non-string state are refused."""
        malformed = ConcreteMemento(_state=None, owner=originator.token)

        with pytest.raises(InvalidMemento, match="malformed state"):
            originator.restore(malformed)

        assert originator.state == DEFAULT_INITIAL_STATE

    def test_invalid_memento_is_catalogue_exception(self):
        """Test the error kind and its rendering."""
        error = InvalidMemento("bad snapshot")

        assert isinstance(error, CatalogueException)
        assert error.message == "bad snapshot"
        assert str(error) == "InvalidMemento: bad snapshot"


class TestCaretakerUndo:
    """Test the caretaker undo stack."""

    def test_undo_empty_history_is_noop(self, caretaker, originator):
        """Test undo without history leaves the state alone."""
        assert caretaker.undo() is False
        assert originator.state == DEFAULT_INITIAL_STATE

    def test_undo_scenario(self, caretaker, originator):
        """Test the three-backup rollback scenario end to end."""
        caretaker.backup()
        originator.do_something()
        s1 = originator.state

        caretaker.backup()
        originator.do_something()
        s2 = originator.state

        caretaker.backup()
        originator.do_something()
        s3 = originator.state

        assert len({DEFAULT_INITIAL_STATE, s1, s2, s3}) == 4

        assert caretaker.undo() is True
        assert originator.state == s2

        assert caretaker.undo() is True
        assert originator.state == s1

        assert caretaker.undo() is True
        assert originator.state == DEFAULT_INITIAL_STATE

        assert caretaker.undo() is False
        assert originator.state == DEFAULT_INITIAL_STATE

    def test_undo_skips_invalid_memento(self, caretaker, originator, caplog):
        """Test unusable checkpoints are skipped in favour of older ones."""
        caretaker.backup()
        originator.do_something()
        changed = originator.state

        caretaker.backup()
        caretaker._mementos.append(Originator("someone else's").save())
        originator.do_something()

        with caplog.at_level(logging.WARNING, logger="pattern_catalogue.caretaker"):
            assert caretaker.undo() is True

        assert originator.state == changed
        assert caretaker.history_count() == 1
        assert "Skipping unusable memento" in caplog.text

    def test_undo_skips_several_invalid_mementos(self, caretaker, originator):
        """Test skipping continues until a valid checkpoint is found."""
        caretaker.backup()
        caretaker._mementos.append(ForeignMemento())
        caretaker._mementos.append(ConcreteMemento(_state=None, owner=originator.token))
        originator.do_something()

        assert caretaker.undo() is True
        assert originator.state == DEFAULT_INITIAL_STATE
        assert caretaker.has_history() is False

    def test_undo_propagates_when_history_exhausted(self, caretaker, originator):
        """Test the error escapes when no valid checkpoint remains."""
        caretaker._mementos.append(ForeignMemento())
        caretaker._mementos.append(ForeignMemento())

        with pytest.raises(InvalidMemento):
            caretaker.undo()

        assert caretaker.has_history() is False
        assert originator.state == DEFAULT_INITIAL_STATE

    def test_backup_returns_memento(self, caretaker):
        """Test backup hands back the stored memento."""
        memento = caretaker.backup()

        assert isinstance(memento, Memento)
        assert caretaker.history_count() == 1


class TestCaretakerHistory:
    """Test history inspection and limits."""

    def test_show_history_oldest_first(self, caretaker, originator):
        """Test labels come back in save order."""
        caretaker.backup()
        originator.do_something()
        second_prefix = originator.state[:9]
        caretaker.backup()

        labels = list(caretaker.show_history())

        assert len(labels) == 2
        assert labels[0].endswith("(Super-dup...)")
        assert labels[1].endswith(f"({second_prefix}...)")

    def test_show_history_is_restartable(self, caretaker):
        """Test the history view can be iterated repeatedly."""
        caretaker.backup()
        caretaker.backup()
        view = caretaker.show_history()

        assert isinstance(view, HistoryView)
        assert list(view) == list(view)
        assert len(view) == 2

    def test_show_history_is_lazy(self, caretaker):
        """Test a view reflects backups made after it was created."""
        view = caretaker.show_history()
        assert list(view) == []

        caretaker.backup()

        assert len(list(view)) == 1

    def test_show_history_does_not_mutate(self, caretaker):
        """Test reading history leaves the stack intact."""
        caretaker.backup()
        list(caretaker.show_history())

        assert caretaker.history_count() == 1

    def test_print_history(self, caretaker, capsys):
        """Test the printed history lists every label."""
        caretaker.backup()
        capsys.readouterr()

        caretaker.print_history()

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Caretaker: Here's the list of mementos:"
        assert lines[1].endswith("(Super-dup...)")

    def test_max_history_drops_oldest(self, originator):
        """Test the oldest snapshot is discarded beyond the limit."""
        caretaker = Caretaker(originator, max_history=2)

        caretaker.backup()
        originator.do_something()
        caretaker.backup()
        originator.do_something()
        third = originator.state
        caretaker.backup()

        assert caretaker.history_count() == 2
        assert caretaker.undo() is True
        assert originator.state == third
        assert caretaker.undo() is True
        assert caretaker.undo() is False

    def test_has_history(self, caretaker):
        """Test has_history tracks the stack."""
        assert caretaker.has_history() is False
        caretaker.backup()
        assert caretaker.has_history() is True


class TestMementoDemo:
    """Test the memento demonstration."""

    def test_demo_narration(self, capsys):
        """Test the demo backs up, lists and rolls back twice."""
        demo(CatalogueConfig(seed=3))

        out = capsys.readouterr().out
        assert out.count("Caretaker: Saving Originator's state...") == 3
        assert out.count("Caretaker: Restoring state to:") == 2
        assert "Client: Now, let's rollback!" in out
        assert "Client: Once more!" in out
