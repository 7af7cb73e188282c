"""Integration tests for the full catalogue run and its configuration."""

import logging
import random

import pytest

from main import demonstrations, main
from pattern_catalogue.config import (
    DEFAULT_INITIAL_STATE,
    CatalogueConfig,
    configure_logging,
)


@pytest.fixture(autouse=True)
def clean_catalogue_logger():
    """Remove handlers configure_logging attaches during a test."""
    logger = logging.getLogger("pattern_catalogue")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(level)


class TestCatalogueRun:
    """Test running every demonstration end to end."""

    def test_main_runs_every_demonstration(self, capsys):
        """Test the run prints the banners and all numbered sections."""
        main(CatalogueConfig(seed=7))

        out = capsys.readouterr().out
        assert out.startswith("=== DESIGN PATTERN CATALOGUE ===\n")
        assert out.rstrip().endswith("=== CATALOGUE DEMONSTRATION COMPLETED ===")
        assert "1. Abstract Factory (GUI widgets)" in out
        assert "16. Memento" in out
        assert "24. Visitor" in out

    def test_sections_are_underlined(self, capsys):
        """Test each section title is followed by a matching rule."""
        main(CatalogueConfig(seed=7))

        lines = capsys.readouterr().out.splitlines()
        index = lines.index("24. Visitor")
        assert lines[index + 1] == "-" * len("24. Visitor")

    def test_memento_section_rolls_back(self, capsys):
        """Test the memento demonstration restores two snapshots."""
        main(CatalogueConfig(seed=7))

        out = capsys.readouterr().out
        assert f"Originator: My initial state is: {DEFAULT_INITIAL_STATE}" in out
        assert out.count("Caretaker: Restoring state to:") == 2

    def test_seeded_runs_match_apart_from_timing(self, capsys):
        """Test two runs with the same seed generate the same states."""
        main(CatalogueConfig(seed=11))
        first = capsys.readouterr().out

        main(CatalogueConfig(seed=11))
        second = capsys.readouterr().out

        def states(out):
            return [line for line in out.splitlines() if "my state has changed" in line]

        assert states(first) == states(second)
        assert len(states(first)) == 3

    def test_configured_state_length(self, capsys):
        """Test generated memento states use the configured length."""
        main(CatalogueConfig(state_length=5, seed=1))

        out = capsys.readouterr().out
        changed = [
            line.rsplit(" ", 1)[-1]
            for line in out.splitlines()
            if line.startswith("Originator: and my state has changed to:")
        ]
        assert [len(state) for state in changed] == [5, 5, 5]

    def test_demonstration_errors_propagate(self, capsys, monkeypatch):
        """Test a failing demonstration ends the run."""
        failing = [("Broken", _raise_runtime_error)]
        monkeypatch.setattr("main.demonstrations", lambda _config: failing)

        with pytest.raises(RuntimeError, match="boom"):
            main(CatalogueConfig(seed=7))

        assert "COMPLETED" not in capsys.readouterr().out

    def test_demonstration_list(self):
        """Test the catalogue lists all twenty-four demonstrations."""
        demos = demonstrations(CatalogueConfig())

        assert len(demos) == 24
        assert demos[0][0] == "Abstract Factory (GUI widgets)"
        assert demos[-1][0] == "Visitor"
        assert all(callable(demo) for _, demo in demos)


def _raise_runtime_error():
    raise RuntimeError("boom")


class TestCatalogueConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Test the default settings."""
        config = CatalogueConfig()

        assert config.state_length == 30
        assert config.initial_state == "Super-duper-super-puper-super."
        assert config.seed is None
        assert config.max_history is None
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("state_length", [0, -3])
    def test_rejects_non_positive_state_length(self, state_length):
        """Test the state length must be positive."""
        with pytest.raises(ValueError, match="state_length"):
            CatalogueConfig(state_length=state_length)

    def test_rejects_non_positive_max_history(self):
        """Test the history limit must be positive when set."""
        with pytest.raises(ValueError, match="max_history"):
            CatalogueConfig(max_history=0)

    def test_seeded_random_is_reproducible(self):
        """Test every generator built from a seed draws the same values."""
        config = CatalogueConfig(seed=42)

        first = [config.random().randint(0, 100) for _ in range(3)]
        second = [config.random().randint(0, 100) for _ in range(3)]

        assert first == second
        assert isinstance(config.random(), random.Random)


class TestConfigureLogging:
    """Test routing of catalogue diagnostics."""

    def test_sets_level(self):
        """Test the configured level is applied to the catalogue logger."""
        logger = configure_logging(CatalogueConfig(log_level="debug"))

        assert logger.name == "pattern_catalogue"
        assert logger.level == logging.DEBUG

    def test_does_not_duplicate_handlers(self):
        """Test repeated configuration keeps a single handler."""
        configure_logging(CatalogueConfig())
        logger = configure_logging(CatalogueConfig(log_level="INFO"))

        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_module_loggers_propagate(self, caplog):
        """Test module diagnostics reach the catalogue logger's level."""
        configure_logging(CatalogueConfig(log_level="DEBUG"))

        with caplog.at_level(logging.DEBUG, logger="pattern_catalogue"):
            logging.getLogger("pattern_catalogue.flyweight").debug("Created flyweight %s", "x")

        assert "Created flyweight x" in caplog.text
