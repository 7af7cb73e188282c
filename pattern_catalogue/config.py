import logging
import random
from typing import Optional

DEFAULT_INITIAL_STATE = "Super-duper-super-puper-super."


class CatalogueConfig:
    """
    Settings shared by the demonstrations.

    There are no flags or environment variables: callers build a config in code
    and hand it to ``main()``.
    """

    def __init__(
        self,
        state_length: int = 30,
        initial_state: str = DEFAULT_INITIAL_STATE,
        seed: Optional[int] = None,
        max_history: Optional[int] = None,
        log_level: str = "WARNING",
    ):
        if state_length < 1:
            raise ValueError(f"state_length must be positive: {state_length}")
        if max_history is not None and max_history < 1:
            raise ValueError(f"max_history must be positive: {max_history}")

        self.state_length = state_length
        self.initial_state = initial_state
        self.seed = seed
        self.max_history = max_history
        self.log_level = log_level

    def random(self) -> random.Random:
        """Build a random generator, reproducible when a seed is configured."""
        return random.Random(self.seed)


def configure_logging(config: CatalogueConfig) -> logging.Logger:
    """Route catalogue diagnostics to stderr at the configured level."""
    logger = logging.getLogger("pattern_catalogue")
    logger.setLevel(getattr(logging, config.log_level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger
