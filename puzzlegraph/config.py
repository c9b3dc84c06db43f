"""Configuration classes for the puzzle runner."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RunnerConfig:
    """Defaults used by the command-line dispatcher."""

    # Input file used when no path is given on the command line
    input_template: str = "./inputs/input{day}.txt"

    # Every day has exactly these parts
    parts: Tuple[int, ...] = (1, 2)

    def default_input(self, day: int) -> str:
        """Return the conventional input path for ``day``."""
        return self.input_template.format(day=day)


# Global configuration instance
RUNNER_CONFIG = RunnerConfig()
