"""Runtime settings for graph construction.

FORCE_GRAPH_LOG_OVERWRITES: log id overwrites at WARNING instead of DEBUG.
FORCE_GRAPH_WARN_AMBIGUOUS_IDS: warn when a primary key's debug form contains
the id separator, which makes the generated id ambiguous.
"""

import logging
from dataclasses import dataclass

from force_graph.config.env import get_env_bool

LOG_OVERWRITES_ENV = "FORCE_GRAPH_LOG_OVERWRITES"
WARN_AMBIGUOUS_IDS_ENV = "FORCE_GRAPH_WARN_AMBIGUOUS_IDS"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphSettings:
    """Logging knobs consulted by ``Graph`` insertions."""

    log_overwrites: bool = False
    warn_ambiguous_ids: bool = True

    @classmethod
    def from_env(cls) -> "GraphSettings":
        """Load settings from the environment.

        Raises:
            ValueError: If a variable is set to something that is not a boolean.
        """
        return cls(
            log_overwrites=get_env_bool(LOG_OVERWRITES_ENV, False) is True,
            warn_ambiguous_ids=get_env_bool(WARN_AMBIGUOUS_IDS_ENV, True) is True,
        )

    @classmethod
    def from_env_or_default(cls) -> "GraphSettings":
        """Load settings from the environment, falling back to defaults if invalid."""
        try:
            return cls.from_env()
        except ValueError as exc:
            logger.warning("Invalid graph settings in environment (%s); using defaults.", exc)
            return cls()
