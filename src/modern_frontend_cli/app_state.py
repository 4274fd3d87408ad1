"""Application mode lookup."""

import logging
import os

logger = logging.getLogger(__name__)

MODE_ENV_VAR = "MODERN_FRONTEND_MODE"
DEFAULT_MODE = "developer"


class AppState:
    """Reports the application mode.

    The environment variable MODERN_FRONTEND_MODE takes precedence over the
    mode configured in the CLI settings.
    """

    def __init__(self, mode: str | None = None):
        self._mode = mode or DEFAULT_MODE

    def get_mode(self) -> str:
        env_mode = os.environ.get(MODE_ENV_VAR)
        if env_mode:
            logger.debug(f"Application mode from {MODE_ENV_VAR}: {env_mode}")
            return env_mode.strip().lower()
        return self._mode.strip().lower()
