"""Backend configuration from environment variables and the host platform."""

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

from snipit_backend.models.invocation import LaunchStrategy

DEFAULT_RUNNER = "ollama"
DEFAULT_MODEL = "deepseek-r1:1.5b"
DEFAULT_MODEL_PREFIX = "deepseek"


def _is_windows(platform: str) -> bool:
    return platform.startswith("win")


@dataclass(frozen=True)
class BackendConfig:
    """Backend configuration loaded once at startup.

    Platform-dependent choices (how the runner is launched, which variable holds the
    user's home directory, which command locates executables) are resolved here so
    that no operation has to branch on the platform itself.
    """

    runner_executable: str
    default_model: str
    model_prefix: str
    launch_strategy: LaunchStrategy
    home_variable: str
    locate_command: str
    debug: bool

    @staticmethod
    def from_env(
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
    ) -> "BackendConfig":
        """Load configuration from environment variables.

        Args:
            environ: Environment mapping to read (default: os.environ)
            platform: Platform selector in sys.platform format (default: sys.platform)
        """
        if environ is None:
            environ = os.environ
        if platform is None:
            platform = sys.platform

        windows = _is_windows(platform)
        return BackendConfig(
            runner_executable=environ.get("SNIPIT_RUNNER", DEFAULT_RUNNER),
            default_model=environ.get("SNIPIT_DEFAULT_MODEL", DEFAULT_MODEL),
            model_prefix=environ.get("SNIPIT_MODEL_PREFIX", DEFAULT_MODEL_PREFIX),
            launch_strategy=LaunchStrategy.SHELL if windows else LaunchStrategy.DIRECT,
            home_variable="USERPROFILE" if windows else "HOME",
            locate_command="where" if windows else "which",
            debug=environ.get("SNIPIT_DEBUG", "false").lower() == "true",
        )
