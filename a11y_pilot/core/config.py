"""
Configuration module - centralized settings for the scanner and fix pipeline.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    Every variable is prefixed with A11Y_PILOT_, for example:
        export A11Y_PILOT_AGENT_TIMEOUT_SECONDS=300
        export A11Y_PILOT_AGENT_BINARY=/opt/copilot/bin/copilot
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="A11Y_PILOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # REPAIR AGENT SETTINGS
    # ---------------------------------------------------------------------------
    # AGENT_BINARY: Executable name looked up on PATH after the well-known
    # install locations have been checked
    AGENT_BINARY: str = "copilot"

    # AGENT_PROMPT_FLAG: Flag that carries the instruction in non-interactive mode
    AGENT_PROMPT_FLAG: str = "--prompt"

    # AGENT_EXTRA_ARGS: Appended after the prompt (auto-approve tool use)
    AGENT_EXTRA_ARGS: List[str] = ["--allow-all-tools"]

    # Wall-clock budget for a single fix invocation
    AGENT_TIMEOUT_SECONDS: float = 120.0

    # Wall-clock budget for the `--version` availability probe
    AGENT_PROBE_TIMEOUT_SECONDS: float = 10.0

    # Time between SIGTERM and SIGKILL once an invocation times out
    AGENT_KILL_GRACE_SECONDS: float = 2.0

    # ---------------------------------------------------------------------------
    # SCANNER SETTINGS
    # ---------------------------------------------------------------------------
    SUPPORTED_EXTENSIONS: List[str] = [
        ".html", ".htm", ".jsx", ".tsx", ".vue", ".astro", ".svelte",
    ]

    # Directories never descended into (dot-directories are skipped as well)
    IGNORE_DIRS: List[str] = [
        "node_modules", ".git", "dist", "build", ".next", ".nuxt",
        "coverage", ".cache", ".turbo", "out", ".output", "vendor",
        "__pycache__", ".svelte-kit", "storybook-static",
    ]

    # ---------------------------------------------------------------------------
    # LOGGING
    # ---------------------------------------------------------------------------
    # Reporter output goes to stdout; log records go to stderr at this level
    LOG_LEVEL: str = "WARNING"


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from a11y_pilot.core.config import settings
settings = Settings()
