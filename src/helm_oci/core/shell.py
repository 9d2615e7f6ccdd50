"""Shell and platform operations used during binary provisioning."""

import logging
import platform
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Shell(ABC):
    """Abstract interface for host shell operations.

    Covers tool lookup on PATH, running installer commands (brew) and
    reporting the host platform, so provisioning decisions can be tested
    with a fake host.
    """

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Check if a command-line tool is installed and available on PATH.

        Args:
            tool_name: Name of the tool to check (e.g., "crane", "brew")

        Returns:
            Absolute path to the tool if found on PATH, None otherwise
        """

    @abstractmethod
    def run_command(self, command: list[str]) -> int:
        """Run a command with output passed through to the terminal.

        Args:
            command: Command and arguments

        Returns:
            Exit code of the command; 127 if the binary does not exist
        """

    @abstractmethod
    def capture(self, command: list[str]) -> str | None:
        """Run a command and capture its stdout.

        Returns:
            Stripped stdout on success, None on non-zero exit or missing binary
        """

    @abstractmethod
    def system(self) -> str:
        """Operating system name as reported by platform.system()."""

    @abstractmethod
    def machine(self) -> str:
        """CPU architecture as reported by platform.machine()."""


class RealShell(Shell):
    """Production implementation using shutil, subprocess and platform."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)

    def run_command(self, command: list[str]) -> int:
        logger.debug("Running: %s", " ".join(command))
        try:
            # Installer chatter is diagnostics, keep it off stdout
            result = subprocess.run(command, check=False, stdout=sys.stderr)
        except FileNotFoundError:
            return 127
        return result.returncode

    def capture(self, command: list[str]) -> str | None:
        logger.debug("Capturing: %s", " ".join(command))
        try:
            result = subprocess.run(command, capture_output=True, text=True, check=False)
        except FileNotFoundError:
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    def system(self) -> str:
        return platform.system()

    def machine(self) -> str:
        return platform.machine()
