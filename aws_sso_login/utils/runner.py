"""
Subprocess capability passed to code that needs to run external commands.
"""

import logging
import shutil
import subprocess
from typing import List

logger = logging.getLogger(__name__)


class CommandRunner:
    """
    Runs external commands and captures their output.

    Components that shell out take a runner explicitly, so tests can hand
    them a fake instead of patching process-wide state.
    """

    def run(self, cmd: List[str]) -> subprocess.CompletedProcess:
        """
        Run a command to completion.

        Args:
            cmd: Command and arguments

        Returns:
            The completed process with text stdout/stderr. A non-zero exit
            status is reported through returncode, never raised.
        """
        logger.debug("Running command: %s", " ".join(cmd))
        return subprocess.run(cmd, capture_output=True, text=True)

    def is_available(self, executable: str) -> bool:
        """Check whether an executable can be found on PATH."""
        return shutil.which(executable) is not None
