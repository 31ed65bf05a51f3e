"""
System clipboard access through the platform copy command.
"""
import logging
import shutil
import subprocess
from typing import List, Optional, Protocol, Sequence

from ..exceptions import ClipboardUnavailable

logger = logging.getLogger(__name__)


class Clipboard(Protocol):
    def copy(self, text: str) -> None:
        ...


DEFAULT_COMMANDS: Sequence[List[str]] = (
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
)


class SystemClipboard(Clipboard):
    """
    Writes text with the first copy command available on this machine.
    """

    def __init__(self, commands: Optional[Sequence[List[str]]] = None, timeout: float = 5.0):
        self._commands = list(commands or DEFAULT_COMMANDS)
        self._timeout = timeout

    def copy(self, text: str) -> None:
        """
        :raises ClipboardUnavailable: If no command exists or every command fails
        """
        failures = []
        for command in self._commands:
            if shutil.which(command[0]) is None:
                continue
            try:
                subprocess.run(
                    command,
                    input=text.encode("utf-8"),
                    check=True,
                    timeout=self._timeout,
                    capture_output=True,
                )
                logger.debug(f"Copied {len(text)} chars with {command[0]}")
                return
            except (subprocess.SubprocessError, OSError) as e:
                logger.warning(f"Clipboard command {command[0]} failed: {e}")
                failures.append(command[0])

        if failures:
            raise ClipboardUnavailable(f"Clipboard commands failed: {', '.join(failures)}")
        raise ClipboardUnavailable("No clipboard command found on this system")
