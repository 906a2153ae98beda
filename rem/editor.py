"""
External editor session

Hands a note's text to the user's editor through a temporary file and
reads the revised text back once the editor exits.
"""

import logging
import os
import shlex
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from .exceptions import EditorError

logger = logging.getLogger(__name__)


@contextmanager
def scoped_temp_file(initial_text: str, suffix: str = ".txt") -> Iterator[Path]:
    """Create a closed temporary file holding initial_text, deleted on exit"""
    fd, name = tempfile.mkstemp(prefix="rem-", suffix=suffix)
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(initial_text)
        yield path
    finally:
        try:
            path.unlink()
        except FileNotFoundError:
            pass


def editor_command(editor: str, path: Path) -> List[str]:
    """Build the argv for an editor setting such as "vim" or "code --wait" """
    args = shlex.split(editor)
    if not args:
        raise EditorError("Editor command is empty")
    return args + [str(path)]


def edit_text(editor: str, initial_text: str) -> str:
    """Open initial_text in editor and return the text left in the file"""
    with scoped_temp_file(initial_text) as path:
        command = editor_command(editor, path)
        logger.debug(f"Launching editor: {command}")

        try:
            result = subprocess.run(command)
        except OSError as e:
            raise EditorError(f"Could not launch editor '{editor}': {e}") from e

        if result.returncode != 0:
            raise EditorError(
                f"Editor '{editor}' exited with status {result.returncode}"
            )

        return path.read_text(encoding="utf-8")
