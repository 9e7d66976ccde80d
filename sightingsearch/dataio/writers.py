"""Result file writing.

The result file holds one line: the match count in decimal, newline
terminated. It is written to a temporary file in the destination directory
and renamed into place, so a failed write never leaves a truncated result.
"""

import logging
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Union

from ..errors import OutputUnavailableError

logger = logging.getLogger(__name__)


def check_output_path(path: Union[str, Path]) -> Path:
    """Validate that the result file can be written, without creating it.

    Run before the search so an unusable destination fails fast instead of
    after the search cost has been paid.

    Parameters
    ----------
    path : str or Path
        Result file

    Returns
    -------
    path : Path
        The validated path

    Raises
    ------
    OutputUnavailableError
        If path is a directory, its parent directory does not exist, or
        either is not writable
    """
    path = Path(path)
    parent = path.parent

    if path.is_dir():
        raise OutputUnavailableError(f"cannot open output file {path}: is a directory")
    if not parent.is_dir():
        raise OutputUnavailableError(
            f"cannot open output file {path}: no such directory {parent}"
        )
    if path.exists():
        if not os.access(path, os.W_OK):
            raise OutputUnavailableError(f"cannot open output file {path}: permission denied")
    elif not os.access(parent, os.W_OK):
        raise OutputUnavailableError(f"cannot open output file {path}: permission denied")

    return path


def write_match_count(path: Union[str, Path], n_matches: int) -> None:
    """Atomically write the match count as a single decimal line.

    Parameters
    ----------
    path : str or Path
        Result file (replaced if it exists)
    n_matches : int
        Non-negative match count

    Raises
    ------
    ValueError
        If n_matches is negative
    OutputUnavailableError
        If the file cannot be written

    Examples
    --------
    >>> write_match_count("result.dat", 3)
    >>> Path("result.dat").read_text()
    '3\\n'
    """
    if n_matches < 0:
        raise ValueError(f"Match count must be non-negative, got {n_matches}")

    path = Path(path)
    parent = path.parent

    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=parent, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise OutputUnavailableError(f"cannot open output file {path}: {e.strerror}") from e

    try:
        with os.fdopen(fd, 'w') as f:
            f.write(f"{n_matches}\n")

        # mkstemp creates 0600; give the result the usual umask permissions
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp_name, 0o666 & ~umask)

        os.replace(tmp_name, path)
    except OSError as e:
        with suppress(FileNotFoundError):
            os.remove(tmp_name)
        raise OutputUnavailableError(f"cannot write output file {path}: {e.strerror}") from e

    logger.info(f"✓ Wrote match count {n_matches:,} to {path.name}")
