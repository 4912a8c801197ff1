"""Filesystem helpers for utf8totex."""

from __future__ import annotations

import os
import stat
import sys
import tempfile
from pathlib import Path

MAX_INPUT_SIZE_ENV_VAR = "UTF8TOTEX_MAX_INPUT_SIZE"
STDIO_PATH = "-"
DEFAULT_OUTPUT_MODE = 0o644


def get_max_input_size(default: int) -> int:
    """Resolve the maximum allowed input size.

    Args:
        default: Fallback value in bytes when the environment variable is unset.

    Returns:
        int: Maximum allowed input size in bytes.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["UTF8TOTEX_MAX_INPUT_SIZE"] = "204800"
        limit = get_max_input_size(default=102400)
    """
    env_value = os.environ.get(MAX_INPUT_SIZE_ENV_VAR)
    if env_value is None:
        return default

    try:
        max_size = int(env_value)
    except ValueError as error:
        error_message = (
            f"Invalid value for {MAX_INPUT_SIZE_ENV_VAR}: {env_value} (expected positive integer)"
        )
        raise ValueError(error_message) from error

    if max_size <= 0:
        error_message = f"{MAX_INPUT_SIZE_ENV_VAR} must be a positive integer, got {max_size}."
        raise ValueError(error_message)

    return max_size


def read_input(path: str, max_size: int) -> bytes:
    """Read raw input bytes from a file or standard input.

    Args:
        path: File path, or ``-`` for standard input.
        max_size: Maximum number of bytes accepted.

    Returns:
        bytes: Input content, undecoded.

    Raises:
        IOError: If the file cannot be read or is larger than `max_size`.

    Examples:
        data = read_input("chapter.txt", 10 * 1024 * 1024)
    """
    if path == STDIO_PATH:
        data = sys.stdin.buffer.read(max_size + 1)
        if len(data) > max_size:
            raise IOError(f"Standard input exceeds the maximum allowed size of {max_size} bytes.")
        return data

    filepath = Path(path)
    try:
        stat_result = os.stat(filepath)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if not stat.S_ISREG(stat_result.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    if stat_result.st_size > max_size:
        raise IOError(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")

    try:
        return filepath.read_bytes()
    except OSError as error:
        raise IOError(f"Error reading {filepath}: {error}") from error


def write_output(path: Path, data: bytes) -> None:
    """Write output atomically, replacing any existing file.

    The content goes to a temporary file in the destination directory that
    then replaces `path`. Permissions of an existing file are kept; new
    files get `DEFAULT_OUTPUT_MODE`.

    Args:
        path: Destination file.
        data: Bytes to write.

    Raises:
        IOError: If the destination is not a regular file or cannot be written.

    Examples:
        write_output(Path("out.tex"), b"caf{\\\\'e}")
    """
    permissions = DEFAULT_OUTPUT_MODE
    try:
        existing = os.stat(path)
    except FileNotFoundError:
        pass
    except OSError as error:
        raise IOError(f"Error accessing {path}: {error}") from error
    else:
        if not stat.S_ISREG(existing.st_mode):
            raise IOError(f"{path} is not a regular file.")
        permissions = stat.S_IMODE(existing.st_mode)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb", delete=False, dir=path.parent
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(data)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
            os.chmod(tmp_file.name, permissions)

        os.replace(temp_path, path)
    except OSError as error:
        raise IOError(f"Error writing {path}: {error}") from error
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                pass
