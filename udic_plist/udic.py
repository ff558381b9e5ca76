"""Parser for tab-delimited user dictionary text files."""

import re
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """A single shortcut and the phrase it expands to."""

    shortcut: str
    phrase: str


@dataclass
class ParseResult:
    """Entries parsed from a dictionary, plus diagnostics for discarded lines."""

    entries: list[Entry] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    skipped: int = 0


class InputNotFoundError(FileNotFoundError):
    """Raised when the dictionary input file does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Dictionary file not found: {path}")


class InputReadError(OSError):
    """Raised when the dictionary input file exists but cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read input file '{path}': {reason}")


COMMENT_MARKER = "!"
FIELD_SEPARATOR = "\t"

_LINE_BREAK = re.compile(r"\r?\n")


def load(path: str | Path, encoding: str = "utf-8-sig") -> str:
    """Read the full contents of a dictionary text file.

    The default encoding drops a leading UTF-8 byte order mark so it never
    becomes part of the first shortcut.

    Args:
        path: File path to the dictionary text file.
        encoding: Text encoding of the file.

    Returns:
        The file contents as a single string.

    Raises:
        InputNotFoundError: If the file does not exist.
        InputReadError: If the file cannot be read or decoded.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise InputNotFoundError(file_path)

    try:
        with open(file_path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise InputReadError(file_path, f"not valid {e.encoding}: {e.reason}") from e
    except OSError as e:
        raise InputReadError(file_path, e.strerror or str(e)) from e


def parse_line(line: str) -> Entry | str | None:
    """Parse one raw line of a dictionary file.

    Args:
        line: The raw line, without its line terminator.

    Returns:
        An Entry for a valid data line, None for comments and blank lines,
        or a warning message when the line is malformed.
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith(COMMENT_MARKER):
        return None

    parts = trimmed.split(FIELD_SEPARATOR)
    if len(parts) < 2:
        return f'Skipping malformed line (not enough parts): "{line}"'

    # Anything after the phrase (usually a part-of-speech tag) is dropped
    shortcut = parts[0].strip()
    phrase = parts[1].strip()
    if not shortcut or not phrase:
        return f'Skipping malformed line (empty shortcut or phrase): "{line}"'

    return Entry(shortcut=shortcut, phrase=phrase)


def parse_text(text: str, source_name: str = "input") -> ParseResult:
    """Parse dictionary text into an ordered list of entries.

    Comment lines (starting with "!") and blank lines are skipped silently.
    Malformed lines are discarded and reported in ``ParseResult.warnings``.
    An empty result is not an error, but is reported as a warning too.

    Args:
        text: Full contents of the dictionary file, LF or CRLF terminated.
        source_name: Name used to refer to the input in warnings.

    Returns:
        ParseResult with entries in source line order.
    """
    result = ParseResult()

    lines = _LINE_BREAK.split(text)
    # A final line terminator does not start another line
    if lines and not lines[-1]:
        lines.pop()

    for line in lines:
        parsed = parse_line(line)
        if parsed is None:
            result.skipped += 1
        elif isinstance(parsed, Entry):
            result.entries.append(parsed)
        else:
            result.warnings.append(parsed)

    if not result.entries:
        result.warnings.append(
            f"No valid entries found in {source_name}. Output will be an empty list."
        )

    return result


def load_entries(path: str | Path) -> ParseResult:
    """Read and parse a dictionary text file.

    Args:
        path: File path to the dictionary text file.

    Returns:
        ParseResult for the file's contents.

    Raises:
        InputNotFoundError: If the file does not exist.
        InputReadError: If the file cannot be read or decoded.
    """
    file_path = Path(path)
    return parse_text(load(file_path), source_name=file_path.name)
