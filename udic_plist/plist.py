"""Writer for the text substitution plist format."""

import re
from pathlib import Path
from typing import Any, Iterable

from udic_plist.udic import Entry


class OutputWriteError(OSError):
    """Raised when the plist output file cannot be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not write output file '{path}': {reason}")


PLIST_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
    '<plist version="1.0">\n'
    "<array>\n"
)

PLIST_FOOTER = "</array>\n</plist>\n"

ENTRY_TEMPLATE = (
    "\t<dict>\n"
    "\t\t<key>phrase</key>\n"
    "\t\t<string>{phrase}</string>\n"
    "\t\t<key>shortcut</key>\n"
    "\t\t<string>{shortcut}</string>\n"
    "\t</dict>\n"
)

_XML_ENTITIES: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
    "'": "&apos;",
}

_XML_SPECIAL = re.compile(r"[<>&\"']")


def escape_xml(value: Any) -> Any:
    """Escape the five XML special characters in a string.

    All matches are replaced in a single pass, so entities produced by the
    substitution are never escaped again. Non-string values are returned
    unchanged.

    Args:
        value: The value to escape.

    Returns:
        The escaped string, or ``value`` itself if it is not a string.
    """
    if not isinstance(value, str):
        return value
    return _XML_SPECIAL.sub(lambda m: _XML_ENTITIES[m.group(0)], value)


def render_entry(entry: Entry) -> str:
    """Render one entry as a plist dict block (phrase key first)."""
    return ENTRY_TEMPLATE.format(
        phrase=escape_xml(entry.phrase),
        shortcut=escape_xml(entry.shortcut),
    )


def render(entries: Iterable[Entry]) -> str:
    """Render entries as a complete plist XML document.

    Args:
        entries: Entries in the order they should appear.

    Returns:
        The plist document, ending with a newline.
    """
    parts = [PLIST_HEADER]
    parts.extend(render_entry(entry) for entry in entries)
    parts.append(PLIST_FOOTER)
    return "".join(parts)


def save(path: str | Path, content: str) -> None:
    """Write the plist document to a file in one go.

    Args:
        path: File path to write to.
        content: The rendered plist document.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e)) from e
