# fedora-postinstall/fedora_postinstall/manifest.py

from pathlib import Path
from typing import Iterable, List, Union


def parse_manifest_lines(lines: Iterable[str]) -> List[str]:
    """
    Returns the package identifiers found in manifest lines, in file order.

    Blank lines and lines starting with '#' are dropped without any warning.
    Duplicates are kept; the package manager deals with repeats itself.
    """
    identifiers = []
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        identifiers.append(entry)
    return identifiers


def read_manifest(path: Union[str, Path]) -> List[str]:
    """
    Reads a UTF-8 manifest file. Raises FileNotFoundError if it does not exist.

    Undecodable bytes become U+FFFD; such an entry simply fails to install.
    """
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        return parse_manifest_lines(f)
