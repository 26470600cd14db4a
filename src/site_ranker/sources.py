"""
Loading markup from files, directories and URLs.

This module is the I/O edge of the package: it reads documents and
hands their text to the pipeline, which never touches the filesystem
or network itself.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

import requests
from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

# Default headers for web requests
DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

REQUEST_TIMEOUT = 30

HTML_SUFFIXES = (".html", ".htm")

# Entry-point documents for common site layouts
MAIN_FILE_NAMES = ("index.html", "index.htm", "_document.tsx", "layout.tsx")

META_CHARSET = re.compile(rb'<meta[^>]+charset=["\']?([^"\'>\s;]+)', re.I)


class ContentLoadError(Exception):
    """Raised when a document cannot be read or fetched."""
    pass


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def is_html_file(path: Path) -> bool:
    return path.suffix.lower() in HTML_SUFFIXES


def is_main_file(path: Path) -> bool:
    """Check whether path is a site's entry-point document."""
    return path.name in MAIN_FILE_NAMES


def find_html_files(root: Union[str, Path], max_depth: int = 5) -> list[Path]:
    """
    Find HTML files under a directory.

    Args:
        root: Directory to search.
        max_depth: Deepest file level returned. Files directly in root are
            level 1 and are always returned.

    Returns:
        Sorted list of HTML file paths.

    Raises:
        ContentLoadError: If root is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise ContentLoadError(f"Not a directory: {root}")

    return sorted(_walk_html_files(root, root, max_depth))


def _walk_html_files(root: Path, current: Path, max_depth: int) -> Iterator[Path]:
    try:
        entries = list(current.iterdir())
    except OSError as e:
        logger.warning(f"Skipping unreadable directory '{current}': {e}")
        return

    for entry in entries:
        if entry.is_dir():
            # Files inside entry sit one level below it
            if len(entry.relative_to(root).parts) < max_depth:
                yield from _walk_html_files(root, entry, max_depth)
        elif is_html_file(entry):
            yield entry


def find_main_file(paths: Iterable[Union[str, Path]]) -> Optional[str]:
    """First entry-point document among paths, in the order given."""
    for path in paths:
        if is_main_file(Path(path)):
            return str(path)
    return None


def decode_markup(content: bytes, content_type: str = "") -> str:
    """
    Decode document bytes to text.

    Detection order:
    1. Content-Type header charset
    2. HTML meta charset tag (first 8KB)
    3. charset_normalizer detection
    4. UTF-8 with replacement characters

    Args:
        content: Raw document bytes.
        content_type: Content-Type header value, if known.

    Returns:
        Decoded text.
    """
    if "charset=" in content_type.lower():
        charset = content_type.lower().split("charset=")[-1].split(";")[0].strip().strip("\"'")
        try:
            return content.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Header charset {charset} failed: {e}")

    match = META_CHARSET.search(content[:8192])
    if match:
        charset = match.group(1).decode("ascii", errors="ignore")
        try:
            return content.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Meta charset {charset} failed: {e}")

    best = from_bytes(content).best()
    if best is not None:
        logger.debug(f"charset_normalizer detected: {best.encoding}")
        return str(best)

    logger.debug("Falling back to UTF-8 decode")
    return content.decode("utf-8", errors="replace")


def fetch_url(url: str, timeout: int = REQUEST_TIMEOUT) -> str:
    """
    Fetch a page and return its decoded markup.

    Raises:
        ContentLoadError: On network errors or non-2xx responses.
    """
    try:
        response = requests.get(url, headers=DEFAULT_HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise ContentLoadError(f"Failed to fetch URL {url}: {e}") from e

    return decode_markup(response.content, response.headers.get("Content-Type", ""))


def read_file(path: Union[str, Path]) -> str:
    """
    Read and decode a local document.

    Raises:
        ContentLoadError: If the file cannot be read.
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise ContentLoadError(f"Failed to read file '{path}': {e}") from e
    return decode_markup(content)


def load_markup(source: Union[str, Path]) -> str:
    """
    Load markup from a URL or a local file path.

    Args:
        source: http(s) URL or file path.

    Returns:
        Decoded markup text.
    """
    if isinstance(source, str) and is_url(source):
        return fetch_url(source)
    return read_file(source)


def load_directory(root: Union[str, Path], max_depth: int = 5) -> dict[str, str]:
    """
    Read every HTML file under a directory.

    Files that cannot be read are logged and skipped.

    Returns:
        Mapping of file path (as string) to markup, in path order.
    """
    documents = {}
    for path in find_html_files(root, max_depth):
        try:
            documents[str(path)] = read_file(path)
        except ContentLoadError as e:
            logger.warning(str(e))
    return documents
