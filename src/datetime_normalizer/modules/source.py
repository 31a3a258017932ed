"""Line sources for the command-line driver: files, stdin and URLs."""

import logging
import sys
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

_HTTP_TIMEOUT = 30


def is_url(source):
    """Return True if *source* looks like an http(s) URL."""
    return source.lower().startswith(("http://", "https://"))


def read_lines(source, timeout=_HTTP_TIMEOUT):
    """Return the non-blank lines of *source*, stripped.

    Parameters
    ----------
    source : str
        A file path, ``-`` for stdin, or an ``http(s)://`` URL.
    timeout : int
        Seconds to wait for an HTTP response.

    Raises
    ------
    OSError
        If a file cannot be read.
    requests.RequestException
        If a URL cannot be fetched.
    """
    if source == "-":
        text = sys.stdin.read()
    elif is_url(source):
        text = _fetch(source, timeout)
    else:
        text = Path(source).read_text(encoding="utf-8", errors="replace")

    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    logger.debug("Read %d line(s) from %s", len(lines), source)
    return lines


def _fetch(url, timeout):
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text
