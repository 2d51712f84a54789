"""Open URLs in a browser, optionally on the machine we're SSHed in from.

The browser command comes from, in order: the ``browser`` argument,
``OPEN_URL_CMD``, ``BROWSER``, else ``open`` on macOS and ``xdg-open``
elsewhere. With ``OPEN_URL_SSH`` set and an SSH session from an IPv4
client, the URL is opened on that client with ``OPEN_URL_REMOTE_CMD``
(default ``open``) instead.
"""

from __future__ import annotations

import logging
import os
import re
import shlex
import subprocess
import sys
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

SSH = "ssh"

_IPV4 = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+$")


def _ssh_client_host(env: Mapping[str, str]) -> Optional[str]:
    conn = env.get("SSH_CLIENT") or env.get("SSH_CONNECTION")
    if not conn:
        return None
    host = conn.split(" ", 1)[0]
    return host if _IPV4.match(host) else None


def browser_command(url: str, browser: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> list[str]:
    """Return the argv that opens ``url``."""
    env = os.environ if env is None else env

    if url and env.get("OPEN_URL_SSH"):
        host = _ssh_client_host(env)
        if host:
            # Quoted, since the remote shell sees the whole command line
            return [SSH, host, env.get("OPEN_URL_REMOTE_CMD", "open"), shlex.quote(url)]

    cmd = browser or env.get("OPEN_URL_CMD") or env.get("BROWSER") or (
        "open" if sys.platform == "darwin" else "xdg-open"
    )
    return [cmd, url]


def open_url(url: str, browser: Optional[str] = None) -> int:
    """Open ``url`` and return the exit status of the browser command."""
    argv = browser_command(url, browser)
    logger.debug("Opening URL with: %s", " ".join(argv))
    return subprocess.run(argv, check=False).returncode
