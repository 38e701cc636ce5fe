"""Platform-specific clipboard access.

Detects the runtime platform once at import time. Only writing to the
system clipboard lives here; watching it for changes is the job of a
separate capture process that feeds ``clippy capture``.
"""

from __future__ import annotations

import base64
import platform
import shutil
import subprocess
import sys

from .log import logger

_system = platform.system()  # "Linux", "Darwin", "Windows"

try:
    _uname_release = platform.uname().release.lower()
except OSError:
    _uname_release = ""

IS_WINDOWS = _system == "Windows"
IS_MACOS = _system == "Darwin"
IS_LINUX = _system == "Linux"
IS_WSL = IS_LINUX and "microsoft" in _uname_release


# Tried in order on Linux; the first one installed that succeeds wins.
_LINUX_TOOLS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


def copy_to_clipboard(text: str) -> bool:
    """Copy *text* to the system clipboard using the best available method.

    Tries the platform-native tool first, then an OSC 52 terminal escape
    when stdout is an interactive terminal.
    """
    if IS_WSL or IS_WINDOWS:
        # clip.exe under WSL reads UTF-16LE from the pipe
        ok = _pipe_to(["clip.exe"], text.encode("utf-16-le" if IS_WSL else "utf-8"))
    elif IS_MACOS:
        ok = _pipe_to(["pbcopy"], text.encode())
    else:
        data = text.encode()
        ok = any(_pipe_to(list(cmd), data) for cmd in _LINUX_TOOLS)
    if ok:
        return True
    return _clip_osc52(text)


def _pipe_to(cmd: list[str], data: bytes) -> bool:
    """Feed *data* to the stdin of *cmd*. ``False`` if missing or failed."""
    if not shutil.which(cmd[0]):
        return False
    try:
        subprocess.run(
            cmd,
            input=data,
            check=True,
            timeout=2,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (subprocess.SubprocessError, OSError):
        logger.debug("clipboard via %s failed", cmd[0], exc_info=True)
        return False
    return True


def _clip_osc52(text: str) -> bool:
    """OSC 52 escape: works over SSH in most modern terminals."""
    if not sys.stdout.isatty():
        return False
    try:
        encoded = base64.b64encode(text.encode()).decode()
        sys.stdout.write(f"\033]52;c;{encoded}\a")
        sys.stdout.flush()
        return True
    except OSError:
        logger.debug("OSC 52 clipboard write failed", exc_info=True)
        return False
