"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Printable characters come back as themselves; escape sequences are folded into
named tokens so their trailing bytes are never mistaken for key presses.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_TOKENS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}


class InputClosedError(EOFError):
    """Raised when the input descriptor reaches end of file."""


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> bytes:
    first = lead[0]
    if first >= 0xF0:
        missing = 3
    elif first >= 0xE0:
        missing = 2
    elif first >= 0xC0:
        missing = 1
    else:
        return lead
    out = lead
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        out += nxt
    return out


def _skip_csi_parameters(fd: int) -> bytes | None:
    """Consume CSI parameter bytes and return the final byte, if any."""
    for _ in range(32):
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return None
        if 0x40 <= part[0] <= 0x7E:
            return part
    return None


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    With ``timeout_ms`` set, returns ``""`` when no byte arrives in time.
    Without it, blocks until a byte arrives and raises ``InputClosedError``
    when the descriptor is at end of file.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            if timeout_ms is not None:
                return ""
            raise InputClosedError(f"end of input on fd {fd}")

    if ch == b"\x03":
        return "CTRL_C"
    if ch == b"\t":
        return "TAB"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"
    if ch == b"\r":
        return "ENTER_CR"
    if ch == b"\n":
        return "ENTER_LF"

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _CSI_FINAL_TOKENS.get(final, "ESC")
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq in _CSI_FINAL_TOKENS:
        return _CSI_FINAL_TOKENS[seq]
    if 0x30 <= seq[0] <= 0x3F:
        # Parameterized sequence (modified arrows, function keys, mouse).
        final = _skip_csi_parameters(fd)
        if final is None:
            return "ESC"
        if final == b"~":
            return "FUNCTION"
        return _CSI_FINAL_TOKENS.get(final, "ESC")
    return "ESC"


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "InputClosedError", "read_key"]
