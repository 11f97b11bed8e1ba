import hashlib
import logging

logger = logging.getLogger("cursorpage")

# Silent unless the host application configures logging
logger.addHandler(logging.NullHandler())


def redact_cursor(cursor: str) -> str:
    """
    Redacts an opaque cursor for logging.
    Cursors often embed record keys, so the value is hashed to allow
    correlation between log lines without revealing it.
    """
    if not cursor:
        return "<empty>"
    return hashlib.sha256(cursor.encode("utf-8")).hexdigest()[:8]
