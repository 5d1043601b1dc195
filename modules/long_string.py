from __future__ import annotations

"""Static content holder for the long string page.

The holder owns two fixed text blobs and, when the hosting page initializes
it, reports their approximate size in bytes to the diagnostic log.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from config.page_content import FILLER_TEXT, MAIN_TEXT

# Width of one character in the fixed-width size estimate (UTF-16 code unit).
CHAR_WIDTH = 2

_logger = logging.getLogger("long_string.component")


def byte_length(text: str, char_width: int = CHAR_WIDTH, encoding: Optional[str] = None) -> int:
    """Return the size of ``text`` in bytes.

    Without an ``encoding`` the size is estimated as ``len(text) * char_width``.
    With one, the text is encoded and the exact byte count is returned.
    """
    if encoding:
        return len(text.encode(encoding))
    if isinstance(char_width, bool) or not isinstance(char_width, int) or char_width < 1:
        raise ValueError(f"char_width must be a positive integer, got {char_width!r}")
    return len(text) * char_width


def _require_text(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


class LongString:
    """Hold the page's main text and filler text."""

    def __init__(
        self,
        main_text: str = MAIN_TEXT,
        filler_text: str = FILLER_TEXT,
        char_width: int = CHAR_WIDTH,
        encoding: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._main_text = _require_text("main_text", main_text)
        self._filler_text = _require_text("filler_text", filler_text)
        # fail at construction rather than inside on_init
        byte_length("", char_width, encoding)
        self.char_width = char_width
        self.encoding = encoding
        self.logger = logger or _logger
        self._initialized = False

    @property
    def main_text(self) -> str:
        return self._main_text

    @property
    def filler_text(self) -> str:
        return self._filler_text

    @property
    def initialized(self) -> bool:
        return self._initialized

    def sizes(self) -> Tuple[int, int]:
        """Return the byte sizes of the main text and the filler text."""
        return (
            byte_length(self._main_text, self.char_width, self.encoding),
            byte_length(self._filler_text, self.char_width, self.encoding),
        )

    def on_init(self) -> Tuple[int, int]:
        """Initialization hook: log both byte sizes, main text first."""
        main_size, filler_size = self.sizes()
        self.logger.debug("%d", main_size)
        self.logger.debug("%d", filler_size)
        self._initialized = True
        return main_size, filler_size

    @classmethod
    def from_settings(cls, settings: Dict[str, Any], logger: Optional[logging.Logger] = None) -> "LongString":
        """Build a holder from the ``sizing`` section of the app settings."""
        sizing = settings.get("sizing") or {}
        return cls(
            char_width=sizing.get("char_width", CHAR_WIDTH),
            encoding=sizing.get("encoding"),
            logger=logger,
        )


__all__ = ["LongString", "byte_length", "CHAR_WIDTH"]
