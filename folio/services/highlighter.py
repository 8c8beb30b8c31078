import logging
import threading
from typing import Dict, Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

THEMES = {"light": "default", "dark": "monokai"}


class Highlighter:
    """One HtmlFormatter per theme, built once and reused."""

    def __init__(self, themes: Dict[str, str]):
        self.formatters = {
            name: HtmlFormatter(style=style, cssclass=f"highlight highlight-{name}")
            for name, style in themes.items()
        }

    def code_to_html(self, code: str, lang: str, theme: str = "dark") -> str:
        formatter = self.formatters[theme]
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            logger.debug(f"Unknown language {lang!r}, rendering as plain text")
            lexer = TextLexer()
        return highlight(code, lexer, formatter)

    def stylesheet(self) -> str:
        return "\n".join(
            formatter.get_style_defs(f".highlight-{name}")
            for name, formatter in self.formatters.items()
        )


_instance: Optional[Highlighter] = None
_lock = threading.Lock()


def get_highlighter() -> Highlighter:
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = Highlighter(THEMES)
                logger.debug("Highlighter initialized")
    return _instance


def reset_highlighter() -> None:
    """Drop the shared instance (tests only)."""
    global _instance
    with _lock:
        _instance = None


def highlight_code(code: str, lang: str, theme: str = "dark") -> str:
    return get_highlighter().code_to_html(code, lang or "text", theme)
