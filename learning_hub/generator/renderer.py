r"""Render the learning-hub markdown subset into HTML fragments.

The renderer is a fixed, ordered list of regex substitutions applied to the
whole document: fenced code, headers, bold, inline code (optional), list items
with ``<ul>`` wrapping, then paragraph splitting. Each pass sees the output of
the previous one; no tree is built and nothing is validated.

Example
-------
>>> from learning_hub.generator.renderer import render_fragment
>>> render_fragment("## Title")
'<h2>Title</h2>'
>>> render_fragment("Plain **bold** text")
'<p>Plain <strong>bold</strong> text</p>'
"""

from __future__ import annotations

import html
import re
import secrets
import typing as typ

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from learning_hub._constants import LIST_WRAPPING_MODES, ListWrapping

CODE_BLOCK_PATTERN = re.compile(r"```(\w+)?[ \t]*\n(.*?)```", re.DOTALL | re.ASCII)
H3_PATTERN = re.compile(r"^### (.*)$", re.MULTILINE)
H2_PATTERN = re.compile(r"^## (.*)$", re.MULTILINE)
H1_PATTERN = re.compile(r"^# (.*)$", re.MULTILINE)
BOLD_PATTERN = re.compile(r"\*\*(.*?)\*\*")
INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")
LIST_ITEM_PATTERN = re.compile(r"^- (.*)$", re.MULTILINE)
LIST_DOCUMENT_PATTERN = re.compile(r"(<li>.*</li>)", re.DOTALL)
LIST_RUN_PATTERN = re.compile(r"<li>.*</li>(?:\n<li>.*</li>)*")
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
LINE_ENDING_PATTERN = re.compile(r"\r\n?")

_CODE_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)
_PLACEHOLDER = "<!--learning-hub-code-{token}-{index}-->"
_PLACEHOLDER_PATTERN = r"<!--learning-hub-code-{token}-(\d+)-->"


def escape_code(text: str) -> str:
    """Escape ``text`` for use inside a ``<code>`` element.

    Ampersands are replaced first so entities produced by the later
    replacements are not escaped twice.

    >>> escape_code('print("<hi>")')
    'print(&quot;&lt;hi&gt;&quot;)'
    """
    for raw, entity in _CODE_ESCAPES:
        text = text.replace(raw, entity)
    return text


class FragmentRenderer:
    """Convert markdown text to an HTML fragment with ordered regex passes."""

    def __init__(
        self,
        *,
        inline_code: bool = False,
        list_wrapping: ListWrapping = "document",
        highlight_code: bool = False,
        pygments_style: str = "monokai",
    ) -> None:
        """Configure which optional passes run.

        Parameters
        ----------
        inline_code : bool, optional
            Convert single-backtick spans into ``<code>`` elements.
        list_wrapping : {"document", "per_run"}, optional
            ``"document"`` inserts one ``<ul>`` spanning the first ``<li>`` to
            the last ``</li>`` of the whole fragment. ``"per_run"`` wraps each
            run of adjacent list items separately.
        highlight_code : bool, optional
            Highlight fenced blocks with Pygments and keep them out of the
            later passes.
        pygments_style : str, optional
            Pygments style used when ``highlight_code`` is enabled.

        Raises
        ------
        ValueError
            If ``list_wrapping`` is not a known mode.
        """
        if list_wrapping not in LIST_WRAPPING_MODES:
            msg = (
                f"Unknown list wrapping mode '{list_wrapping}'; "
                f"expected one of {', '.join(LIST_WRAPPING_MODES)}."
            )
            raise ValueError(msg)
        self.inline_code = inline_code
        self.list_wrapping = list_wrapping
        self.highlight_code = highlight_code
        self.pygments_style = pygments_style
        self._formatter: HtmlFormatter | None = None

    @property
    def formatter(self) -> HtmlFormatter:
        """Return the Pygments formatter, created on first use.

        Raises
        ------
        pygments.util.ClassNotFound
            If ``pygments_style`` does not name an installed style.
        """
        if self._formatter is None:
            self._formatter = HtmlFormatter(
                style=self.pygments_style, cssclass="codehilite"
            )
        return self._formatter

    @property
    def stylesheet(self) -> str:
        """Return the CSS for highlighted blocks, or ``""`` when highlighting is off."""
        if not self.highlight_code:
            return ""
        return self.formatter.get_style_defs(".codehilite")

    def render(self, markdown_text: str) -> str:
        """Return the HTML fragment for ``markdown_text``.

        ``\\r\\n`` and lone ``\\r`` line endings are read as ``\\n`` so header
        and list text never keeps a trailing carriage return.
        """
        held: list[str] = []
        token = secrets.token_hex(8)
        text = LINE_ENDING_PATTERN.sub("\n", markdown_text)
        text = self._render_code_blocks(text, held, token)
        text = H3_PATTERN.sub(r"<h3>\1</h3>", text)
        text = H2_PATTERN.sub(r"<h2>\1</h2>", text)
        text = H1_PATTERN.sub(r"<h1>\1</h1>", text)
        text = BOLD_PATTERN.sub(r"<strong>\1</strong>", text)
        if self.inline_code:
            text = INLINE_CODE_PATTERN.sub(r"<code>\1</code>", text)
        text = self._render_lists(text)
        text = self._render_paragraphs(text)
        if not held:
            return text
        placeholder = re.compile(_PLACEHOLDER_PATTERN.format(token=token))
        return placeholder.sub(lambda m: held[int(m.group(1))], text)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Highlight ``code`` with Pygments and tag it with ``data-language``."""
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        rendered = highlight(code, lexer, self.formatter).rstrip("\n")
        safe_lang = html.escape(lang, quote=True)
        return CODEHILITE_OPEN_TAG.sub(
            f'<div class="codehilite" data-language="{safe_lang}">', rendered, 1
        )

    def _render_code_blocks(self, text: str, held: list[str], token: str) -> str:
        def _replace(match: re.Match[str]) -> str:
            lang = match.group(1) or "text"
            body = match.group(2).strip()
            if not self.highlight_code:
                return (
                    f'<pre><code class="language-{lang}">'
                    f"{escape_code(body)}</code></pre>"
                )
            held.append(self.code_block(body, lang))
            return _PLACEHOLDER.format(token=token, index=len(held) - 1)

        return CODE_BLOCK_PATTERN.sub(_replace, text)

    def _render_lists(self, text: str) -> str:
        text = LIST_ITEM_PATTERN.sub(r"<li>\1</li>", text)
        if self.list_wrapping == "per_run":
            return LIST_RUN_PATTERN.sub(lambda m: f"<ul>{m.group(0)}</ul>", text)
        return LIST_DOCUMENT_PATTERN.sub(r"<ul>\1</ul>", text, count=1)

    @staticmethod
    def _render_paragraphs(text: str) -> str:
        blocks: list[str] = []
        for block in text.split("\n\n"):
            if block.strip() and not block.startswith("<"):
                blocks.append(f"<p>{block.strip()}</p>")
            else:
                blocks.append(block)
        return "\n".join(blocks)


def render_fragment(markdown_text: str, **options: typ.Any) -> str:
    """Render ``markdown_text`` with a one-off :class:`FragmentRenderer`."""
    return FragmentRenderer(**options).render(markdown_text)


__all__ = [
    "CODE_BLOCK_PATTERN",
    "LIST_WRAPPING_MODES",
    "FragmentRenderer",
    "ListWrapping",
    "escape_code",
    "render_fragment",
]
