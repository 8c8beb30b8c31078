import html
import logging
import re

import markdown

from folio.services.highlighter import highlight_code

logger = logging.getLogger(__name__)

FENCE_RE = re.compile(r"^(?P<indent>[ \t]*)(`{3,}|~{3,})")
MDX_STATEMENT_RE = re.compile(r"^(import|export)\s")
CODE_BLOCK_RE = re.compile(
    r'<pre><code class="language-(?P<lang>[\w+#.-]+)">(?P<code>.*?)</code></pre>',
    re.DOTALL,
)

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]


def strip_mdx_statements(text: str) -> str:
    """Drop MDX ``import``/``export`` lines outside fenced code blocks."""
    out = []
    in_fence = False
    fence_marker = ""
    for line in text.splitlines():
        fence_match = FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(2)
            if not in_fence:
                in_fence = True
                fence_marker = marker
            elif marker == fence_marker:
                in_fence = False
                fence_marker = ""
            out.append(line)
            continue
        if not in_fence and MDX_STATEMENT_RE.match(line):
            continue
        out.append(line)
    return "\n".join(out)


def render_code_block(code: str, lang: str) -> str:
    code = code.strip()
    light = highlight_code(code, lang, theme="light")
    dark = highlight_code(code, lang, theme="dark")
    return (
        f'<div class="code-block" data-lang="{html.escape(lang)}">'
        '<button type="button" class="code-copy" aria-label="Copy code" '
        'aria-pressed="false">Copy</button>'
        f'<div class="code-light">{light}</div>'
        f'<div class="code-dark">{dark}</div>'
        "</div>"
    )


def render_markdown(source: str) -> str:
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)
    body = md.convert(strip_mdx_statements(source or ""))

    def repl(match: re.Match) -> str:
        code = html.unescape(match.group("code"))
        return render_code_block(code, match.group("lang"))

    return CODE_BLOCK_RE.sub(repl, body)
