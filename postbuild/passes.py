"""
The rule lists for each patch pass over dist/index.html.

- viewport: viewport meta after the charset tag + short title
- mobile:   mobile stylesheet in place of the bare reset style + long title
- unified:  both, in a fixed order, with one title and no duplicate viewport
"""

import html
import re

from postbuild.mobile_css import MOBILE_CSS
from postbuild.rules import Rule

CHARSET_TAG = '<meta charset="UTF-8">'
VIEWPORT_TAG = '<meta name="viewport" content="width=device-width, initial-scale=1.0">'
PLACEHOLDER_TITLE = '<title>Main</title>'
BASIC_STYLE = '<style>body { padding: 0; margin: 0; }</style>'

# Charset tag not already followed by a viewport line, so reruns don't stack tags
CHARSET_PATTERN = re.escape(CHARSET_TAG) + r'(?![ \t]*\r?\n[ \t]*<meta name="viewport")'
VIEWPORT_RE = re.compile(r'<meta\s+name=["\']viewport["\']', re.IGNORECASE)


def _line_indent(text, pos):
    """Leading whitespace of the line containing pos."""
    line_start = text.rfind('\n', 0, pos) + 1
    prefix = text[line_start:pos]
    return prefix[:len(prefix) - len(prefix.lstrip(' \t'))]


def _insert_viewport(match):
    indent = _line_indent(match.string, match.start())
    return match.group(0) + '\n' + indent + VIEWPORT_TAG


def title_rule(title):
    return Rule('title', PLACEHOLDER_TITLE, f'<title>{html.escape(title, quote=False)}</title>')


def viewport_rule(unless=None):
    return Rule('viewport', CHARSET_PATTERN, _insert_viewport, regex=True, unless=unless)


def mobile_css_rule(css=MOBILE_CSS):
    return Rule('mobile_css', BASIC_STYLE, css)


def viewport_rules(title):
    return [viewport_rule(), title_rule(title)]


def mobile_rules(title, css=MOBILE_CSS):
    return [mobile_css_rule(css), title_rule(title)]


def unified_rules(title, css=MOBILE_CSS):
    """Mobile stylesheet first; the charset insert only runs if no viewport tag exists yet."""
    return [
        mobile_css_rule(css),
        viewport_rule(unless=VIEWPORT_RE),
        title_rule(title),
    ]
