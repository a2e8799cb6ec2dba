"""Text helpers for rendering translated values.

Provides HTML named-entity encoding for substituted values and positional
``{n}`` template formatting.
"""

import re
from html.entities import codepoint2name
from typing import Any

_TEMPLATE_PATTERN = re.compile(r"\{\{|\}\}|\{(\d+)\}")

# Characters without an HTML 4 entity name that still need escaping
_NUMERIC_ESCAPES = {"'": "&#x27;", "`": "&#x60;"}


def encode_html(text: str) -> str:
    """Encode text for safe embedding in markup.

    Markup-significant characters and every character outside printable
    ASCII are replaced by named references (e.g. ``&amp;``, ``&eacute;``),
    or hexadecimal references where no name exists.

    Args:
        text: Raw text.

    Returns:
        Encoded text.
    """
    encoded = []
    for char in text:
        code = ord(char)
        if char in '&<>"':
            encoded.append(f"&{codepoint2name[code]};")
        elif char in _NUMERIC_ESCAPES:
            encoded.append(_NUMERIC_ESCAPES[char])
        elif code > 0x7E:
            name = codepoint2name.get(code)
            encoded.append(f"&{name};" if name else f"&#x{code:X};")
        else:
            encoded.append(char)
    return "".join(encoded)


def format_template(template: str, *args: Any) -> str:
    """Substitute positional ``{n}`` placeholders.

    ``{{`` and ``}}`` produce literal braces. A placeholder whose index has
    no matching argument is left in place.

    Args:
        template: Text with placeholders (e.g. "This is a {0}").
        *args: Positional values.

    Returns:
        Formatted text.

    Example:
        >>> format_template("This is a {0}", "test")
        'This is a test'
        >>> format_template("{{0}} is {0}", "zero")
        '{0} is zero'
    """

    def _replace(match: "re.Match[str]") -> str:
        token = match.group(0)
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return token

    return _TEMPLATE_PATTERN.sub(_replace, template)
