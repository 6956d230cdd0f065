"""Hand-written block and variable helpers for theme stylesheets.

These functions understand just enough CSS to locate brace-delimited blocks
and read single-line custom-property declarations:

    :root {
      --radius: 0.625rem;
      --background: oklch(1 0 0);
    }

Braces inside string literals or comments are counted like any other brace.
"""

from __future__ import annotations

import re

__all__ = [
    "extract_block",
    "block_body",
    "extract_variables",
    "merge_variables",
    "compose_block",
]

# Inline /* ... */ comment on a single line.
_COMMENT_RE = re.compile(r"/\*.*?\*/")

# A single custom-property declaration: --name: value;
_VAR_RE = re.compile(
    r"""
    ^--(?P<name>[\w-]+)     # custom property name
    :\s*                    # colon separator
    (?P<value>.+)           # value, greedy up to the final semicolon
    ;$
    """,
    re.VERBOSE,
)


def _locate(text: str, keyword: str, selector: bool) -> int:
    """Return the index of *keyword* in *text*, or -1 if absent."""
    if not selector:
        return text.find(keyword)
    # A selector only counts when its opening brace follows it.
    match = re.search(re.escape(keyword) + r"\s*\{", text)
    return match.start() if match else -1


def extract_block(text: str, keyword: str, *, selector: bool = False) -> str:
    """Return the block starting at the first *keyword* in *text*.

    The block runs from the keyword through the brace matching the first
    ``{`` after it. Unbalanced input yields everything through the end of
    *text*. Returns ``""`` when the keyword or its opening brace is missing.

    With ``selector=True`` the keyword must be followed by optional
    whitespace and ``{``, so ``(&:is(.dark *))`` does not match ``.dark``.
    """
    start = _locate(text, keyword, selector)
    if start == -1:
        return ""

    open_idx = text.find("{", start)
    if open_idx == -1:
        return ""

    depth = 1
    i = open_idx + 1
    while i < len(text) and depth > 0:
        char = text[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        i += 1

    return text[start:i]


def block_body(block: str) -> str:
    """Return the text between a block's opening and closing braces."""
    open_idx = block.find("{")
    if open_idx == -1:
        return ""
    body = block[open_idx + 1:]
    if body.endswith("}"):
        body = body[:-1]
    return body


def extract_variables(body: str) -> dict[str, str]:
    """Parse ``--name: value;`` lines from a block body.

    One declaration per line. Later duplicates overwrite earlier ones and
    anything else is ignored.
    """
    variables: dict[str, str] = {}
    for raw_line in body.split("\n"):
        line = _COMMENT_RE.sub("", raw_line).strip()
        match = _VAR_RE.match(line)
        if match:
            variables[f"--{match.group('name')}"] = match.group("value").strip()
    return variables


def merge_variables(
    template: dict[str, str], user: dict[str, str]
) -> dict[str, str]:
    """Merge *user* values over *template* defaults.

    Template keys come first in template order, then keys only the user
    defines, in the user's order.
    """
    merged = {key: user.get(key, value) for key, value in template.items()}
    for key, value in user.items():
        if key not in merged:
            merged[key] = value
    return merged


def compose_block(selector: str, variables: dict[str, str]) -> str:
    """Render *variables* as a block that :func:`extract_variables` reads back."""
    lines = [f"  {key}: {value};" for key, value in variables.items()]
    return f"{selector} {{\n" + "\n".join(lines) + "\n}"
