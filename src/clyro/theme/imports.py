"""Import line collection for theme stylesheets."""

from __future__ import annotations

__all__ = ["REQUIRED_IMPORTS", "IMPORT_KEYWORD", "collect_imports"]

IMPORT_KEYWORD = "@import"

REQUIRED_IMPORTS: tuple[str, ...] = (
    '@import "tailwindcss";',
    '@import "tw-animate-css";',
)


def collect_imports(
    text: str, required: tuple[str, ...] | list[str] = REQUIRED_IMPORTS
) -> tuple[list[str], str]:
    """Pull import lines out of *text*.

    Returns the trimmed import lines in first-seen order with exact
    duplicates dropped and any missing *required* lines appended, plus
    *text* with every import line removed.
    """
    imports: list[str] = []
    kept: list[str] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped.startswith(IMPORT_KEYWORD):
            if stripped not in imports:
                imports.append(stripped)
            continue
        kept.append(line)

    for req in required:
        if req not in imports:
            imports.append(req)

    return imports, "\n".join(kept)
