"""Theme injection: merge the clyro theme into a project stylesheet."""

from __future__ import annotations

import logging
from pathlib import Path

from clyro.theme.blocks import compose_block, merge_variables
from clyro.theme.imports import REQUIRED_IMPORTS, collect_imports
from clyro.theme.model import (
    STRIP_ORDER,
    InjectionResult,
    InjectionStatus,
    MergeStrategy,
    SectionKind,
    ThemeTemplate,
)
from clyro.theme.template import DEFAULT_TEMPLATE

__all__ = ["merge_stylesheet", "inject_theme"]

log = logging.getLogger(__name__)


def _render_section(
    kind: SectionKind, template: ThemeTemplate, working: str
) -> str:
    """Produce the fresh text for one managed section."""
    if kind.strategy is MergeStrategy.REPLACE_WHOLESALE:
        return template.blocks.get(kind, "")
    merged = merge_variables(template.variables.get(kind, {}), kind.variables(working))
    return compose_block(kind.keyword, merged)


def _strip_sections(working: str) -> str:
    """Remove the first occurrence of every managed section from *working*."""
    for kind in STRIP_ORDER:
        block = kind.extract(working)
        if block:
            working = working.replace(block, "", 1)
    return working.strip()


def merge_stylesheet(
    css: str,
    template: ThemeTemplate | None = None,
    required_imports: tuple[str, ...] | list[str] = REQUIRED_IMPORTS,
) -> str:
    """Merge *template* into the stylesheet text *css*.

    User values in ``:root`` and ``.dark`` survive, template-only variables
    are added, and the ``@theme inline`` and ``@layer base`` blocks are
    replaced by the template's. Everything else is kept after the managed
    sections. Running the merge on its own output changes nothing.

    A leading byte-order mark is dropped. Import lines that only start a
    line once a managed block is stripped from in front of them are hoisted
    with the others.
    """
    template = template or DEFAULT_TEMPLATE

    imports, working = collect_imports(css.removeprefix("\ufeff"), required_imports)
    working = working.strip()

    sections = [_render_section(kind, template, working) for kind in SectionKind]
    exposed, leftover = collect_imports(_strip_sections(working), ())
    imports += [line for line in exposed if line not in imports]
    leftover = leftover.strip()

    pieces = ["\n".join(imports), *sections, leftover]
    merged = "\n\n".join(piece for piece in pieces if piece)
    return merged.strip() + "\n"


def inject_theme(
    css_path: str | Path,
    template: ThemeTemplate | None = None,
    *,
    dry_run: bool = False,
) -> InjectionResult:
    """Merge the theme into the stylesheet at *css_path* in place.

    A missing file is reported through the result, not raised. Errors while
    writing propagate to the caller.
    """
    path = Path(css_path)
    if not path.is_file():
        log.warning("CSS file not found: %s", path)
        return InjectionResult(status=InjectionStatus.NOT_FOUND, path=path)

    original = path.read_text(encoding="utf-8")
    merged = merge_stylesheet(original, template)

    if dry_run:
        log.debug("Dry run, leaving %s untouched", path)
        return InjectionResult(status=InjectionStatus.MERGED, path=path, content=merged)

    path.write_text(merged, encoding="utf-8")
    log.info("Merged clyro theme into %s", path.name)
    return InjectionResult(
        status=InjectionStatus.MERGED, path=path, content=merged, written=True
    )
