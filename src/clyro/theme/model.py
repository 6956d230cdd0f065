"""Theme model: managed section kinds, the merge template, and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from clyro.theme.blocks import block_body, extract_block, extract_variables


class MergeStrategy(Enum):
    """How a managed section is regenerated on each run.

    MERGE_VARIABLES regions are user-owned: user values survive the merge.
    REPLACE_WHOLESALE regions are engine-owned: the template copy always wins.
    """

    MERGE_VARIABLES = "merge_variables"
    REPLACE_WHOLESALE = "replace_wholesale"


class SectionKind(Enum):
    """A managed section of the stylesheet, in output order."""

    MAPPING_BLOCK = ("@theme inline", MergeStrategy.REPLACE_WHOLESALE)
    ROOT_VARS = (":root", MergeStrategy.MERGE_VARIABLES)
    DARK_VARS = (".dark", MergeStrategy.MERGE_VARIABLES)
    BASE_LAYER_BLOCK = ("@layer base", MergeStrategy.REPLACE_WHOLESALE)

    def __init__(self, keyword: str, strategy: MergeStrategy) -> None:
        self.keyword = keyword
        self.strategy = strategy

    @property
    def is_selector(self) -> bool:
        """True for sections located by a selector rather than an at-rule."""
        return self.strategy is MergeStrategy.MERGE_VARIABLES

    def extract(self, text: str) -> str:
        """Return this section's block from *text*, or ``""``."""
        return extract_block(text, self.keyword, selector=self.is_selector)

    def variables(self, text: str) -> dict[str, str]:
        """Return the custom properties declared in this section of *text*."""
        return extract_variables(block_body(self.extract(text)))


# Old sections are removed from the user's text in this order.
STRIP_ORDER: tuple[SectionKind, ...] = (
    SectionKind.ROOT_VARS,
    SectionKind.DARK_VARS,
    SectionKind.MAPPING_BLOCK,
    SectionKind.BASE_LAYER_BLOCK,
)


@dataclass(frozen=True)
class ThemeTemplate:
    """The reference stylesheet and the sections derived from it.

    Variable sections hold ordered custom-property maps; the remaining
    sections hold verbatim block text.
    """

    css: str
    variables: dict[SectionKind, dict[str, str]] = field(default_factory=dict)
    blocks: dict[SectionKind, str] = field(default_factory=dict)

    @classmethod
    def from_css(cls, css: str) -> ThemeTemplate:
        """Derive every managed section from *css* once."""
        variables: dict[SectionKind, dict[str, str]] = {}
        blocks: dict[SectionKind, str] = {}
        for kind in SectionKind:
            if kind.strategy is MergeStrategy.MERGE_VARIABLES:
                variables[kind] = kind.variables(css)
            else:
                blocks[kind] = kind.extract(css)
        return cls(css=css, variables=variables, blocks=blocks)

    @property
    def root(self) -> dict[str, str]:
        return self.variables.get(SectionKind.ROOT_VARS, {})

    @property
    def dark(self) -> dict[str, str]:
        return self.variables.get(SectionKind.DARK_VARS, {})


class InjectionStatus(Enum):
    """Outcome of merging the theme into a stylesheet file."""

    MERGED = "merged"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class InjectionResult:
    """Result of :func:`clyro.theme.inject_theme`."""

    status: InjectionStatus
    path: Path
    content: str = ""
    written: bool = False

    @property
    def merged(self) -> bool:
        return self.status is InjectionStatus.MERGED

    @property
    def not_found(self) -> bool:
        return self.status is InjectionStatus.NOT_FOUND
