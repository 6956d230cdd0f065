from clyro.theme.blocks import (
    block_body,
    compose_block,
    extract_block,
    extract_variables,
    merge_variables,
)
from clyro.theme.imports import REQUIRED_IMPORTS, collect_imports
from clyro.theme.injector import inject_theme, merge_stylesheet
from clyro.theme.model import (
    InjectionResult,
    InjectionStatus,
    MergeStrategy,
    SectionKind,
    ThemeTemplate,
)
from clyro.theme.template import DEFAULT_TEMPLATE, THEME_TEMPLATE_CSS

__all__ = [
    "block_body",
    "compose_block",
    "extract_block",
    "extract_variables",
    "merge_variables",
    "REQUIRED_IMPORTS",
    "collect_imports",
    "inject_theme",
    "merge_stylesheet",
    "InjectionResult",
    "InjectionStatus",
    "MergeStrategy",
    "SectionKind",
    "ThemeTemplate",
    "DEFAULT_TEMPLATE",
    "THEME_TEMPLATE_CSS",
]
