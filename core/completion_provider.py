"""
Completion Provider Module
Turns the cached class catalog into completion items for markup and component files.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

from jinja2 import Environment

from .attribute_context import is_class_attribute_context, is_inside_literal
from .css_class_extractor import ClassCatalog

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = (
    'html',
    'javascript',
    'typescript',
    'javascriptreact',
    'typescriptreact',
    'typescriptjsx',
)

# Typing one of these opens an attribute value
TRIGGER_CHARACTERS = ('"', "'", '{')

COMPLETION_KIND = 'value'

DOCUMENTATION_TEMPLATE = Environment(autoescape=False, keep_trailing_newline=True).from_string(
    "```{{ language }}\n{{ properties }}\n```\n"
)

@dataclass(frozen=True)
class CompletionItem:
    label: str
    kind: str
    detail: str
    documentation: str
    insert_text: str
    inside_literal: bool = False
    is_jsx: bool = False

    def to_dict(self) -> Dict:
        return asdict(self)

def render_documentation(properties: str, language: str = 'css') -> str:
    """Render a declaration block as a fenced markdown code block."""
    return DOCUMENTATION_TEMPLATE.render(language=language, properties=properties)

def build_completion_item(class_name: str, properties: str,
                          inside_literal: bool = False, is_jsx: bool = False) -> CompletionItem:
    return CompletionItem(
        label=class_name,
        kind=COMPLETION_KIND,
        detail=f"{class_name} - Mint CSS class",
        documentation=render_documentation(properties),
        insert_text=class_name,
        inside_literal=inside_literal,
        is_jsx=is_jsx,
    )

def provide_completion_items(catalog: ClassCatalog,
                             line_prefix: str,
                             language_id: str = 'html') -> Optional[List[CompletionItem]]:
    """
    Offer every catalog class when the cursor is inside a class attribute value.

    Args:
        catalog: Published class catalog snapshot
        line_prefix: Text of the current line up to the cursor
        language_id: Editor language of the document

    Returns:
        Completion items in catalog order, or None when no suggestions apply
    """
    if language_id not in SUPPORTED_LANGUAGES:
        logger.debug(f"Unsupported language: {language_id}")
        return None

    if not is_class_attribute_context(line_prefix):
        logger.debug("ClassName not found")
        return None

    inside_literal = is_inside_literal(line_prefix)
    is_jsx = 'react' in language_id

    return [
        build_completion_item(class_name, properties, inside_literal, is_jsx)
        for class_name, properties in catalog.items()
    ]
