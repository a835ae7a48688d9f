"""
CSS Class Extractor Module
Scans raw CSS text for top-level single-class rules and builds the class catalog.
"""

import re
import logging
from types import MappingProxyType
from typing import Dict, Mapping

logger = logging.getLogger(__name__)

# A dot, the class name, optional whitespace and a block with no closing brace in it
CLASS_RULE_REGEX = re.compile(r'\.([a-zA-Z0-9_-]+)\s*\{([^}]*)\}')

# Characters that may precede the dot of a selector that starts a rule
RULE_BOUNDARY_CHARS = frozenset('{};,')

ClassCatalog = Mapping[str, str]

EMPTY_CATALOG: ClassCatalog = MappingProxyType({})


def _starts_rule(css_text: str, index: int) -> bool:
    """Check that the selector at ``index`` is not part of a compound or combinator selector."""
    position = index - 1
    while position >= 0 and css_text[position].isspace():
        position -= 1
    if position < 0 or css_text[position] in RULE_BOUNDARY_CHARS:
        return True
    # end of a comment
    return css_text[position] == '/' and position > 0 and css_text[position - 1] == '*'


def normalize_properties(properties: str) -> str:
    """Put each semicolon-terminated declaration on its own line."""
    return properties.replace(';', ';\n').rstrip('\n')


def extract_class_definitions(css_content: str) -> ClassCatalog:
    """
    Extract class names and their declaration blocks from CSS text.

    Args:
        css_content: Raw CSS text

    Returns:
        Read-only mapping of class name -> normalized declaration block, in
        first-occurrence order. A class defined twice keeps the body of its
        last definition.
    """
    definitions: Dict[str, str] = {}
    skipped = 0

    for match in CLASS_RULE_REGEX.finditer(css_content):
        if not _starts_rule(css_content, match.start()):
            skipped += 1
            continue

        class_name = match.group(1)
        properties = match.group(2).strip()

        if class_name and properties:
            definitions[class_name] = normalize_properties(properties)

    logger.debug(f"Extracted {len(definitions)} classes, skipped {skipped} compound selectors")
    return MappingProxyType(definitions)
