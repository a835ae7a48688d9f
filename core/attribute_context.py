"""
Attribute Context Module
Line-local heuristics for deciding whether the cursor sits inside a class attribute value.
"""

import re

# class="  class='  class={  className="  ... followed by an unterminated value
CLASS_ATTRIBUTE_REGEX = re.compile(r'class(Name)?=["\'{][^"\'{]*$')

LITERAL_OPENERS = ('"', "'", '{')


def is_class_attribute_context(line_prefix: str) -> bool:
    """Return True when the text before the cursor ends inside a class/className value."""
    return CLASS_ATTRIBUTE_REGEX.search(line_prefix) is not None


def is_inside_literal(line_prefix: str) -> bool:
    return line_prefix.endswith(LITERAL_OPENERS)
