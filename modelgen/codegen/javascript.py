"""
Helpers for rendering JavaScript source shared by the Sequelize and Mongoose generators.

User supplied text is inserted as-is: quotes in names or default values are not
escaped and will produce JavaScript that does not parse.
"""
from typing import List, Sequence, Tuple

from ..schemas import ModuleStyle

Property = Tuple[str, str]


def js_bool(value: bool) -> str:
    """JavaScript boolean literal."""
    return "true" if value else "false"


def js_string(value: str) -> str:
    """Single-quoted literal, contents unescaped."""
    return f"'{value}'"


def js_default(value: str) -> str:
    """Quoted literal for a default value, ``null`` when there is none."""
    return js_string(value) if value else "null"


def import_statement(binding: str, module: str, style: ModuleStyle) -> str:
    """``import <binding> from '<module>';`` or the CommonJS ``require`` equivalent."""
    if style == ModuleStyle.COMMON_JS:
        return f"const {binding} = require('{module}');"
    return f"import {binding} from '{module}';"


def export_statement(name: str, style: ModuleStyle) -> str:
    """``export default <name>;`` or ``module.exports = <name>;``."""
    if style == ModuleStyle.COMMON_JS:
        return f"module.exports = {name};"
    return f"export default {name};"


def property_lines(properties: Sequence[Property], indent: str = "  ") -> List[str]:
    """One ``key: value,`` line per property, each ending in a trailing comma."""
    return [f"{indent}{key}: {value}," for key, value in properties]


def field_block(name: str, properties: Sequence[Property]) -> str:
    """A nested object entry for one model field."""
    lines = [f"  {name}: {{"]
    lines.extend(property_lines(properties, indent="    "))
    lines.append("  },")
    return "\n".join(lines)


def object_literal(entries: Sequence[str]) -> str:
    """Wrap pre-rendered entries in braces, one entry per line."""
    return "\n".join(["{", *entries, "}"])
