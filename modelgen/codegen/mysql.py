"""
MySQL CREATE TABLE generator.
"""
from typing import List
import logging

from ..schemas import FieldSpec, ModelDescription
from .types import map_relational_type

logger = logging.getLogger(__name__)

TIMESTAMP_COLUMNS = [
    "`createdAt` TIMESTAMP DEFAULT CURRENT_TIMESTAMP",
    "`updatedAt` TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP",
]


def column_definition(field: FieldSpec) -> str:
    """Column clause for one field; constraint clauses are left out when they don't apply."""
    clauses = [
        f"`{field.name}`",
        map_relational_type(field.type),
        "NOT NULL" if field.required else None,
        "UNIQUE" if field.unique else None,
        f"DEFAULT '{field.default_value}'" if field.default_value else None,
    ]
    return " ".join(clause for clause in clauses if clause)


def generate_mysql_table(description: ModelDescription) -> str:
    """Render a CREATE TABLE statement for the description."""
    columns: List[str] = [column_definition(field) for field in description.fields]
    if description.use_timestamps:
        columns.extend(TIMESTAMP_COLUMNS)
    logger.debug(f"Generating CREATE TABLE for {description.table_name!r} with {len(columns)} columns")

    # No comma after the last column; an empty column list leaves "(\n);"
    body = ",\n".join(f"  {column}" for column in columns)
    if body:
        body += "\n"
    return f"CREATE TABLE `{description.table_name}` (\n{body});"
