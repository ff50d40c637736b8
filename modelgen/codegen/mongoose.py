"""
Mongoose schema and model generator.
"""
import logging

from ..schemas import FieldSpec, ModelDescription
from .javascript import (
    export_statement, field_block, import_statement, js_bool, js_default,
    js_string, object_literal, property_lines,
)
from .types import map_document_type

logger = logging.getLogger(__name__)


def _schema_path(field: FieldSpec) -> str:
    return field_block(field.name, [
        ("type", map_document_type(field.type)),
        ("required", js_bool(field.required)),
        ("unique", js_bool(field.unique)),
        ("default", js_default(field.default_value)),
    ])


def generate_mongoose_model(description: ModelDescription) -> str:
    """Render a Mongoose schema, the model built from it and its export."""
    model = description.model_name
    schema = f"{model}Schema"
    style = description.module_style
    logger.debug(f"Generating Mongoose model {model!r} with {len(description.fields)} fields")

    paths = object_literal([_schema_path(field) for field in description.fields])
    options = object_literal(property_lines([
        ("collection", js_string(description.table_name)),
        ("timestamps", js_bool(description.use_timestamps)),
    ]))

    sections = [
        import_statement("mongoose", "mongoose", style),
        "const { Schema } = mongoose;\nconst { Mixed } = Schema.Types;",
        f"const {schema} = new Schema({paths}, {options});",
        f"const {model} = mongoose.model('{model}', {schema});",
        export_statement(model, style),
    ]
    return "\n\n".join(sections)
