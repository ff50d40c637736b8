"""
Pydantic models describing the data model a user wants code generated for.
"""
from enum import Enum
from typing import Any, Dict, List, Optional
import logging

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from ..exceptions import FieldAttributeError

logger = logging.getLogger(__name__)


class AbstractType(str, Enum):
    """Source-agnostic field types offered to the user."""
    STRING = "string"
    TEXT = "text"
    NUMBER = "number"
    BIGINT = "bigint"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    JSON = "json"
    ARRAY = "array"
    OBJECT = "object"
    BUFFER = "buffer"
    MAP = "map"


class ModuleStyle(str, Enum):
    """JavaScript module syntax used by the generated ORM code."""
    ES_MODULE = "esm"
    COMMON_JS = "commonjs"


class FieldSpec(BaseModel):
    """A single model field.

    ``type`` is kept as a plain string: a freshly added field has no type yet
    and the type mappers fall back to a default for anything they don't know.
    An empty ``default_value`` means "no default".
    """
    name: str = ""
    type: str = ""
    required: bool = False
    unique: bool = False
    default_value: str = ""

    @field_validator("type", mode="before")
    def enum_to_value(cls, v):
        if isinstance(v, Enum):
            return v.value
        return v

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        validate_assignment = True


def _attribute_names() -> Dict[str, str]:
    """Map accepted attribute spellings (snake_case and camelCase) to field names."""
    names = {}
    for field_name in FieldSpec.model_fields:
        names[field_name] = field_name
        names[to_camel(field_name)] = field_name
    return names


class ModelDescription(BaseModel):
    """Everything needed to render the generated artifacts.

    Field order is significant: every artifact emits fields in the order they
    appear in ``fields``.
    """
    model_name: str = ""
    table_name: str = ""
    use_timestamps: bool = True
    module_style: ModuleStyle = ModuleStyle.ES_MODULE
    fields: List[FieldSpec] = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        validate_assignment = True
        protected_namespaces = ()

    def add_field(self, field: Optional[FieldSpec] = None) -> "ModelDescription":
        """Append a field (a blank one by default)."""
        self.fields.append(field if field is not None else FieldSpec())
        return self

    def remove_field(self, index: int) -> "ModelDescription":
        """Remove the field at ``index``. Out-of-range indexes are ignored."""
        if not self._in_range(index):
            logger.debug(f"remove_field ignored: index {index} out of range ({len(self.fields)} fields)")
            return self
        del self.fields[index]
        return self

    def set_field_attribute(self, index: int, attribute_name: str, value: Any) -> "ModelDescription":
        """
        Set one attribute of the field at ``index``.

        Args:
            index: Position of the field in ``fields``
            attribute_name: Field attribute, snake_case or camelCase (``defaultValue``)
            value: New value, validated by pydantic

        Raises:
            FieldAttributeError: If ``attribute_name`` is not a FieldSpec attribute
        """
        attribute = _attribute_names().get(attribute_name)
        if attribute is None:
            raise FieldAttributeError(
                f"Unknown field attribute: {attribute_name!r}",
                context={"index": index, "attribute": attribute_name},
            )
        if not self._in_range(index):
            logger.debug(f"set_field_attribute ignored: index {index} out of range ({len(self.fields)} fields)")
            return self
        setattr(self.fields[index], attribute, value)
        return self

    def untyped_fields(self) -> List[int]:
        """Indexes of fields that have no type selected."""
        return [i for i, field in enumerate(self.fields) if not field.type.strip()]

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.fields)
