from typing import Any, Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from app.core.config import settings
from app.generators.feature_gen.types import (
    EntityField,
    EntityRelation,
    FeatureConfig,
    FieldOption,
)

FieldType = Literal[
    "text", "number", "email", "password", "textarea", "select", "multi-select",
    "checkbox", "radio", "switch", "date", "date-range", "uploader", "hidden",
]
RelationType = Literal["oneToOne", "oneToMany", "manyToMany"]
ViewMode = Literal["table", "grid", "kanban", "calendar"]

# JavaScript identifier; generated code uses these names verbatim
IDENTIFIER_PATTERN = r"^[a-zA-Z_$][a-zA-Z0-9_$]*$"
OPTIONAL_IDENTIFIER_PATTERN = r"^([a-zA-Z_$][a-zA-Z0-9_$]*)?$"


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys, also accepts snake_case on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldOptionSchema(CamelModel):
    label: str
    value: str


class FeatureConfigSchema(CamelModel):
    name: str = Field(..., min_length=1, pattern=IDENTIFIER_PATTERN, examples=["Product"])
    display_name: str = ""
    plural_name: str = ""
    description: str = ""
    api_prefix: str = Field(default_factory=lambda: settings.default_api_prefix)
    has_custom_api: bool = False
    has_files: bool = False
    has_pagination: bool = True
    has_search: bool = True
    has_filters: bool = True
    view_modes: List[ViewMode] = ["table", "grid", "kanban"]
    default_view_mode: ViewMode = "table"

    def to_model(self) -> FeatureConfig:
        data = self.model_dump()
        data["view_modes"] = tuple(data["view_modes"])
        return FeatureConfig(**data)

    @classmethod
    def from_model(cls, config: FeatureConfig) -> "FeatureConfigSchema":
        return cls.model_validate({**config.__dict__, "view_modes": list(config.view_modes)})


class EntityFieldSchema(CamelModel):
    id: str = ""
    name: str = Field(..., min_length=1, pattern=IDENTIFIER_PATTERN)
    label: str = ""
    type: FieldType = "text"
    required: bool = False
    is_primary: bool = False
    is_read_only: bool = False
    is_visible: bool = True
    show_in_table: bool = True
    show_in_form: bool = True
    validation: Optional[Dict[str, Any]] = None
    default_value: Any = ""
    options: List[FieldOptionSchema] = []

    def to_model(self) -> EntityField:
        data = self.model_dump()
        data["id"] = data["id"] or data["name"]
        data["options"] = tuple(FieldOption(**opt) for opt in data["options"])
        return EntityField(**data)

    @classmethod
    def from_model(cls, field: EntityField) -> "EntityFieldSchema":
        data = dict(field.__dict__)
        data["options"] = [opt.__dict__ for opt in field.options]
        return cls.model_validate(data)


class EntityRelationSchema(CamelModel):
    id: str = ""
    name: str = Field(..., min_length=1, pattern=IDENTIFIER_PATTERN)
    type: RelationType = "oneToMany"
    target_entity: str = Field("", pattern=OPTIONAL_IDENTIFIER_PATTERN)
    field_name: str = ""
    is_required: bool = False
    cascade_delete: bool = False

    def to_model(self) -> EntityRelation:
        data = self.model_dump()
        data["id"] = data["id"] or data["name"]
        return EntityRelation(**data)

    @classmethod
    def from_model(cls, relation: EntityRelation) -> "EntityRelationSchema":
        return cls.model_validate(relation.__dict__)


class FeatureDefinition(CamelModel):
    """A complete feature description: configuration, fields and relations."""
    feature_config: FeatureConfigSchema
    entity_fields: List[EntityFieldSchema] = []
    entity_relations: List[EntityRelationSchema] = []

    def to_model(self) -> Tuple[FeatureConfig, List[EntityField], List[EntityRelation]]:
        return (
            self.feature_config.to_model(),
            [f.to_model() for f in self.entity_fields],
            [r.to_model() for r in self.entity_relations],
        )


class GeneratedFileSchema(CamelModel):
    path: str
    content: str


class GenerateResponse(CamelModel):
    feature: str
    files: List[GeneratedFileSchema]


class FieldTypeInfo(CamelModel):
    value: str
    label: str
    icon: str
    description: Optional[str] = None
