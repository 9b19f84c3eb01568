from typing import Any, ClassVar, Dict, FrozenSet, List, Optional
from pydantic import Field, model_validator
from app.builder.session import FeatureBuilderSession
from app.schemas.features import (
    CamelModel,
    EntityFieldSchema,
    EntityRelationSchema,
    FeatureConfigSchema,
    FieldOptionSchema,
    FieldType,
    RelationType,
    ViewMode,
)


class PartialUpdate(CamelModel):
    """
    Partial update where omitted attributes are left alone.

    An explicit null is only accepted for the attributes listed in
    ``nullable``; every other attribute must carry a value when sent.
    """
    nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        nulls = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable
        )
        if nulls:
            raise ValueError(f"Attributes may not be null: {', '.join(nulls)}")
        return self


class FeatureConfigUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1)
    display_name: Optional[str] = None
    plural_name: Optional[str] = None
    description: Optional[str] = None
    api_prefix: Optional[str] = None
    has_custom_api: Optional[bool] = None
    has_files: Optional[bool] = None
    has_pagination: Optional[bool] = None
    has_search: Optional[bool] = None
    has_filters: Optional[bool] = None
    view_modes: Optional[List[ViewMode]] = None
    default_view_mode: Optional[ViewMode] = None


class EntityFieldUpdate(PartialUpdate):
    nullable: ClassVar[FrozenSet[str]] = frozenset({"validation", "default_value"})

    name: Optional[str] = Field(None, min_length=1)
    label: Optional[str] = None
    type: Optional[FieldType] = None
    required: Optional[bool] = None
    is_primary: Optional[bool] = None
    is_read_only: Optional[bool] = None
    is_visible: Optional[bool] = None
    show_in_table: Optional[bool] = None
    show_in_form: Optional[bool] = None
    validation: Optional[Dict[str, Any]] = None
    default_value: Any = None
    options: Optional[List[FieldOptionSchema]] = None


class EntityRelationUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1)
    type: Optional[RelationType] = None
    target_entity: Optional[str] = None
    field_name: Optional[str] = None
    is_required: Optional[bool] = None
    cascade_delete: Optional[bool] = None


class ReorderRequest(CamelModel):
    start_index: int = Field(..., ge=0)
    end_index: int = Field(..., ge=0)


class SessionResponse(CamelModel):
    id: str
    feature_config: FeatureConfigSchema
    entity_fields: List[EntityFieldSchema]
    entity_relations: List[EntityRelationSchema]
    active_field_id: Optional[str] = None
    active_relation_id: Optional[str] = None

    @classmethod
    def from_session(cls, session: FeatureBuilderSession) -> "SessionResponse":
        return cls(
            id=session.id,
            feature_config=FeatureConfigSchema.from_model(session.feature_config),
            entity_fields=[EntityFieldSchema.from_model(f) for f in session.entity_fields],
            entity_relations=[EntityRelationSchema.from_model(r) for r in session.entity_relations],
            active_field_id=session.active_field_id,
            active_relation_id=session.active_relation_id,
        )
