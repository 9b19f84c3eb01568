"""Field and relation selections shared by the renderers."""
from typing import List, Sequence
from app.generators.feature_gen.types import EntityField, EntityRelation


QUERYABLE_FIELD_TYPES = {"text", "select", "date"}
FULL_WIDTH_FIELD_TYPES = {"textarea", "uploader"}


def create_form_fields(fields: Sequence[EntityField]) -> List[EntityField]:
    return [f for f in fields if f.show_in_form and not f.is_read_only]


def edit_form_fields(fields: Sequence[EntityField]) -> List[EntityField]:
    return [f for f in fields if f.show_in_form]


def table_fields(fields: Sequence[EntityField]) -> List[EntityField]:
    return [f for f in fields if f.show_in_table]


def visible_fields(fields: Sequence[EntityField]) -> List[EntityField]:
    return [f for f in fields if f.is_visible]


def searchable_fields(fields: Sequence[EntityField]) -> List[EntityField]:
    """Fields offered in the search/filter bar."""
    return [
        f for f in fields
        if f.is_visible and (f.type in QUERYABLE_FIELD_TYPES or f.is_primary)
    ]


def list_filter_fields(fields: Sequence[EntityField]) -> List[EntityField]:
    """Fields added as optional filters to the list params interface."""
    return [f for f in fields if f.type == "select" or f.is_primary]


def form_relations(relations: Sequence[EntityRelation]) -> List[EntityRelation]:
    """Relations rendered as async selects; many-to-many is left to custom UI."""
    return [r for r in relations if r.type != "manyToMany"]


def reference_relations(relations: Sequence[EntityRelation]) -> List[EntityRelation]:
    return [r for r in relations if r.type == "oneToOne"]


def distinct_targets(relations: Sequence[EntityRelation]) -> List[str]:
    """Target entity names in first-seen order."""
    targets: List[str] = []
    for relation in relations:
        if relation.target_entity not in targets:
            targets.append(relation.target_entity)
    return targets
