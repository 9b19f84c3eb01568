"""
Mutable builder state for one feature being designed.

A ``FeatureBuilderSession`` owns the feature configuration, the ordered field
and relation lists and the active selections. Model objects are immutable;
every mutation replaces the affected object, so values handed out earlier
(for example to a running generation) never change underneath the caller.
"""
from __future__ import annotations
import logging
import threading
import time
import uuid
from dataclasses import fields as dataclass_fields
from dataclasses import replace
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union
from app.builder.constants import DEFAULT_ENTITY_FIELDS, DEFAULT_FEATURE_CONFIG
from app.generators.feature_gen.generator import generate_all_code_files
from app.generators.feature_gen.naming import (
    create_default_options,
    pluralize,
    sanitize_variable_name,
)
from app.generators.feature_gen.packager import download_feature_files
from app.generators.feature_gen.types import (
    FIELD_TYPE_NAMES,
    RELATION_TYPE_NAMES,
    EntityField,
    EntityRelation,
    FeatureConfig,
)

log = logging.getLogger(__name__)


class BuilderError(ValueError):
    """Raised for an invalid mutation of the builder state."""


class UnknownFieldError(KeyError):
    pass


class UnknownRelationError(KeyError):
    pass


class UnknownSessionError(KeyError):
    pass


def derive_relation_field_name(relation: EntityRelation) -> str:
    """Storage field name for a relation: plural for collections, singular otherwise."""
    target = relation.target_entity.lower()
    return pluralize(target) if relation.is_collection else target


def _with_field_name(relation: EntityRelation) -> EntityRelation:
    # Only fills an empty field name; a populated one is never overwritten
    if relation.target_entity and not relation.field_name:
        return replace(relation, field_name=derive_relation_field_name(relation))
    return relation


def _check_keys(model: type, updates: Dict, protected: tuple = ()) -> None:
    allowed = {f.name for f in dataclass_fields(model)} - set(protected)
    unknown = sorted(set(updates) - allowed)
    if unknown:
        raise BuilderError(f"Unknown or read-only attributes for {model.__name__}: {', '.join(unknown)}")


def _millis() -> int:
    return int(time.time() * 1000)


class FeatureBuilderSession:
    def __init__(self, session_id: Optional[str] = None, clock: Callable[[], int] = _millis):
        self.id = session_id or uuid.uuid4().hex
        self._clock = clock
        self._last_stamp = 0
        self._lock = threading.RLock()
        self.feature_config: FeatureConfig = DEFAULT_FEATURE_CONFIG
        self.entity_fields: List[EntityField] = list(DEFAULT_ENTITY_FIELDS)
        self.entity_relations: List[EntityRelation] = []
        self.active_field_id: Optional[str] = None
        self.active_relation_id: Optional[str] = None

    def _new_id(self, prefix: str) -> str:
        # Clock based like the editor ids; bumped so two calls in the same tick differ
        stamp = max(self._clock(), self._last_stamp + 1)
        self._last_stamp = stamp
        return f"{prefix}_{stamp}"

    # Feature configuration

    def update_feature_config(self, **updates) -> FeatureConfig:
        _check_keys(FeatureConfig, updates)
        if "name" in updates:
            name = (updates["name"] or "").strip()
            if not name:
                raise BuilderError("Feature name must not be empty")
            updates["name"] = sanitize_variable_name(name)
        if "view_modes" in updates:
            updates["view_modes"] = tuple(updates["view_modes"])
        with self._lock:
            self.feature_config = replace(self.feature_config, **updates)
            return self.feature_config

    # Entity fields

    def _field_index(self, field_id: str) -> int:
        for index, field in enumerate(self.entity_fields):
            if field.id == field_id:
                return index
        raise UnknownFieldError(field_id)

    def get_entity_field(self, field_id: str) -> EntityField:
        return self.entity_fields[self._field_index(field_id)]

    @staticmethod
    def _normalize_field_updates(updates: Dict) -> Dict:
        _check_keys(EntityField, updates, protected=("id",))
        if "type" in updates and updates["type"] not in FIELD_TYPE_NAMES:
            raise BuilderError(f"Unknown field type: {updates['type']}")
        if "name" in updates:
            updates["name"] = sanitize_variable_name(updates["name"] or "")
        if "options" in updates:
            updates["options"] = tuple(updates["options"] or ())
        return updates

    def add_entity_field(self, **overrides) -> str:
        """Append a new field (text by default) and make it the active one."""
        updates = self._normalize_field_updates(overrides)
        with self._lock:
            count = len(self.entity_fields) + 1
            new_id = self._new_id("field")
            field = replace(
                EntityField(id=new_id, name=f"field_{count}", label=f"Field {count}"),
                **updates,
            )
            if field.is_choice and not field.options and "options" not in updates:
                field = replace(field, options=tuple(create_default_options(field.name)))
            self.entity_fields.append(field)
            self.active_field_id = new_id
            return new_id

    def update_entity_field(self, field_id: str, **updates) -> EntityField:
        """
        Replace the field with ``updates`` applied.

        Switching to a choice type without supplying options seeds three
        default options; switching away from one drops them.
        """
        updates = self._normalize_field_updates(updates)
        with self._lock:
            index = self._field_index(field_id)
            current = self.entity_fields[index]
            field = replace(current, **updates)
            if field.is_choice and not field.options and "options" not in updates:
                field = replace(field, options=tuple(create_default_options(field.name)))
            self.entity_fields[index] = field
            return field

    def remove_entity_field(self, field_id: str) -> None:
        with self._lock:
            del self.entity_fields[self._field_index(field_id)]
            if self.active_field_id == field_id:
                self.active_field_id = self.entity_fields[0].id if self.entity_fields else None

    def reorder_entity_fields(self, start_index: int, end_index: int) -> None:
        """Move the field at ``start_index`` so it ends up at ``end_index``."""
        with self._lock:
            _check_indexes(start_index, end_index, len(self.entity_fields))
            field = self.entity_fields.pop(start_index)
            self.entity_fields.insert(end_index, field)

    def set_active_field(self, field_id: Optional[str]) -> None:
        if field_id is not None:
            self._field_index(field_id)
        self.active_field_id = field_id

    # Entity relations

    def _relation_index(self, relation_id: str) -> int:
        for index, relation in enumerate(self.entity_relations):
            if relation.id == relation_id:
                return index
        raise UnknownRelationError(relation_id)

    def get_entity_relation(self, relation_id: str) -> EntityRelation:
        return self.entity_relations[self._relation_index(relation_id)]

    @staticmethod
    def _normalize_relation_updates(updates: Dict) -> Dict:
        _check_keys(EntityRelation, updates, protected=("id",))
        if "type" in updates and updates["type"] not in RELATION_TYPE_NAMES:
            raise BuilderError(f"Unknown relation type: {updates['type']}")
        if "name" in updates:
            updates["name"] = sanitize_variable_name(updates["name"] or "")
        if updates.get("target_entity"):
            updates["target_entity"] = sanitize_variable_name(updates["target_entity"].strip())
        return updates

    def add_entity_relation(self, **overrides) -> str:
        updates = self._normalize_relation_updates(overrides)
        with self._lock:
            count = len(self.entity_relations) + 1
            new_id = self._new_id("relation")
            relation = replace(EntityRelation(id=new_id, name=f"relation_{count}"), **updates)
            self.entity_relations.append(_with_field_name(relation))
            return new_id

    def update_entity_relation(self, relation_id: str, **updates) -> EntityRelation:
        """Replace the relation; an empty field name is derived from the target."""
        updates = self._normalize_relation_updates(updates)
        with self._lock:
            index = self._relation_index(relation_id)
            relation = _with_field_name(replace(self.entity_relations[index], **updates))
            self.entity_relations[index] = relation
            return relation

    def remove_entity_relation(self, relation_id: str) -> None:
        with self._lock:
            del self.entity_relations[self._relation_index(relation_id)]
            if self.active_relation_id == relation_id:
                self.active_relation_id = (
                    self.entity_relations[0].id if self.entity_relations else None
                )

    def reorder_entity_relations(self, start_index: int, end_index: int) -> None:
        with self._lock:
            _check_indexes(start_index, end_index, len(self.entity_relations))
            relation = self.entity_relations.pop(start_index)
            self.entity_relations.insert(end_index, relation)

    def set_active_relation(self, relation_id: Optional[str]) -> None:
        if relation_id is not None:
            self._relation_index(relation_id)
        self.active_relation_id = relation_id

    # Output

    def generate_code(self) -> Dict[str, str]:
        with self._lock:
            config = self.feature_config
            fields = list(self.entity_fields)
            relations = list(self.entity_relations)
        return generate_all_code_files(config, fields, relations)

    def download_feature_zip(self, out_dir: Union[str, Path]) -> Path:
        with self._lock:
            config = self.feature_config
            fields = list(self.entity_fields)
            relations = list(self.entity_relations)
        return download_feature_files(config, fields, relations, out_dir)

    def reset(self) -> None:
        """Restore the default Product configuration and fields, drop relations."""
        with self._lock:
            self.feature_config = DEFAULT_FEATURE_CONFIG
            self.entity_fields = list(DEFAULT_ENTITY_FIELDS)
            self.entity_relations = []
            self.active_field_id = None
            self.active_relation_id = None


def _check_indexes(start_index: int, end_index: int, size: int) -> None:
    for index in (start_index, end_index):
        if not 0 <= index < size:
            raise BuilderError(f"Index {index} out of range for {size} items")


class SessionRegistry:
    """In-process store of builder sessions keyed by id."""

    def __init__(self):
        self._sessions: Dict[str, FeatureBuilderSession] = {}
        self._lock = threading.Lock()

    def create(self) -> FeatureBuilderSession:
        session = FeatureBuilderSession()
        with self._lock:
            self._sessions[session.id] = session
        log.info("Created builder session %s", session.id)
        return session

    def get(self, session_id: str) -> FeatureBuilderSession:
        with self._lock:
            try:
                return self._sessions[session_id]
            except KeyError:
                raise UnknownSessionError(session_id) from None

    def delete(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise UnknownSessionError(session_id)
        log.info("Deleted builder session %s", session_id)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


sessions = SessionRegistry()
