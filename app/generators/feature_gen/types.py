"""Dataclasses for feature code generation."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


FIELD_TYPE_NAMES = (
    "text",
    "number",
    "email",
    "password",
    "textarea",
    "select",
    "multi-select",
    "checkbox",
    "radio",
    "switch",
    "date",
    "date-range",
    "uploader",
    "hidden",
)

# Field types that carry an options list
CHOICE_FIELD_TYPES = frozenset({"select", "multi-select", "checkbox", "radio"})

RELATION_TYPE_NAMES = ("oneToOne", "oneToMany", "manyToMany")

# Relation types whose property holds a collection of targets
COLLECTION_RELATION_TYPES = frozenset({"oneToMany", "manyToMany"})


@dataclass(frozen=True)
class FeatureConfig:
    """The entity/module being scaffolded."""
    name: str
    display_name: str = ""
    plural_name: str = ""  # falls back to name + "s"
    description: str = ""
    api_prefix: str = "/api"
    has_custom_api: bool = False
    has_files: bool = False
    has_pagination: bool = True
    has_search: bool = True
    has_filters: bool = True
    view_modes: Tuple[str, ...] = ("table", "grid", "kanban")
    default_view_mode: str = "table"


@dataclass(frozen=True)
class FieldOption:
    label: str
    value: str


@dataclass(frozen=True)
class EntityField:
    """One form/table/storage field of the entity."""
    id: str
    name: str
    label: str = ""
    type: str = "text"
    required: bool = False
    is_primary: bool = False
    is_read_only: bool = False
    is_visible: bool = True
    show_in_table: bool = True
    show_in_form: bool = True
    validation: Optional[Dict[str, Any]] = None
    default_value: Any = ""
    options: Tuple[FieldOption, ...] = field(default_factory=tuple)

    def __post_init__(self):
        options = tuple(
            opt if isinstance(opt, FieldOption) else FieldOption(label=str(opt["label"]), value=str(opt["value"]))
            for opt in self.options
        )
        if self.type not in CHOICE_FIELD_TYPES:
            options = ()
        object.__setattr__(self, "options", options)

    @property
    def is_choice(self) -> bool:
        return self.type in CHOICE_FIELD_TYPES


@dataclass(frozen=True)
class EntityRelation:
    """A declared relationship to another named entity."""
    id: str
    name: str
    type: str = "oneToMany"  # "oneToOne", "oneToMany" or "manyToMany"
    target_entity: str = ""
    field_name: str = ""
    is_required: bool = False
    cascade_delete: bool = False

    @property
    def is_collection(self) -> bool:
        return self.type in COLLECTION_RELATION_TYPES


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path inside the feature folder
    content: str  # File contents
