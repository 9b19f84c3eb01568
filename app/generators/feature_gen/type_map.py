"""Static lookup tables keyed by field type."""
from typing import Dict, List


TYPESCRIPT_TYPES: Dict[str, str] = {
    "text": "string",
    "textarea": "string",
    "email": "string",
    "password": "string",
    "number": "number",
    "date": "string",
    "date-range": "{ from: string; to: string }",
    "select": "string",
    "multi-select": "string[]",
    "checkbox": "string[]",
    "radio": "string",
    "switch": "boolean",
    "uploader": "string",
    "hidden": "string",
}

FIELD_ICONS: Dict[str, str] = {
    "text": "IconType",
    "textarea": "IconTextPlus",
    "email": "IconMail",
    "password": "IconLock",
    "number": "IconNumber",
    "date": "IconCalendar",
    "date-range": "IconCalendarDue",
    "select": "IconSelect",
    "multi-select": "IconList",
    "checkbox": "IconSquareCheck",
    "radio": "IconCircleCheck",
    "switch": "IconToggleRight",
    "uploader": "IconCloudUpload",
    "hidden": "IconEyeOff",
    "id": "IconHash",
    "status": "IconStatusChange",
}

# Presentation tables for the editing UI
FIELD_TYPES: List[Dict[str, str]] = [
    {"value": "text", "label": "Text Input", "icon": "IconType"},
    {"value": "number", "label": "Number Input", "icon": "IconNumber"},
    {"value": "email", "label": "Email Input", "icon": "IconMail"},
    {"value": "password", "label": "Password Input", "icon": "IconLock"},
    {"value": "textarea", "label": "Text Area", "icon": "IconTextPlus"},
    {"value": "select", "label": "Dropdown Select", "icon": "IconSelect"},
    {"value": "multi-select", "label": "Multi Select", "icon": "IconList"},
    {"value": "checkbox", "label": "Checkboxes", "icon": "IconSquareCheck"},
    {"value": "radio", "label": "Radio Buttons", "icon": "IconCircleCheck"},
    {"value": "switch", "label": "Switch Toggle", "icon": "IconToggleRight"},
    {"value": "date", "label": "Date Picker", "icon": "IconCalendar"},
    {"value": "date-range", "label": "Date Range Picker", "icon": "IconCalendarDue"},
    {"value": "uploader", "label": "File Uploader", "icon": "IconCloudUpload"},
    {"value": "hidden", "label": "Hidden Field", "icon": "IconEyeOff"},
]

RELATION_TYPES: List[Dict[str, str]] = [
    {
        "value": "oneToOne",
        "label": "One-to-One",
        "icon": "IconArrowRightBar",
        "description": "Each record in the first table is related to one record in the second table.",
    },
    {
        "value": "oneToMany",
        "label": "One-to-Many",
        "icon": "IconArrowsRight",
        "description": "Each record in the first table is related to multiple records in the second table.",
    },
    {
        "value": "manyToMany",
        "label": "Many-to-Many",
        "icon": "IconArrowsLeftRight",
        "description": "Multiple records in the first table are related to multiple records in the second table.",
    },
]

VIEW_MODES: List[Dict[str, str]] = [
    {"value": "table", "label": "Table", "icon": "IconTable"},
    {"value": "grid", "label": "Grid", "icon": "IconGridDots"},
    {"value": "kanban", "label": "Kanban", "icon": "IconLayoutKanban"},
    {"value": "calendar", "label": "Calendar", "icon": "IconCalendar"},
]


def get_typescript_type(field_type: str) -> str:
    """Map a field type to its TypeScript type, ``any`` when unknown."""
    return TYPESCRIPT_TYPES.get(field_type, "any")


def get_icon_for_type(field_type: str) -> str:
    """Map a field type to a display icon identifier."""
    return FIELD_ICONS.get(field_type, "IconForms")
