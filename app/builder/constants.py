"""Starting state of a new builder session."""
from app.generators.feature_gen.types import EntityField, FeatureConfig, FieldOption


DEFAULT_FEATURE_CONFIG = FeatureConfig(
    name="Product",
    display_name="Product",
    plural_name="Products",
    description="Manage products in the system",
    api_prefix="/api",
)

DEFAULT_ENTITY_FIELDS = (
    EntityField(
        id="id",
        name="id",
        label="ID",
        type="text",
        required=True,
        is_primary=True,
        is_read_only=True,
        show_in_form=False,
    ),
    EntityField(
        id="name",
        name="name",
        label="Name",
        type="text",
        required=True,
        validation={"minLength": 2, "maxLength": 50},
    ),
    EntityField(
        id="status",
        name="status",
        label="Status",
        type="select",
        required=True,
        default_value="active",
        options=(
            FieldOption(label="Active", value="active"),
            FieldOption(label="Inactive", value="inactive"),
            FieldOption(label="Draft", value="draft"),
        ),
    ),
    EntityField(
        id="created_at",
        name="created_at",
        label="Created At",
        type="date",
        required=True,
        is_read_only=True,
        show_in_form=False,
    ),
)

VALIDATION_TYPES = (
    "required",
    "minLength",
    "maxLength",
    "min",
    "max",
    "pattern",
    "email",
    "url",
    "custom",
)
