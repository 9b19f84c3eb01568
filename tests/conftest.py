"""Shared feature definitions for generator, packager and API tests."""
import pytest
from app.generators.feature_gen.types import EntityField, EntityRelation, FeatureConfig


@pytest.fixture
def product_config():
    return FeatureConfig(
        name="Product",
        display_name="Product",
        plural_name="Products",
        api_prefix="/api",
    )


@pytest.fixture
def product_fields():
    return [
        EntityField(id="id", name="id", label="ID", type="text", required=True,
                    is_primary=True, is_read_only=True, show_in_form=False),
        EntityField(id="name", name="name", label="Name", type="text", required=True),
        EntityField(id="status", name="status", label="Status", type="select", required=True,
                    default_value="active",
                    options=({"label": "Active", "value": "active"},
                             {"label": "Inactive", "value": "inactive"})),
        EntityField(id="price", name="price", label="Price", type="number", default_value=0),
        EntityField(id="description", name="description", label="Description",
                    type="textarea", show_in_table=False),
        EntityField(id="created_at", name="created_at", label="Created At", type="date",
                    required=True, is_read_only=True, show_in_form=False),
    ]


@pytest.fixture
def product_relations():
    return [
        EntityRelation(id="r1", name="category", type="oneToOne", target_entity="Category"),
        EntityRelation(id="r2", name="reviews", type="oneToMany", target_entity="Review"),
        EntityRelation(id="r3", name="tags", type="manyToMany", target_entity="Tag"),
        EntityRelation(id="r4", name="parentCategory", type="oneToOne", target_entity="Category"),
    ]


@pytest.fixture
def product_definition():
    """Product feature as a camelCase request payload."""
    return {
        "featureConfig": {"name": "Product", "displayName": "Product", "pluralName": "Products"},
        "entityFields": [
            {"name": "id", "label": "ID", "isPrimary": True, "isReadOnly": True, "showInForm": False},
            {"name": "name", "label": "Name", "required": True},
            {
                "name": "status",
                "label": "Status",
                "type": "select",
                "defaultValue": "active",
                "options": [{"label": "Active", "value": "active"}],
            },
        ],
        "entityRelations": [
            {"name": "reviews", "type": "oneToMany", "targetEntity": "Review"},
        ],
    }
