"""Tests for the feature builder session."""
import itertools
import tempfile
from pathlib import Path
import pytest
from app.builder.constants import DEFAULT_ENTITY_FIELDS, DEFAULT_FEATURE_CONFIG
from app.builder.session import (
    BuilderError,
    FeatureBuilderSession,
    SessionRegistry,
    UnknownFieldError,
    UnknownRelationError,
    UnknownSessionError,
)


def _session():
    ticks = itertools.count(1000)
    return FeatureBuilderSession(session_id="s1", clock=lambda: next(ticks))


def test_new_session_starts_with_defaults():
    session = _session()
    assert session.feature_config == DEFAULT_FEATURE_CONFIG
    assert [f.name for f in session.entity_fields] == ["id", "name", "status", "created_at"]
    assert session.entity_relations == []
    assert session.active_field_id is None


def test_add_entity_field_defaults_and_activation():
    session = _session()
    field_id = session.add_entity_field()

    field = session.get_entity_field(field_id)
    assert field_id == "field_1000"
    assert field.name == "field_5"
    assert field.label == "Field 5"
    assert field.type == "text"
    assert field.show_in_form and field.show_in_table and field.is_visible
    assert session.active_field_id == field_id


def test_ids_are_unique_within_one_clock_tick():
    session = FeatureBuilderSession(clock=lambda: 42)
    assert session.add_entity_field() != session.add_entity_field()


def test_update_field_is_isolated():
    session = _session()
    before = list(session.entity_fields)

    session.update_entity_field("name", label="Title")

    after = session.entity_fields
    assert [f.id for f in after] == [f.id for f in before]
    assert after[1].label == "Title"
    assert after[1].name == before[1].name
    for old, new in zip(before, after):
        if old.id != "name":
            assert old == new
    # Previously handed out values are untouched
    assert before[1].label == "Name"


def test_reorder_entity_fields():
    session = _session()
    session.reorder_entity_fields(2, 0)
    assert [f.id for f in session.entity_fields] == ["status", "id", "name", "created_at"]

    with pytest.raises(BuilderError):
        session.reorder_entity_fields(0, 4)


def test_remove_active_field_selects_first_remaining():
    session = _session()
    field_id = session.add_entity_field()
    session.remove_entity_field(field_id)
    assert session.active_field_id == "id"

    with pytest.raises(UnknownFieldError):
        session.remove_entity_field(field_id)


def test_switching_to_choice_type_seeds_options():
    session = _session()
    field = session.update_entity_field("name", type="select")
    assert [o.value for o in field.options] == ["name_option_1", "name_option_2", "name_option_3"]

    field = session.update_entity_field("name", type="text")
    assert field.options == ()

    field = session.update_entity_field("status", type="radio")
    assert [o.value for o in field.options] == ["active", "inactive", "draft"]


def test_field_validation():
    session = _session()
    with pytest.raises(BuilderError):
        session.update_entity_field("name", type="color")
    with pytest.raises(BuilderError):
        session.update_entity_field("name", id="other")
    with pytest.raises(BuilderError):
        session.add_entity_field(colour="red")

    field = session.update_entity_field("name", name="first name")
    assert field.name == "first_name"


def test_relation_field_name_derived_once():
    session = _session()
    relation_id = session.add_entity_relation()
    assert session.get_entity_relation(relation_id).field_name == ""

    relation = session.update_entity_relation(relation_id, target_entity="Order", type="oneToMany")
    assert relation.field_name == "orders"

    session.update_entity_relation(relation_id, field_name="myOrders")
    relation = session.update_entity_relation(relation_id, target_entity="Customer")
    assert relation.field_name == "myOrders"


def test_relation_field_name_singular_for_one_to_one():
    session = _session()
    relation_id = session.add_entity_relation(name="owner", type="oneToOne", target_entity="User")
    assert session.get_entity_relation(relation_id).field_name == "user"


def test_relation_remove_and_reorder():
    session = _session()
    first = session.add_entity_relation(target_entity="Order")
    second = session.add_entity_relation(target_entity="Tag")
    session.set_active_relation(first)

    session.reorder_entity_relations(1, 0)
    assert [r.id for r in session.entity_relations] == [second, first]

    session.remove_entity_relation(first)
    assert session.active_relation_id == second

    with pytest.raises(UnknownRelationError):
        session.update_entity_relation(first, name="x")
    with pytest.raises(BuilderError):
        session.update_entity_relation(second, type="oneToFew")


def test_update_feature_config():
    session = _session()
    config = session.update_feature_config(name="Order Item", has_custom_api=True)
    assert config.name == "Order_Item"
    assert config.has_custom_api is True

    with pytest.raises(BuilderError):
        session.update_feature_config(name="  ")
    with pytest.raises(BuilderError):
        session.update_feature_config(colour="red")


def test_generate_and_download():
    session = _session()
    session.add_entity_relation(name="orders", target_entity="Order")

    files = session.generate_code()
    assert "product.d.ts" in files
    assert "relations.ts" in files

    with tempfile.TemporaryDirectory() as temp_dir:
        archive = session.download_feature_zip(temp_dir)
        assert archive == Path(temp_dir) / "product-feature.zip"
        assert archive.exists()


def test_reset_restores_defaults():
    session = _session()
    session.update_feature_config(name="Order")
    session.add_entity_field()
    session.add_entity_relation()

    session.reset()

    assert session.feature_config == DEFAULT_FEATURE_CONFIG
    assert tuple(session.entity_fields) == DEFAULT_ENTITY_FIELDS
    assert session.entity_relations == []
    assert session.active_field_id is None


def test_session_registry():
    registry = SessionRegistry()
    session = registry.create()
    assert registry.get(session.id) is session
    assert len(registry) == 1

    registry.delete(session.id)
    with pytest.raises(UnknownSessionError):
        registry.get(session.id)
    with pytest.raises(UnknownSessionError):
        registry.delete(session.id)
