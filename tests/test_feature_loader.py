"""Tests for reading feature definition files."""
import json
from pathlib import Path
import pytest
from pydantic import ValidationError
from app.builder.loader import load_feature_definition

SAMPLE = Path(__file__).resolve().parent.parent / "scripts" / "product.yaml"


def test_load_sample_yaml():
    definition = load_feature_definition(SAMPLE)
    config, fields, relations = definition.to_model()

    assert config.name == "Product"
    assert config.has_custom_api is True
    assert [f.name for f in fields] == ["id", "name", "status", "created_at"]
    assert [o.value for o in fields[2].options] == ["active", "inactive"]
    assert [(r.name, r.type) for r in relations] == [("category", "oneToOne"), ("reviews", "oneToMany")]


def test_load_json_with_snake_case_keys(tmp_path):
    path = tmp_path / "order.json"
    path.write_text(json.dumps({
        "feature_config": {"name": "Order", "plural_name": "Orders"},
        "entity_fields": [{"name": "total", "type": "number"}],
    }), encoding="utf-8")

    config, fields, relations = load_feature_definition(path).to_model()
    assert config.plural_name == "Orders"
    assert fields[0].id == "total"
    assert relations == []


def test_non_mapping_document_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_feature_definition(path)


def test_invalid_definition_raises_validation_error(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("featureConfig:\n  name: ''\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_feature_definition(path)
