"""Tests for the feature generation orchestrator."""
import posixpath
import re
from dataclasses import replace
from app.generators.feature_gen.generator import generate_all_code_files, generate_feature_files
from app.generators.feature_gen.types import EntityField, FeatureConfig

IMPORT_RE = re.compile(r"from '(\.{1,2}/[^']+)'")
API_IMPORT_RE = re.compile(r"import \{([^}]*)\} from './apis';")
API_EXPORT_RE = re.compile(r"^export const (\w+) = ", re.MULTILINE)


def test_artifact_order(product_config, product_fields, product_relations):
    files = generate_all_code_files(product_config, product_fields, product_relations)
    assert list(files) == [
        "product.d.ts",
        "apis.ts",
        "service.ts",
        "relations.ts",
        "forms/create.tsx",
        "forms/editor.tsx",
        "config/query.tsx",
        "config/table.tsx",
        "config/topbar.tsx",
        "pages/create.tsx",
        "pages/editor.tsx",
        "pages/viewer.tsx",
        "pages/list.tsx",
        "routes.tsx",
    ]


def test_generation_is_deterministic(product_config, product_fields, product_relations):
    first = generate_all_code_files(product_config, product_fields, product_relations)
    second = generate_all_code_files(product_config, list(product_fields), list(product_relations))
    assert first == second
    assert list(first) == list(second)


def test_hooks_only_import_exported_api_bindings(product_fields, product_relations):
    for config in (
        FeatureConfig(name="Product", plural_name="Products"),
        FeatureConfig(name="Product", plural_name="Products", has_custom_api=True, has_files=True),
    ):
        for relations in ([], product_relations):
            files = generate_all_code_files(config, product_fields, relations)
            exported = set(API_EXPORT_RE.findall(files["apis.ts"]))
            match = API_IMPORT_RE.search(files["service.ts"])
            assert match, "service.ts must import from ./apis"
            imported = [name.strip() for name in match.group(1).split(",") if name.strip()]
            assert imported
            missing = [name for name in imported if name not in exported]
            assert not missing, f"service.ts imports unknown api bindings: {missing}"


def test_relative_imports_resolve_to_artifacts(product_config, product_fields, product_relations):
    no_query_fields = [EntityField(id="price", name="price", type="number")]
    for fields, relations in (
        (product_fields, product_relations),
        (product_fields, []),
        (no_query_fields, []),
    ):
        files = generate_all_code_files(product_config, fields, relations)
        for path, content in files.items():
            base = posixpath.dirname(path)
            for target in IMPORT_RE.findall(content):
                resolved = posixpath.normpath(posixpath.join(base, target))
                candidates = [resolved + ext for ext in (".ts", ".tsx", ".d.ts")]
                assert any(c in files for c in candidates), f"{path} imports missing {target}"


def test_rename_reaches_every_artifact(product_config, product_fields, product_relations):
    config = replace(product_config, name="Invoice", display_name="Invoice", plural_name="Invoices")
    files = generate_all_code_files(config, product_fields, product_relations)

    assert "invoice.d.ts" in files
    assert "product.d.ts" not in files
    for path, content in files.items():
        assert "Product" not in content, path
        assert "product" not in content.lower(), path
    assert "createApi<Invoice>('/api/Invoices'" in files["apis.ts"]


def test_plural_and_prefix_fallbacks(product_fields):
    config = FeatureConfig(name="Order", api_prefix="")
    files = generate_all_code_files(config, product_fields, [])
    assert "createApi<Order>('/api/Orders')" in files["apis.ts"]
    assert "export const useListOrders" in files["service.ts"]


def test_relations_helper_omitted_without_relations(product_config, product_fields):
    files = generate_all_code_files(product_config, product_fields, [])
    assert "relations.ts" not in files
    assert all("../relations" not in content for content in files.values())


def test_query_artifact_omitted_without_searchable_fields(product_config):
    fields = [
        EntityField(id="price", name="price", type="number"),
        EntityField(id="active", name="active", type="switch"),
        EntityField(id="notes", name="notes", type="text", is_visible=False),
    ]
    files = generate_all_code_files(product_config, fields, [])

    assert "config/query.tsx" not in files
    assert "ProductListParams as QueryFormParams" in files["service.ts"]
    assert "ProductListParams as QueryFormParams" in files["pages/list.tsx"]
    assert all("config/query" not in content for content in files.values())


def test_product_end_to_end(product_config):
    fields = [
        EntityField(id="id", name="id", type="text", is_primary=True, required=True),
        EntityField(id="title", name="title", type="text", required=True,
                    show_in_form=True, show_in_table=True),
    ]
    files = generate_all_code_files(product_config, fields, [])

    for path in (
        "product.d.ts",
        "apis.ts",
        "service.ts",
        "config/table.tsx",
        "forms/create.tsx",
        "pages/list.tsx",
        "routes.tsx",
    ):
        assert path in files
    assert "relations.ts" not in files
    # id (primary) and title (text) are both searchable
    assert "config/query.tsx" in files
    assert "/api/Products" in files["apis.ts"]


def test_generate_feature_files_matches_mapping(product_config, product_fields, product_relations):
    mapping = generate_all_code_files(product_config, product_fields, product_relations)
    files = generate_feature_files(product_config, product_fields, product_relations)
    assert [(f.path, f.content) for f in files] == list(mapping.items())
