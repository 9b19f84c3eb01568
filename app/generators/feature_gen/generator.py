"""Orchestrator for feature code generation."""
import logging
from typing import Dict, List, Sequence
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.fields import searchable_fields
from app.generators.feature_gen.render_api import render_api_client
from app.generators.feature_gen.render_entity import render_entity_types
from app.generators.feature_gen.render_forms import render_form_fields
from app.generators.feature_gen.render_pages import render_pages
from app.generators.feature_gen.render_query import render_query_fields
from app.generators.feature_gen.render_relations import render_relations
from app.generators.feature_gen.render_routes import render_routes, render_topbar
from app.generators.feature_gen.render_service import render_service
from app.generators.feature_gen.render_table import render_table_columns
from app.generators.feature_gen.types import (
    EntityField,
    EntityRelation,
    FeatureConfig,
    GeneratedFile,
)

log = logging.getLogger(__name__)


def generate_all_code_files(
    config: FeatureConfig,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
) -> Dict[str, str]:
    """
    Generate every artifact of a feature module.

    Args:
        config: Feature configuration
        fields: Entity fields in display order
        relations: Entity relations in display order

    Returns:
        Mapping of relative path to file content, in generation order.
        ``relations.ts`` is present only when relations exist and
        ``config/query.tsx`` only when at least one field is queryable.
    """
    ctx = NamingContext.from_config(config)
    has_query_fields = bool(searchable_fields(fields))

    files: Dict[str, str] = {}

    # Core entity definition
    files[ctx.entity_file] = render_entity_types(ctx, fields, relations)

    # API integration and service layer
    files["apis.ts"] = render_api_client(ctx, config, relations)
    files["service.ts"] = render_service(ctx, config, relations, has_query_fields)

    if relations:
        files["relations.ts"] = render_relations(ctx, relations)

    # Form configurations
    for stem, content in render_form_fields(ctx, fields, relations).items():
        files[f"forms/{stem}.tsx"] = content

    # Config files
    if has_query_fields:
        files["config/query.tsx"] = render_query_fields(ctx, fields)
    files["config/table.tsx"] = render_table_columns(ctx, fields, relations)
    files["config/topbar.tsx"] = render_topbar()

    # Pages and routes
    for stem, content in render_pages(ctx, fields, relations, has_query_fields).items():
        files[f"pages/{stem}.tsx"] = content
    files["routes.tsx"] = render_routes(ctx)

    log.debug(
        "Generated %d files for feature %s (%d fields, %d relations)",
        len(files), config.name, len(fields), len(relations),
    )
    return files


def generate_feature_files(
    config: FeatureConfig,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
) -> List[GeneratedFile]:
    """Same as ``generate_all_code_files`` as an ordered list of GeneratedFile."""
    files = generate_all_code_files(config, fields, relations)
    return [GeneratedFile(path=path, content=content) for path, content in files.items()]
