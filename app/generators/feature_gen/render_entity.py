"""Entity type declaration rendering."""
from typing import List, Sequence
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.fields import list_filter_fields
from app.generators.feature_gen.type_map import get_typescript_type
from app.generators.feature_gen.types import EntityField, EntityRelation


# Always present on the list params interface
BASE_LIST_PARAMS = ("status", "search")


def render_entity_types(
    ctx: NamingContext,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
) -> str:
    """Generate {name}.d.ts with the entity, list params and pagination shapes."""
    lines: List[str] = [f"export interface {ctx.name} {{"]
    for field in fields:
        optional = "" if field.required else "?"
        lines.append(f"  {field.name}{optional}: {get_typescript_type(field.type)};")
    for relation in relations:
        optional = "" if relation.is_required else "?"
        target = f"{relation.target_entity}[]" if relation.is_collection else relation.target_entity
        lines.append(f"  {relation.name}{optional}: {target};")
    lines.append("}")
    lines.append("")

    lines.append(f"export interface {ctx.list_params} extends PaginationParams {{")
    lines.append("  status?: string | number;")
    lines.append("  search?: string;")
    for field in list_filter_fields(fields):
        if field.name in BASE_LIST_PARAMS:
            continue
        lines.append(f"  {field.name}?: {get_typescript_type(field.type)};")
    lines.append("}")
    lines.append("")

    lines.append("""export interface PaginationParams {
  page?: number;
  limit?: number;
  cursor?: string;
  direction?: 'forward' | 'backward';
  sort?: string;
  order?: 'asc' | 'desc';
}
""")
    return "\n".join(lines)
