"""API client rendering (apis.ts)."""
from typing import List, Sequence
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.types import EntityRelation, FeatureConfig


def _custom_members(ctx: NamingContext, config: FeatureConfig) -> List[str]:
    members = [
        f"""    // Custom endpoints
    {ctx.search_fn}: async (query: string): Promise<{ctx.name}[]> => {{
      return request.get(`${{endpoint}}/search?q=${{encodeURIComponent(query)}}`);
    }}""",
        f"""    // Toggle the status of a single record
    {ctx.toggle_status_fn}: async (id: string): Promise<{ctx.name}> => {{
      return request.put(`${{endpoint}}/${{id}}/toggle-status`);
    }}""",
    ]
    if config.has_files:
        members.append(f"""    // File upload endpoint
    {ctx.upload_file_fn}: async (id: string, file: File): Promise<{{ url: string }}> => {{
      const formData = new FormData();
      formData.append('file', file);
      return request.post(`${{endpoint}}/${{id}}/upload`, formData);
    }}""")
    return members


def _relation_members(ctx: NamingContext, relation: EntityRelation) -> str:
    rb = ctx.relation(relation)
    target = relation.target_entity
    param = rb.target_param
    path = relation.name
    if relation.is_collection:
        return f"""    // Relationship endpoints for {relation.name}
    {rb.get_fn}: async (id: string): Promise<{target}[]> => {{
      return request.get(`${{endpoint}}/${{id}}/{path}`);
    }},

    {rb.attach_fn}: async (id: string, {param}: string): Promise<{ctx.name}> => {{
      return request.post(`${{endpoint}}/${{id}}/{path}`, {{ {param} }});
    }},

    {rb.remove_fn}: async (id: string, {param}: string): Promise<{ctx.name}> => {{
      return request.delete(`${{endpoint}}/${{id}}/{path}/${{{param}}}`);
    }}"""
    return f"""    // Relationship endpoints for {relation.name}
    {rb.get_fn}: async (id: string): Promise<{target}> => {{
      return request.get(`${{endpoint}}/${{id}}/{path}`);
    }},

    {rb.attach_fn}: async (id: string, {param}: string): Promise<{ctx.name}> => {{
      return request.put(`${{endpoint}}/${{id}}/{path}`, {{ {param} }});
    }},

    {rb.remove_fn}: async (id: string): Promise<{ctx.name}> => {{
      return request.delete(`${{endpoint}}/${{id}}/{path}`);
    }}"""


def render_api_client(
    ctx: NamingContext,
    config: FeatureConfig,
    relations: Sequence[EntityRelation],
) -> str:
    """
    Generate apis.ts bound to {apiPrefix}/{plural}.

    Search, status toggle and file upload endpoints depend on
    ``has_custom_api``. Relation endpoints are always emitted, because the
    relation hooks in service.ts import them unconditionally.
    """
    members: List[str] = []
    if config.has_custom_api:
        members.extend(_custom_members(ctx, config))
    for relation in relations:
        members.append(_relation_members(ctx, relation))

    lines = [
        f"import {{ {ctx.name} }} from './{ctx.entity_module}';",
        "import { createApi } from '@/lib/api/factory';",
        "",
    ]
    if members:
        lines.append(f"export const {ctx.api_var} = createApi<{ctx.name}>('{ctx.endpoint}', {{")
        lines.append("  extensions: ({ endpoint, request }) => ({")
        lines.append(",\n\n".join(members))
        lines.append("  })")
        lines.append("});")
    else:
        lines.append(f"export const {ctx.api_var} = createApi<{ctx.name}>('{ctx.endpoint}');")
    lines.append("")

    for export_name, member in ctx.api_bindings(config, relations):
        lines.append(f"export const {export_name} = {ctx.api_var}.{member};")

    return "\n".join(lines) + "\n"
