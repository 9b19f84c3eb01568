"""Data-access hooks rendering (service.ts)."""
from typing import List, Sequence
from app.generators.feature_gen.context import NamingContext, RelationBindings
from app.generators.feature_gen.types import EntityRelation, FeatureConfig


def _api_imports(
    ctx: NamingContext, config: FeatureConfig, relations: Sequence[EntityRelation]
) -> List[str]:
    # Custom endpoints have no hooks
    custom = {ctx.search_fn, ctx.toggle_status_fn, ctx.upload_file_fn}
    return [name for name, _ in ctx.api_bindings(config, relations) if name not in custom]


def _invalidate_parent_and_relation(ctx: NamingContext, rb: RelationBindings) -> str:
    return f"""    onSuccess: (data) => {{
      queryClient.invalidateQueries({{ queryKey: {ctx.keys_var}.get({{ id: data.id }}) }});
      queryClient.invalidateQueries({{ queryKey: {ctx.keys_var}.{rb.cache_key}(data.id) }});
    }}"""


def _relation_hooks(ctx: NamingContext, relation: EntityRelation) -> str:
    rb = ctx.relation(relation)
    param = rb.target_param
    get_hook = f"""// Hooks for {relation.name} relationship
export const {rb.get_hook} = (id: string) => {{
  return useQuery({{
    queryKey: {ctx.keys_var}.{rb.cache_key}(id),
    queryFn: () => {rb.get_fn}(id),
    enabled: !!id
  }});
}};"""

    attach_hook = f"""export const {rb.attach_hook} = () => {{
  const queryClient = useQueryClient();

  return useMutation({{
    mutationFn: ({{ id, {param} }}: {{ id: string; {param}: string }}) =>
      {rb.attach_fn}(id, {param}),
{_invalidate_parent_and_relation(ctx, rb)}
  }});
}};"""

    if relation.is_collection:
        remove_fn = f"""    mutationFn: ({{ id, {param} }}: {{ id: string; {param}: string }}) =>
      {rb.remove_fn}(id, {param}),"""
    else:
        remove_fn = f"    mutationFn: (id: string) => {rb.remove_fn}(id),"

    remove_hook = f"""export const {rb.remove_hook} = () => {{
  const queryClient = useQueryClient();

  return useMutation({{
{remove_fn}
{_invalidate_parent_and_relation(ctx, rb)}
  }});
}};"""
    return "\n\n".join([get_hook, attach_hook, remove_hook])


def render_service(
    ctx: NamingContext,
    config: FeatureConfig,
    relations: Sequence[EntityRelation],
    has_query_fields: bool,
) -> str:
    """Generate service.ts with query keys and react-query hooks."""
    lines = [
        "import { useMutation, useQuery, useQueryClient } from '@tanstack/react-query';",
        "",
    ]
    if has_query_fields:
        lines.append(f"import {{ {ctx.name} }} from './{ctx.entity_module}';")
        lines.append("import { QueryFormParams } from './config/query';")
    else:
        lines.append(
            f"import {{ {ctx.name}, {ctx.list_params} as QueryFormParams }} from './{ctx.entity_module}';"
        )
    lines.append("import {")
    lines.append(",\n".join(f"  {name}" for name in _api_imports(ctx, config, relations)))
    lines.append("} from './apis';")
    lines.append("")

    # Query keys
    lines.append(f"interface {ctx.keys_interface} {{")
    lines.append("  create: [string, string];")
    lines.append("  get: (_options?: { id?: string }) => [string, string, { id?: string }];")
    lines.append("  update: [string, string];")
    lines.append("  list: (_options?: QueryFormParams) => [string, string, QueryFormParams];")
    for relation in relations:
        lines.append(f"  {relation.name}: (id: string) => [string, string, string];")
    lines.append("}")
    lines.append("")

    scope = ctx.cache_scope
    key_entries = [
        f"  create: ['{scope}', 'create']",
        f"  get: ({{ id }} = {{}}) => ['{scope}', '{ctx.lower}', {{ id }}]",
        f"  update: ['{scope}', 'update']",
        f"  list: (queryParams = {{}}) => ['{scope}', '{ctx.plural}', queryParams]",
    ]
    for relation in relations:
        key_entries.append(f"  {relation.name}: (id: string) => ['{scope}', '{relation.name}', id]")
    lines.append(f"export const {ctx.keys_var}: {ctx.keys_interface} = {{")
    lines.append(",\n".join(key_entries))
    lines.append("};")
    lines.append("")

    lines.append(f"""// Hook to query a specific item by ID
export const {ctx.query_hook} = (id: string) =>
  useQuery({{
    queryKey: {ctx.keys_var}.get({{ id }}),
    queryFn: () => {ctx.get_fn}(id),
    enabled: !!id
  }});

// Hook for create mutation
export const {ctx.create_hook} = () => {{
  const queryClient = useQueryClient();

  return useMutation({{
    mutationFn: (payload: {ctx.name}) => {ctx.create_fn}(payload),
    onSuccess: () => {{
      queryClient.invalidateQueries({{ queryKey: {ctx.keys_var}.list() }});
    }}
  }});
}};

// Hook for update mutation
export const {ctx.update_hook} = () => {{
  const queryClient = useQueryClient();

  return useMutation({{
    mutationFn: (payload: {ctx.name}) => {ctx.update_fn}(payload),
    onSuccess: (data) => {{
      queryClient.invalidateQueries({{ queryKey: {ctx.keys_var}.get({{ id: data.id }}) }});
      queryClient.invalidateQueries({{ queryKey: {ctx.keys_var}.list() }});
    }}
  }});
}};

// Hook for delete mutation
export const {ctx.delete_hook} = () => {{
  const queryClient = useQueryClient();

  return useMutation({{
    mutationFn: (id: string) => {ctx.delete_fn}(id),
    onSuccess: () => {{
      queryClient.invalidateQueries({{ queryKey: {ctx.keys_var}.list() }});
    }}
  }});
}};

// Hook to list items
export const {ctx.list_hook} = (queryParams: QueryFormParams) => {{
  return useQuery({{
    queryKey: {ctx.keys_var}.list(queryParams),
    queryFn: () => {ctx.list_fn}(queryParams)
  }});
}};""")

    for relation in relations:
        lines.append("")
        lines.append(_relation_hooks(ctx, relation))

    return "\n".join(lines) + "\n"
