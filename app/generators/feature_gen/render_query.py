"""Search/filter bar rendering (config/query.tsx)."""
from typing import Sequence
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.fields import searchable_fields
from app.generators.feature_gen.naming import js_quote
from app.generators.feature_gen.type_map import get_typescript_type
from app.generators.feature_gen.types import EntityField


def _control(field: EntityField) -> str:
    if field.type == "select":
        options = ["            { label: t('common.all'), value: 'all' }"]
        options.extend(
            f"            {{ label: {js_quote(opt.label)}, value: {js_quote(opt.value)} }}"
            for opt in field.options
        )
        return (
            "<SelectField\n"
            "          options={[\n"
            + ",\n".join(options)
            + "\n          ]}\n"
            "          className='[&>button]:py-1.5'\n"
            "          {...field}\n"
            "        />"
        )
    if field.type == "date":
        return "<DateField\n          className='py-1.5'\n          {...field}\n        />"
    return "<InputField\n          className='py-1.5'\n          {...field}\n        />"


def _query_field(ctx: NamingContext, field: EntityField) -> str:
    return f"""  {{
    name: '{field.name}',
    label: t('{ctx.field_key(field.name)}'),
    component: (
      <Controller
        name='{field.name}'
        control={{queryControl}}
        defaultValue=''
        render={{({{ field }}) => {_control(field)}}}
      />
    )
  }}"""


def render_query_fields(ctx: NamingContext, fields: Sequence[EntityField]) -> str:
    """
    Generate the query bar field list.

    Returns an empty string when no field qualifies; callers omit the
    artifact in that case.
    """
    searchable = searchable_fields(fields)
    if not searchable:
        return ""

    params = "\n".join(f"  {f.name}?: {get_typescript_type(f.type)};" for f in searchable)
    items = ",\n".join(_query_field(ctx, f) for f in searchable)
    return f"""import {{ DateField, InputField, PaginationParams, SelectField }} from '@ncobase/react';
import {{ ExplicitAny }} from '@ncobase/types';
import {{ Control, Controller }} from 'react-hook-form';
import {{ useTranslation }} from 'react-i18next';

export type QueryFormParams = {{
{params}
}} & PaginationParams;

export const queryFields = ({{
  queryControl
}}: {{
  queryControl: Control<QueryFormParams, ExplicitAny>;
}}) => {{
  const {{ t }} = useTranslation();

  return [
{items}
  ];
}};
"""
