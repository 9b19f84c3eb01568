"""Table column rendering (config/table.tsx)."""
from typing import List, Sequence
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.fields import reference_relations, table_fields
from app.generators.feature_gen.type_map import get_icon_for_type
from app.generators.feature_gen.types import EntityField, EntityRelation


def _field_column(ctx: NamingContext, field: EntityField) -> str:
    props = [
        f"title: t('{ctx.field_key(field.name)}')",
        f"dataIndex: '{field.name}'",
    ]
    if field.is_primary:
        props.append(f"""parser: (value: string, record: {ctx.name}) => (
        <Button variant='link' size='md' onClick={{() => handleView(record, 'view')}}>
          {{value}}
        </Button>
      )""")
    elif field.type == "date":
        props.append("parser: value => formatDateTime(value)")
    elif field.type == "select" and field.name == "status":
        props.append(f"parser: (value: string, _record: {ctx.name}) => parseStatus(value)")
    props.append(f"icon: '{get_icon_for_type(field.type)}'")
    return "    {\n" + ",\n".join(f"      {p}" for p in props) + "\n    }"


def _relation_column(ctx: NamingContext, relation: EntityRelation) -> str:
    ref = f"record.{relation.name}"
    return f"""    {{
      title: t('{ctx.field_key(relation.name)}'),
      dataIndex: '{relation.name}.name',
      icon: 'IconLink',
      parser: (_value: string, record: {ctx.name}) =>
        {ref} ? (
          <Button variant='link' size='md' onClick={{() => handleView({ref}, 'view')}}>
            {{{ref}.name || {ref}.title || {ref}.id}}
          </Button>
        ) : (
          '-'
        )
    }}"""


def _actions_column(ctx: NamingContext) -> str:
    return f"""    {{
      title: t('common.actions'),
      actions: [
        {{
          title: t('actions.view'),
          icon: 'IconEye',
          onClick: (record: {ctx.name}) => handleView(record, 'view')
        }},
        {{
          title: t('actions.edit'),
          icon: 'IconPencil',
          onClick: (record: {ctx.name}) => handleView(record, 'edit')
        }},
        {{
          title: t('actions.delete'),
          icon: 'IconTrash',
          onClick: (record: {ctx.name}) => handleDelete(record)
        }}
      ]
    }}"""


def render_table_columns(
    ctx: NamingContext,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
) -> str:
    """Generate the table header builder with a trailing actions column."""
    columns: List[str] = [_field_column(ctx, f) for f in table_fields(fields)]
    columns.extend(_relation_column(ctx, r) for r in reference_relations(relations))
    columns.append(_actions_column(ctx))

    lines = [
        "import { Button, TableViewProps } from '@ncobase/react';",
        "import { formatDateTime } from '@ncobase/utils';",
        "import { useTranslation } from 'react-i18next';",
        "",
        "import { parseStatus } from '@/lib/status';",
        "",
        f"import {{ {ctx.name} }} from '../{ctx.entity_module}';",
        "",
        "export const tableColumns = ({ handleView, handleDelete }): TableViewProps['header'] => {",
        "  const { t } = useTranslation();",
        "  return [",
        ",\n".join(columns),
        "  ];",
        "};",
    ]
    return "\n".join(lines) + "\n"
