"""Create/edit form configuration rendering (forms/*.tsx)."""
from typing import Any, Dict, List, Sequence
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.fields import (
    FULL_WIDTH_FIELD_TYPES,
    create_form_fields,
    distinct_targets,
    edit_form_fields,
    form_relations,
)
from app.generators.feature_gen.naming import js_quote
from app.generators.feature_gen.types import EntityField, EntityRelation


def render_default_value(value: Any) -> str:
    """Render a field default as a JavaScript literal."""
    if value is None or value == "":
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    return js_quote(value)


def _required_rule(field_type: str) -> str:
    kind = "select" if field_type in ("select", "multi-select") else "input"
    return f"rules: {{ required: t('forms.{kind}_required') }}"


def _field_config(ctx: NamingContext, field: EntityField, disabled: bool = False) -> str:
    props = [
        f"title: t('{ctx.field_key(field.name)}')",
        f"name: '{field.name}'",
        f"defaultValue: {render_default_value(field.default_value)}",
        f"type: '{field.type}'",
    ]
    if field.required:
        props.append(_required_rule(field.type))
    if disabled:
        props.append("disabled: true")
    if field.is_choice:
        options = ",\n".join(
            f"        {{ label: {js_quote(opt.label)}, value: {js_quote(opt.value)} }}"
            for opt in field.options
        )
        props.append("options: [\n" + options + "\n      ]" if options else "options: []")
    if field.type in FULL_WIDTH_FIELD_TYPES:
        props.append("className: 'col-span-full'")
    return "    {\n" + ",\n".join(f"      {p}" for p in props) + "\n    }"


def _relation_config(ctx: NamingContext, relation: EntityRelation) -> str:
    props = [
        f"title: t('{ctx.field_key(relation.name)}')",
        f"name: '{relation.name}'",
        "type: 'select'",
    ]
    if relation.is_required:
        props.append("rules: { required: t('forms.select_required') }")
    props.append(f"""loadOptions: async () => {{
        const options = await {ctx.loader_fn(relation.target_entity)}();
        return options.map(item => ({{
          label: item.name || item.title || item.id,
          value: item.id
        }}));
      }}""")
    return "    {\n" + ",\n".join(f"      {p}" for p in props) + "\n    }"


def _fields_array(configs: List[str]) -> str:
    if not configs:
        return "  const fields: FieldConfigProps[] = [];"
    return "  const fields: FieldConfigProps[] = [\n" + ",\n".join(configs) + "\n  ];"


def _relation_loaders(ctx: NamingContext, relations: Sequence[EntityRelation]) -> List[str]:
    loaders = [ctx.loader_fn(target) for target in distinct_targets(relations)]
    if not loaders:
        return []
    return [
        "  const {",
        "    " + ", ".join(loaders),
        f"  }} = {ctx.relations_hook}();",
    ]


def _form_element(form_id: str) -> str:
    return f"""  return (
    <Form
      id='{form_id}'
      className='my-4 md:grid-cols-2'
      onSubmit={{onSubmit}}
      control={{control}}
      errors={{errors}}
      fields={{fields}}
    />
  );
}};"""


def render_create_form(
    ctx: NamingContext,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
) -> str:
    select_relations = form_relations(relations)
    lines = [
        "import { Form } from '@ncobase/react';",
        "import { useTranslation } from 'react-i18next';",
        "",
        "import { FieldConfigProps } from '@/components/form';",
    ]
    if select_relations:
        lines.append(f"import {{ {ctx.relations_hook} }} from '../relations';")
    lines.append("")
    lines.append(f"export const {ctx.create_form} = ({{ onSubmit, control, errors }}) => {{")
    lines.append("  const { t } = useTranslation();")
    lines.extend(_relation_loaders(ctx, select_relations))
    lines.append("")

    configs = [_field_config(ctx, f) for f in create_form_fields(fields)]
    configs.extend(_relation_config(ctx, r) for r in select_relations)
    lines.append(_fields_array(configs))
    lines.append("")
    lines.append(_form_element(f"create-{ctx.lower}"))
    return "\n".join(lines) + "\n"


def render_edit_form(
    ctx: NamingContext,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
) -> str:
    select_relations = form_relations(relations)
    editable = edit_form_fields(fields)
    lines = [
        "import { useEffect } from 'react';",
        "",
        "import { Form } from '@ncobase/react';",
        "import { useTranslation } from 'react-i18next';",
        "",
        "import { FieldConfigProps } from '@/components/form';",
    ]
    if select_relations:
        lines.append(f"import {{ {ctx.relations_hook} }} from '../relations';")
    lines.append("")
    lines.append(
        f"export const {ctx.edit_form} = ({{ record, onSubmit, control, setValue, errors }}) => {{"
    )
    lines.append("  const { t } = useTranslation();")
    lines.extend(_relation_loaders(ctx, select_relations))
    lines.append("")

    configs = [_field_config(ctx, f, disabled=f.is_read_only) for f in editable]
    configs.extend(_relation_config(ctx, r) for r in select_relations)
    lines.append(_fields_array(configs))
    lines.append("")

    lines.append("  // Set form values when data is loaded")
    lines.append("  useEffect(() => {")
    lines.append("    if (!record) return;")
    for field in editable:
        lines.append(f"    setValue('{field.name}', record.{field.name});")
    for relation in select_relations:
        lines.append(f"    if (record.{relation.name} && record.{relation.name}.id) {{")
        lines.append(f"      setValue('{relation.name}', record.{relation.name}.id);")
        lines.append("    }")
    lines.append("  }, [setValue, record]);")
    lines.append("")
    lines.append(_form_element(f"edit-{ctx.lower}"))
    return "\n".join(lines) + "\n"


def render_form_fields(
    ctx: NamingContext,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
) -> Dict[str, str]:
    """Generate the create and edit form builders."""
    return {
        "create": render_create_form(ctx, fields, relations),
        "editor": render_edit_form(ctx, fields, relations),
    }
