"""Page component rendering (pages/*.tsx)."""
from typing import Dict, List, Sequence
from app.generators.feature_gen.context import NamingContext, RelationBindings
from app.generators.feature_gen.fields import visible_fields
from app.generators.feature_gen.naming import js_quote
from app.generators.feature_gen.types import EntityField, EntityRelation


def _page_header(title_key: str) -> str:
    return f"""      <div className='bg-white sticky top-0 right-0 left-0 border-b border-slate-100 pb-4'>
        <div className='flex items-center justify-between'>
          <div className='flex items-center gap-x-4'>
            <div className='text-slate-600 font-medium'>{{t('{title_key}')}}</div>
          </div>
          <div className='flex gap-x-4'>
            <Button variant='outline-slate' onClick={{() => navigate(-1)}} size='sm'>
              {{t('actions.cancel')}}
            </Button>
            <Button onClick={{onSubmit}} size='sm'>
              {{t('actions.submit')}}
            </Button>
          </div>
        </div>
      </div>"""


def render_create_page(ctx: NamingContext) -> str:
    form = f"<{ctx.create_form} onSubmit={{onSubmit}} control={{control}} errors={{errors}} />"
    return f"""import {{ Button, Container, ScrollView }} from '@ncobase/react';
import {{ useTranslation }} from 'react-i18next';
import {{ useNavigate }} from 'react-router';

import {{ {ctx.create_form} }} from '../forms/create';

import {{ useLayoutContext }} from '@/components/layout';

export const {ctx.create_page} = ({{ viewMode, onSubmit, control, errors }}) => {{
  const {{ t }} = useTranslation();
  const navigate = useNavigate();
  const {{ vmode }} = useLayoutContext();
  const mode = viewMode || vmode || 'flatten';

  if (mode === 'modal') {{
    return {form};
  }}

  return (
    <>
{_page_header('actions.create')}
      <ScrollView className='bg-white'>
        <Container>
          {form}
        </Container>
      </ScrollView>
    </>
  );
}};
"""


def render_edit_page(ctx: NamingContext) -> str:
    props = [
        "record={record}",
        "onSubmit={onSubmit}",
        "control={control}",
        "setValue={setValue}",
        "errors={errors}",
    ]
    modal_props = "\n        ".join(props)
    page_props = "\n            ".join(props)
    return f"""import {{ Button, Container, ScrollView }} from '@ncobase/react';
import {{ useTranslation }} from 'react-i18next';
import {{ useNavigate, useParams }} from 'react-router';

import {{ {ctx.edit_form} }} from '../forms/editor';
import {{ {ctx.query_hook} }} from '../service';

import {{ useLayoutContext }} from '@/components/layout';

export const {ctx.edit_page} = ({{
  viewMode,
  record: initialRecord,
  onSubmit,
  control,
  setValue,
  errors
}}) => {{
  const {{ t }} = useTranslation();
  const navigate = useNavigate();
  const {{ vmode }} = useLayoutContext();
  const {{ slug }} = useParams<{{ slug: string }}>();
  const recordId = initialRecord || slug;
  const mode = viewMode || vmode || 'flatten';
  const {{ data: record }} = {ctx.query_hook}(recordId);

  if (!recordId) {{
    return null;
  }}

  if (mode === 'modal') {{
    return (
      <{ctx.edit_form}
        {modal_props}
      />
    );
  }}

  return (
    <>
{_page_header('actions.edit')}
      <ScrollView className='bg-white'>
        <Container>
          <{ctx.edit_form}
            {page_props}
          />
        </Container>
      </ScrollView>
    </>
  );
}};
"""


def _field_viewers(ctx: NamingContext, fields: Sequence[EntityField], indent: str) -> str:
    viewers = []
    for field in visible_fields(fields):
        extra = " className='col-span-full'" if field.type == "textarea" else ""
        viewers.append(
            f"<FieldViewer title={{t('{ctx.field_key(field.name)}')}}{extra}>"
            f"{{record.{field.name}}}</FieldViewer>"
        )
    return ("\n" + indent).join(viewers)


def _basic_info(ctx: NamingContext, fields: Sequence[EntityField], indent: str) -> str:
    return f"""{indent}<div className='grid grid-cols-2 gap-4 mt-4'>
{indent}  <div className='flex items-center text-slate-800 font-medium col-span-full border-b border-slate-100 pb-4 mb-4'>
{indent}    <span className='bg-blue-500 w-1 mr-2 h-full inline-block' />
{indent}    {{t('{ctx.t_key('section.basic_info')}')}}
{indent}  </div>
{indent}  {_field_viewers(ctx, fields, indent + '  ')}
{indent}</div>"""


def _relationship_tab(ctx: NamingContext, rb: RelationBindings) -> str:
    label = f"t('{ctx.field_key(rb.relation.name)}')"
    add_label = f"t('{ctx.t_key('add_related')}', {{ relation: {label} }})"
    return f"""// Relationship tab component
const {rb.tab_component} = ({{ recordId }}) => {{
  const {{ t }} = useTranslation();
  const {{ data, isLoading }} = {rb.get_hook}(recordId);
  const relatedItems = data ? [].concat(data) : [];

  if (isLoading) {{
    return <div className='p-4'>{{t('common.loading')}}</div>;
  }}

  if (relatedItems.length === 0) {{
    return (
      <div className='p-4 text-center'>
        <p className='text-slate-500 mb-4'>
          {{t('{ctx.t_key('no_related_items')}', {{ relation: {label} }})}}
        </p>
        <Button variant='outline-primary'>
          <Icons name='IconPlus' className='mr-2' />
          {{{add_label}}}
        </Button>
      </div>
    );
  }}

  return (
    <div className='mt-4'>
      <div className='flex justify-between items-center mb-4'>
        <h3 className='font-medium'>{{{label}}}</h3>
        <Button variant='outline-primary' size='sm'>
          <Icons name='IconPlus' className='mr-2' />
          {{{add_label}}}
        </Button>
      </div>

      <div className='border rounded overflow-hidden'>
        <table className='w-full'>
          <thead className='bg-slate-50'>
            <tr>
              <th className='px-4 py-2 text-left text-xs font-medium text-slate-500 uppercase tracking-wider'>
                {{t('common.name')}}
              </th>
              <th className='px-4 py-2 text-right text-xs font-medium text-slate-500 uppercase tracking-wider'>
                {{t('common.actions')}}
              </th>
            </tr>
          </thead>
          <tbody className='divide-y divide-slate-200'>
            {{relatedItems.map((item, index) => (
              <tr key={{item.id || index}} className='hover:bg-slate-50'>
                <td className='px-4 py-3'>{{item.name || item.title || item.id}}</td>
                <td className='px-4 py-3 text-right space-x-1'>
                  <Button variant='outline-slate' size='xs'>
                    <Icons name='IconEye' size={{14}} />
                  </Button>
                  <Button variant='outline-danger' size='xs'>
                    <Icons name='IconTrash' size={{14}} />
                  </Button>
                </td>
              </tr>
            ))}}
          </tbody>
        </table>
      </div>
    </div>
  );
}};"""


def _viewer_body(
    ctx: NamingContext,
    fields: Sequence[EntityField],
    bindings: List[RelationBindings],
) -> str:
    if not bindings:
        return _basic_info(ctx, fields, " " * 10)

    triggers = "\n".join(
        f"              <TabsTrigger value='{rb.relation.name}'>"
        f"{{t('{ctx.t_key('tabs.' + rb.relation.name)}')}}</TabsTrigger>"
        for rb in bindings
    )
    contents = "\n".join(
        f"""            <TabsContent value='{rb.relation.name}'>
              <{rb.tab_component} recordId={{recordId}} />
            </TabsContent>"""
        for rb in bindings
    )
    return f"""          <Tabs defaultValue='details' className='mt-4'>
            <TabsList>
              <TabsTrigger value='details'>{{t('{ctx.t_key('tabs.details')}')}}</TabsTrigger>
{triggers}
            </TabsList>
            <TabsContent value='details'>
{_basic_info(ctx, fields, ' ' * 14)}
            </TabsContent>
{contents}
          </Tabs>"""


def render_viewer_page(
    ctx: NamingContext,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
) -> str:
    bindings = [ctx.relation(r) for r in relations]
    react_imports = ["Button", "Container", "FieldViewer", "Icons", "ScrollView"]
    if bindings:
        react_imports.extend(["Tabs", "TabsContent", "TabsList", "TabsTrigger"])
    hooks = [ctx.query_hook] + [rb.get_hook for rb in bindings]

    lines = [
        f"import {{ {', '.join(react_imports)} }} from '@ncobase/react';",
        "import { useTranslation } from 'react-i18next';",
        "import { useNavigate, useParams } from 'react-router';",
        "",
        f"import {{ {', '.join(hooks)} }} from '../service';",
        "",
        "import { useLayoutContext } from '@/components/layout';",
        "",
    ]
    lines.append(f"""export const {ctx.viewer_page} = ({{ viewMode, record: initialRecord, handleView }}) => {{
  const {{ t }} = useTranslation();
  const navigate = useNavigate();
  const {{ vmode }} = useLayoutContext();
  const {{ slug }} = useParams<{{ slug: string }}>();
  const recordId = initialRecord || slug;
  const mode = viewMode || vmode || 'flatten';
  const {{ data: record }} = {ctx.query_hook}(recordId);

  if (!recordId) {{
    return null;
  }}

  if (!record) {{
    return <div className='p-4 text-center'>{{t('common.loading')}}</div>;
  }}

  if (mode === 'modal') {{
    return <{ctx.viewer_form} record={{record}} />;
  }}

  return (
    <>
      <div className='bg-white sticky top-0 right-0 left-0 border-b border-slate-100 pb-4'>
        <div className='flex items-center justify-between'>
          <div className='flex items-center gap-x-4'>
            <Button variant='outline-slate' onClick={{() => navigate(-1)}}>
              <Icons name='IconArrowLeft' />
            </Button>
            <div className='text-slate-600 font-medium'>{{t('actions.view')}}</div>
          </div>
          <div className='flex gap-x-4'>
            <Button
              variant='outline-primary'
              prependIcon={{<Icons name='IconEdit' className='w-4 h-4' />}}
              onClick={{() => handleView({{ id: recordId }}, 'edit')}}
            >
              {{t('actions.edit')}}
            </Button>
          </div>
        </div>
      </div>
      <ScrollView className='bg-white'>
        <Container>
{_viewer_body(ctx, fields, bindings)}
        </Container>
      </ScrollView>
    </>
  );
}};

// Read-only detail used inside modals
export const {ctx.viewer_form} = ({{ record }}) => {{
  const {{ t }} = useTranslation();

  if (!record) return null;

  return (
{_basic_info(ctx, fields, '    ')}
  );
}};""")
    for rb in bindings:
        lines.append("")
        lines.append(_relationship_tab(ctx, rb))
    return "\n".join(lines) + "\n"


def render_list_page(
    ctx: NamingContext,
    has_query_fields: bool,
) -> str:
    name = ctx.name
    display_name = js_quote(ctx.display_name)
    hooks = sorted([ctx.create_hook, ctx.delete_hook, ctx.list_hook, ctx.update_hook])
    lines = [
        "import { useCallback, useEffect, useState } from 'react';",
        "",
        "import { isEqual } from 'lodash';",
        "import { useForm } from 'react-hook-form';",
        "import { useTranslation } from 'react-i18next';",
        "import { useNavigate, useParams } from 'react-router';",
        "",
    ]
    if has_query_fields:
        lines.append("import { QueryFormParams, queryFields } from '../config/query';")
    lines.append("import { tableColumns } from '../config/table';")
    lines.append("import { topbarLeftSection, topbarRightSection } from '../config/topbar';")
    if has_query_fields:
        lines.append(f"import {{ {name} }} from '../{ctx.entity_module}';")
    else:
        lines.append(
            f"import {{ {name}, {ctx.list_params} as QueryFormParams }} from '../{ctx.entity_module}';"
        )
    lines.append(f"import {{ {', '.join(hooks)} }} from '../service';")
    lines.append("")
    lines.append(f"import {{ {ctx.create_page} }} from './create';")
    lines.append(f"import {{ {ctx.edit_page} }} from './editor';")
    lines.append(f"import {{ {ctx.viewer_page} }} from './viewer';")
    lines.append("")
    lines.append("import { CurdView } from '@/components/curd';")
    lines.append("import { useLayoutContext } from '@/components/layout';")
    lines.append("")

    query_props = ""
    if has_query_fields:
        query_props = "\n      queryFields={queryFields({ queryControl })}"

    lines.append(f"""export const {ctx.list_page} = () => {{
  const {{ t }} = useTranslation();
  const navigate = useNavigate();
  const [queryParams, setQueryParams] = useState<QueryFormParams>({{ limit: 20 }});
  const {{ data, refetch }} = {ctx.list_hook}(queryParams);
  const {{ vmode }} = useLayoutContext();

  const {{
    handleSubmit: handleQuerySubmit,
    control: queryControl,
    reset: queryReset
  }} = useForm<QueryFormParams>();

  const onQuery = handleQuerySubmit(async data => {{
    setQueryParams(prev => ({{ ...prev, ...data, cursor: '' }}));
    await refetch();
  }});

  const onResetQuery = () => {{
    queryReset();
  }};

  const [viewType, setViewType] = useState<string | undefined>();
  const {{ mode }} = useParams<{{ mode: string; slug: string }}>();
  useEffect(() => {{
    setViewType(mode || undefined);
  }}, [mode]);

  const [selectedRecord, setSelectedRecord] = useState<{name} | null>(null);

  const handleView = useCallback(
    (record: {name} | null, type: string) => {{
      setSelectedRecord(record);
      setViewType(type);
      if (vmode === 'flatten') {{
        navigate(`${{type}}${{record ? `/${{record.id}}` : ''}}`);
      }}
    }},
    [navigate, vmode]
  );

  const {{
    control: formControl,
    formState: {{ errors: formErrors }},
    reset: formReset,
    setValue: setFormValue,
    handleSubmit: handleFormSubmit
  }} = useForm<{name}>();

  const handleClose = useCallback(() => {{
    setSelectedRecord(null);
    setViewType(undefined);
    formReset();
    if (vmode === 'flatten' && viewType) {{
      navigate(-1);
    }}
  }}, [formReset, navigate, vmode, viewType]);

  const createMutation = {ctx.create_hook}();
  const updateMutation = {ctx.update_hook}();
  const deleteMutation = {ctx.delete_hook}();

  const onSuccess = useCallback(() => {{
    handleClose();
    refetch();
  }}, [handleClose, refetch]);

  const handleCreate = useCallback(
    (data: {name}) => {{
      createMutation.mutate(data, {{ onSuccess }});
    }},
    [createMutation, onSuccess]
  );

  const handleUpdate = useCallback(
    (data: {name}) => {{
      updateMutation.mutate(data, {{ onSuccess }});
    }},
    [updateMutation, onSuccess]
  );

  const handleDelete = useCallback(
    (record: {name}) => {{
      if (confirm(t('messages.confirm_delete'))) {{
        deleteMutation.mutate(record.id, {{ onSuccess }});
      }}
    }},
    [deleteMutation, onSuccess, t]
  );

  const handleConfirm = useCallback(
    handleFormSubmit((data: {name}) => {{
      return viewType === 'create' ? handleCreate(data) : handleUpdate(data);
    }}),
    [handleFormSubmit, viewType, handleCreate, handleUpdate]
  );

  const fetchData = useCallback(
    async (newQueryParams: QueryFormParams) => {{
      const mergedQueryParams = {{ ...queryParams, ...newQueryParams }};
      if (
        (isEqual(mergedQueryParams, queryParams) && Object.keys(data || {{}}).length) ||
        isEqual(newQueryParams, queryParams)
      ) {{
        return data;
      }}
      setQueryParams({{ ...mergedQueryParams }});
    }},
    [queryParams, data]
  );

  return (
    <CurdView
      viewMode={{vmode}}
      title={{t('{ctx.t_key('title')}', {display_name})}}
      topbarLeft={{topbarLeftSection({{ handleView }})}}
      topbarRight={{topbarRightSection}}
      columns={{tableColumns({{ handleView, handleDelete }})}}
      selected{query_props}
      onQuery={{onQuery}}
      onResetQuery={{onResetQuery}}
      fetchData={{fetchData}}
      createComponent={{
        <{ctx.create_page}
          viewMode={{vmode}}
          onSubmit={{handleConfirm}}
          control={{formControl}}
          errors={{formErrors}}
        />
      }}
      viewComponent={{record => (
        <{ctx.viewer_page} viewMode={{vmode}} handleView={{handleView}} record={{record?.id}} />
      )}}
      editComponent={{record => (
        <{ctx.edit_page}
          viewMode={{vmode}}
          record={{record?.id}}
          onSubmit={{handleConfirm}}
          control={{formControl}}
          setValue={{setFormValue}}
          errors={{formErrors}}
        />
      )}}
      type={{viewType}}
      record={{selectedRecord}}
      onConfirm={{handleConfirm}}
      onCancel={{handleClose}}
    />
  );
}};""")
    return "\n".join(lines) + "\n"


def render_pages(
    ctx: NamingContext,
    fields: Sequence[EntityField],
    relations: Sequence[EntityRelation],
    has_query_fields: bool,
) -> Dict[str, str]:
    """Generate the create, edit, viewer and list pages keyed by file stem."""
    return {
        "create": render_create_page(ctx),
        "editor": render_edit_page(ctx),
        "viewer": render_viewer_page(ctx, fields, relations),
        "list": render_list_page(ctx, has_query_fields),
    }
