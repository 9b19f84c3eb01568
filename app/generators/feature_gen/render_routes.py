"""Toolbar and route table rendering (config/topbar.tsx, routes.tsx)."""
from app.generators.feature_gen.context import NamingContext


TOPBAR_TEMPLATE = """import { useTranslation } from 'react-i18next';

import { Button, ScreenControl } from '@/components/elements';

export const topbarLeftSection = ({ handleView }) => {
  const { t } = useTranslation();

  return [
    <div className='rounded-md flex items-center justify-between gap-x-1'>
      <Button
        icon='IconPlus'
        onClick={() => handleView(null, 'create')}
        tooltip={t('actions.create')}
      >
        {t('actions.create')}
      </Button>
    </div>
  ];
};

export const topbarRightSection = [<ScreenControl />];
"""


def render_topbar() -> str:
    """The toolbar does not vary with the feature."""
    return TOPBAR_TEMPLATE


def render_routes(ctx: NamingContext) -> str:
    page = ctx.list_page
    return f"""import {{ {page} }} from './pages/list';

import {{ renderRoutes }} from '@/router';

export const {ctx.routes_component} = () => {{
  const routes = [
    {{ path: '/', element: <{page} /> }},
    {{ path: '/:mode', element: <{page} /> }},
    {{ path: '/:mode/:slug', element: <{page} /> }}
  ];
  return renderRoutes(routes);
}};

export default {ctx.routes_component};
"""
