"""Related-entity loader hook rendering (relations.ts)."""
from typing import Sequence
from app.generators.feature_gen.context import NamingContext
from app.generators.feature_gen.fields import distinct_targets
from app.generators.feature_gen.types import EntityRelation


def _loader(ctx: NamingContext, target: str) -> str:
    return f"""  const {ctx.loader_fn(target)} = useCallback(async () => {{
    if (cache['{target}']) return cache['{target}'];
    try {{
      const response = await request.get('{ctx.target_endpoint(target)}');
      const items = response.items || response || [];
      setCache(prev => ({{ ...prev, '{target}': items }}));
      return items;
    }} catch (error) {{
      console.error('Error fetching {target} list:', error);
      return [];
    }}
  }}, [cache]);"""


def render_relations(ctx: NamingContext, relations: Sequence[EntityRelation]) -> str:
    """
    Generate the relations helper hook.

    One loader per distinct target entity; results are memoised in a local
    state cache keyed by target name. Returns an empty string without
    relations.
    """
    targets = distinct_targets(relations)
    if not targets:
        return ""

    loaders = "\n\n".join(_loader(ctx, t) for t in targets)
    exported = ",\n".join(f"    {ctx.loader_fn(t)}" for t in targets)
    return f"""import {{ useCallback, useState }} from 'react';

import {{ request }} from '@/lib/api/request';

export const {ctx.relations_hook} = () => {{
  const [cache, setCache] = useState<Record<string, any[]>>({{}});

{loaders}

  return {{
{exported}
  }};
}};
"""
