"""Shared identifiers for every generated artifact.

A ``NamingContext`` is computed once per generation call from the
``FeatureConfig``. Generators read entity name forms, endpoint paths,
exported binding names, hook names and cache-key scopes from it instead of
deriving them locally, so all artifacts reference each other consistently.
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple
from app.generators.feature_gen.naming import capitalize_first, pluralize
from app.generators.feature_gen.types import EntityRelation, FeatureConfig


DEFAULT_API_PREFIX = "/api"


@dataclass(frozen=True)
class RelationBindings:
    """Names generated for one relation across apis.ts and service.ts."""
    relation: EntityRelation
    suffix: str
    get_fn: str
    attach_fn: str  # add{Name}{Rel} for collections, set{Name}{Rel} otherwise
    remove_fn: str
    get_hook: str
    attach_hook: str
    remove_hook: str
    target_param: str
    cache_key: str
    tab_component: str

    @property
    def attach_verb(self) -> str:
        return "add" if self.relation.is_collection else "set"


@dataclass(frozen=True)
class NamingContext:
    name: str
    lower: str
    plural: str
    display_name: str
    api_prefix: str

    @classmethod
    def from_config(cls, config: FeatureConfig) -> "NamingContext":
        return cls(
            name=config.name,
            lower=config.name.lower(),
            plural=config.plural_name or f"{config.name}s",
            display_name=config.display_name or config.name,
            api_prefix=config.api_prefix or DEFAULT_API_PREFIX,
        )

    # Module level names

    @property
    def endpoint(self) -> str:
        return f"{self.api_prefix}/{self.plural}"

    @property
    def api_var(self) -> str:
        return f"{self.lower}Api"

    @property
    def keys_var(self) -> str:
        return f"{self.lower}Keys"

    @property
    def keys_interface(self) -> str:
        return f"{self.name}Keys"

    @property
    def cache_scope(self) -> str:
        return f"{self.lower}Service"

    @property
    def list_params(self) -> str:
        return f"{self.name}ListParams"

    @property
    def entity_module(self) -> str:
        return self.lower

    @property
    def entity_file(self) -> str:
        return f"{self.lower}.d.ts"

    @property
    def archive_name(self) -> str:
        return f"{self.lower}-feature.zip"

    def t_key(self, key: str) -> str:
        return f"{self.lower}.{key}"

    def field_key(self, field_name: str) -> str:
        return f"{self.lower}.fields.{field_name}"

    # apis.ts bindings

    @property
    def create_fn(self) -> str:
        return f"create{self.name}"

    @property
    def get_fn(self) -> str:
        return f"get{self.name}"

    @property
    def update_fn(self) -> str:
        return f"update{self.name}"

    @property
    def delete_fn(self) -> str:
        return f"delete{self.name}"

    @property
    def list_fn(self) -> str:
        return f"get{self.plural}"

    @property
    def search_fn(self) -> str:
        return f"search{self.plural}"

    @property
    def toggle_status_fn(self) -> str:
        return f"toggle{self.name}Status"

    @property
    def upload_file_fn(self) -> str:
        return f"upload{self.name}File"

    def relation(self, relation: EntityRelation) -> RelationBindings:
        suffix = capitalize_first(relation.name)
        verb = "add" if relation.is_collection else "set"
        return RelationBindings(
            relation=relation,
            suffix=suffix,
            get_fn=f"get{self.name}{suffix}",
            attach_fn=f"{verb}{self.name}{suffix}",
            remove_fn=f"remove{self.name}{suffix}",
            get_hook=f"useGet{self.name}{suffix}",
            attach_hook=f"use{capitalize_first(verb)}{self.name}{suffix}",
            remove_hook=f"useRemove{self.name}{suffix}",
            target_param=f"{relation.target_entity.lower()}Id",
            cache_key=relation.name,
            tab_component=f"{suffix}RelationshipTab",
        )

    def api_bindings(
        self, config: FeatureConfig, relations: Sequence[EntityRelation]
    ) -> List[Tuple[str, str]]:
        """
        Exported bindings of apis.ts as (export name, api member) pairs.

        The standard CRUD members come from the api factory; custom members
        are declared in the extensions block under the export name itself.
        """
        bindings = [
            (self.create_fn, "create"),
            (self.get_fn, "get"),
            (self.update_fn, "update"),
            (self.delete_fn, "delete"),
            (self.list_fn, "list"),
        ]
        if config.has_custom_api:
            bindings.append((self.search_fn, self.search_fn))
            bindings.append((self.toggle_status_fn, self.toggle_status_fn))
            if config.has_files:
                bindings.append((self.upload_file_fn, self.upload_file_fn))
        for relation in relations:
            rb = self.relation(relation)
            for fn in (rb.get_fn, rb.attach_fn, rb.remove_fn):
                bindings.append((fn, fn))
        return bindings

    # service.ts hooks

    @property
    def query_hook(self) -> str:
        return f"useQuery{self.name}"

    @property
    def create_hook(self) -> str:
        return f"useCreate{self.name}"

    @property
    def update_hook(self) -> str:
        return f"useUpdate{self.name}"

    @property
    def delete_hook(self) -> str:
        return f"useDelete{self.name}"

    @property
    def list_hook(self) -> str:
        return f"useList{self.plural}"

    # relations.ts

    @property
    def relations_hook(self) -> str:
        return f"use{self.name}Relations"

    @staticmethod
    def loader_fn(target_entity: str) -> str:
        return f"fetch{target_entity}List"

    def target_endpoint(self, target_entity: str) -> str:
        return f"{self.api_prefix}/{pluralize(target_entity.lower())}"

    # Components

    @property
    def create_form(self) -> str:
        return f"Create{self.name}Form"

    @property
    def edit_form(self) -> str:
        return f"Edit{self.name}Form"

    @property
    def create_page(self) -> str:
        return f"Create{self.name}Page"

    @property
    def edit_page(self) -> str:
        return f"Edit{self.name}Page"

    @property
    def viewer_page(self) -> str:
        return f"{self.name}ViewerPage"

    @property
    def viewer_form(self) -> str:
        return f"{self.name}ViewerForm"

    @property
    def list_page(self) -> str:
        return f"{self.name}ListPage"

    @property
    def routes_component(self) -> str:
        return f"{self.name}Routes"
