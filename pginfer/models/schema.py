# pginfer/models/schema.py
"""Inferred table metadata ("clean" tables) produced from introspection.

Relations only carry table *names*; use ``pginfer.infer.filters.build_table_index``
to resolve them to tables when needed.

Serialize with ``model_dump(by_alias=True)`` to get the camelCase JSON shape
(``referencesTable``, ``primaryKey``, ...).
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CleanModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CleanFieldType(_CleanModel):
    gql_type: str
    is_array: bool = False


class CleanField(_CleanModel):
    """A data attribute of a table (never a relation)."""
    name: str
    type: CleanFieldType


class CleanBelongsToRelation(_CleanModel):
    field_name: Optional[str] = None
    is_unique: bool = False
    references_table: str
    type: Optional[str] = None
    keys: List[CleanField] = Field(default_factory=list)


class CleanHasOneRelation(_CleanModel):
    field_name: Optional[str] = None
    is_unique: bool = True
    referenced_by_table: str
    type: Optional[str] = None
    keys: List[CleanField] = Field(default_factory=list)


class CleanHasManyRelation(_CleanModel):
    field_name: Optional[str] = None
    is_unique: bool = False
    referenced_by_table: str
    type: Optional[str] = None
    keys: List[CleanField] = Field(default_factory=list)


class CleanManyToManyRelation(_CleanModel):
    field_name: Optional[str] = None
    right_table: str
    junction_table: str
    type: Optional[str] = None


class CleanRelations(_CleanModel):
    belongs_to: List[CleanBelongsToRelation] = Field(default_factory=list)
    has_one: List[CleanHasOneRelation] = Field(default_factory=list)
    has_many: List[CleanHasManyRelation] = Field(default_factory=list)
    many_to_many: List[CleanManyToManyRelation] = Field(default_factory=list)


class TableQueryNames(_CleanModel):
    """Root operation names for a table.

    ``all`` and ``create`` always hold a name (real or conventional);
    ``one``, ``update`` and ``delete`` are None when the schema lacks them.
    """
    all: str
    one: Optional[str] = None
    create: str
    update: Optional[str] = None
    delete: Optional[str] = None
    patch_field_name: Optional[str] = None


class ConstraintInfo(_CleanModel):
    name: str
    fields: List[CleanField] = Field(default_factory=list)


class ForeignKeyConstraint(ConstraintInfo):
    ref_table: str
    ref_fields: List[CleanField] = Field(default_factory=list)


class TableConstraints(_CleanModel):
    primary_key: List[ConstraintInfo] = Field(default_factory=list)
    foreign_key: List[ForeignKeyConstraint] = Field(default_factory=list)
    unique: List[ConstraintInfo] = Field(default_factory=list)


class TableInflection(_CleanModel):
    """PostGraphile-generated names associated with a table."""
    all_rows: str
    all_rows_simple: str
    condition_type: str
    connection: str
    create_field: str
    create_input_type: str
    create_payload_type: str
    delete_by_primary_key: Optional[str] = None
    delete_payload_type: str
    edge: str
    edge_field: str
    enum_type: str
    filter_type: Optional[str] = None
    input_type: str
    order_by_type: str
    patch_field: str
    patch_type: Optional[str] = None
    table_field_name: str
    table_type: str
    type_name: str
    update_by_primary_key: Optional[str] = None
    update_payload_type: Optional[str] = None


class CleanTable(_CleanModel):
    """A database table inferred from the schema."""
    name: str
    fields: List[CleanField] = Field(default_factory=list)
    relations: CleanRelations = Field(default_factory=CleanRelations)
    inflection: TableInflection
    query: TableQueryNames
    constraints: TableConstraints = Field(default_factory=TableConstraints)
