# pginfer/infer/entities.py
"""Detect entity types through their ``{X}Connection`` companions.

PostGraphile emits a Connection type for every table. The entity behind a
connection is read from the connection's ``nodes`` field when there is one
(robust to v5 singular names like ``UserConnection`` and to irregular
plurals); otherwise the connection prefix is singularized and looked up.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pginfer.infer.type_index import TypeIndex, is_ignored_type, is_object_type
from pginfer.models.introspection import IntrospectionType, get_base_type_name
from pginfer.utils.inflection import singularize

logger = logging.getLogger("pginfer_infer")

CONNECTION_RE = re.compile(r"^(.+)Connection$")


@dataclass
class EntityMaps:
    """Entities found in a schema plus the entity <-> connection mapping."""
    entity_names: List[str] = field(default_factory=list)
    entity_to_connection: Dict[str, str] = field(default_factory=dict)
    connection_to_entity: Dict[str, str] = field(default_factory=dict)

    def is_entity(self, name: Optional[str]) -> bool:
        return name is not None and name in self.entity_to_connection


def is_connection_name(name: Optional[str]) -> bool:
    return bool(name) and name.endswith("Connection")


def _entity_from_nodes(connection_type: IntrospectionType, type_index: TypeIndex) -> Optional[str]:
    for conn_field in connection_type.fields or []:
        if conn_field.name != "nodes":
            continue
        node_name = get_base_type_name(conn_field.type)
        if (
            node_name
            and not is_connection_name(node_name)
            and not is_ignored_type(node_name)
            and is_object_type(node_name, type_index)
        ):
            return node_name
        return None
    return None


def resolve_entity_from_connection(
    connection_type: IntrospectionType,
    type_index: TypeIndex,
) -> Optional[str]:
    """Return the entity name a Connection type lists, or None.

    Tries the ``nodes`` field first, then singularizes the name prefix
    (``UsersConnection`` -> ``User``).
    """
    match = CONNECTION_RE.match(connection_type.name)
    if not match:
        return None

    entity_name = _entity_from_nodes(connection_type, type_index)
    if entity_name:
        return entity_name

    singular_name = singularize(match.group(1))
    if singular_name in type_index and not is_ignored_type(singular_name):
        return singular_name
    return None


def detect_entities(types: List[IntrospectionType], type_index: TypeIndex) -> EntityMaps:
    """Scan OBJECT types for Connections and collect the entities they list.

    Entities are kept in first-discovery order. When several connections
    resolve to the same entity the first one stays its connection.
    """
    maps = EntityMaps()

    for type_def in types:
        if type_def.kind != "OBJECT" or is_ignored_type(type_def.name):
            continue
        if not CONNECTION_RE.match(type_def.name):
            continue

        entity_name = resolve_entity_from_connection(type_def, type_index)
        if not entity_name:
            continue

        maps.connection_to_entity[type_def.name] = entity_name
        if entity_name in maps.entity_to_connection:
            logger.debug(
                f"Connection '{type_def.name}' also resolves to '{entity_name}', "
                f"keeping '{maps.entity_to_connection[entity_name]}'"
            )
            continue
        maps.entity_to_connection[entity_name] = type_def.name
        maps.entity_names.append(entity_name)

    return maps
