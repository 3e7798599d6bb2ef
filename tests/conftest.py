# tests/conftest.py

import pytest

from pginfer.utils.cache import introspection_cache


class IntrospectionBuilder:
    """Builds minimal ``{"__schema": ...}`` documents for tests."""

    def __init__(self):
        self.types = []
        self.query_fields = []
        self.mutation_fields = []

    # -- type references -------------------------------------------------

    @staticmethod
    def scalar(name):
        return {"kind": "SCALAR", "name": name, "ofType": None}

    @staticmethod
    def obj(name):
        return {"kind": "OBJECT", "name": name, "ofType": None}

    @staticmethod
    def enum_ref(name):
        return {"kind": "ENUM", "name": name, "ofType": None}

    @staticmethod
    def input_ref(name):
        return {"kind": "INPUT_OBJECT", "name": name, "ofType": None}

    @staticmethod
    def list_of(inner):
        return {"kind": "LIST", "name": None, "ofType": inner}

    @staticmethod
    def non_null(inner):
        return {"kind": "NON_NULL", "name": None, "ofType": inner}

    @staticmethod
    def field(name, type_ref, args=None):
        return {
            "name": name,
            "description": None,
            "type": type_ref,
            "args": [
                {"name": arg_name, "type": arg_type, "description": None, "defaultValue": None}
                for arg_name, arg_type in (args or [])
            ],
            "isDeprecated": False,
            "deprecationReason": None,
        }

    # -- type definitions ------------------------------------------------

    def object(self, name, fields=None):
        self.types.append({
            "kind": "OBJECT",
            "name": name,
            "description": None,
            "fields": fields or [],
            "inputFields": None,
            "enumValues": None,
            "interfaces": [],
            "possibleTypes": None,
        })
        return self

    def entity(self, name, fields=None, connection=None, with_nodes=False):
        """Add an entity plus its Connection (``{Name}sConnection`` by default)."""
        connection = connection or f"{name}sConnection"
        self.object(name, fields or [self.field("id", self.non_null(self.scalar("UUID")))])
        conn_fields = [self.field("nodes", self.list_of(self.obj(name)))] if with_nodes else []
        self.object(connection, conn_fields)
        return self

    def input(self, name, input_fields):
        self.types.append({
            "kind": "INPUT_OBJECT",
            "name": name,
            "description": None,
            "fields": None,
            "inputFields": [
                {"name": f_name, "type": f_type, "description": None, "defaultValue": None}
                for f_name, f_type in input_fields
            ],
            "enumValues": None,
            "interfaces": None,
            "possibleTypes": None,
        })
        return self

    def enum(self, name, values=("ID_ASC",)):
        self.types.append({
            "kind": "ENUM",
            "name": name,
            "description": None,
            "fields": None,
            "inputFields": None,
            "enumValues": [
                {"name": v, "description": None, "isDeprecated": False, "deprecationReason": None}
                for v in values
            ],
            "interfaces": None,
            "possibleTypes": None,
        })
        return self

    def query(self, name, type_ref, args=None):
        self.query_fields.append(self.field(name, type_ref, args))
        return self

    def mutation(self, name, type_ref=None, args=None):
        self.mutation_fields.append(self.field(name, type_ref or self.obj("Payload"), args))
        return self

    def build(self):
        root_types = [{
            "kind": "OBJECT",
            "name": "Query",
            "description": None,
            "fields": list(self.query_fields),
            "inputFields": None,
            "enumValues": None,
            "interfaces": [],
            "possibleTypes": None,
        }]
        if self.mutation_fields:
            root_types.append({
                "kind": "OBJECT",
                "name": "Mutation",
                "description": None,
                "fields": list(self.mutation_fields),
                "inputFields": None,
                "enumValues": None,
                "interfaces": [],
                "possibleTypes": None,
            })
        return {
            "__schema": {
                "queryType": {"name": "Query"},
                "mutationType": {"name": "Mutation"} if self.mutation_fields else None,
                "subscriptionType": None,
                "types": root_types + list(self.types),
                "directives": [],
            }
        }


@pytest.fixture
def builder():
    """Fresh introspection document builder."""
    return IntrospectionBuilder()


@pytest.fixture
def blog_schema(builder):
    """User <-> Post schema with a circular relation and full CRUD."""
    b = builder
    b.object("User", [
        b.field("id", b.non_null(b.scalar("UUID"))),
        b.field("email", b.scalar("String")),
        b.field("posts", b.non_null(b.obj("PostsConnection"))),
    ])
    b.object("UsersConnection", [b.field("nodes", b.non_null(b.list_of(b.obj("User"))))])
    b.object("Post", [
        b.field("id", b.non_null(b.scalar("UUID"))),
        b.field("title", b.scalar("String")),
        b.field("tags", b.list_of(b.non_null(b.scalar("String")))),
        b.field("author", b.obj("User")),
    ])
    b.object("PostsConnection", [b.field("nodes", b.non_null(b.list_of(b.obj("Post"))))])
    b.object("PageInfo", [b.field("hasNextPage", b.non_null(b.scalar("Boolean")))])
    b.input("UpdateUserInput", [
        ("clientMutationId", b.scalar("String")),
        ("id", b.non_null(b.scalar("UUID"))),
        ("userPatch", b.non_null(b.input_ref("UserPatch"))),
    ])
    b.input("UserPatch", [("email", b.scalar("String"))])
    b.enum("UsersOrderBy", ["NATURAL", "ID_ASC"])
    b.query("users", b.obj("UsersConnection"))
    b.query("user", b.obj("User"), args=[("id", b.non_null(b.scalar("UUID")))])
    b.query("posts", b.obj("PostsConnection"))
    b.query("currentUser", b.obj("User"))
    b.mutation("createUser", b.obj("CreateUserPayload"))
    b.mutation("updateUser", b.obj("UpdateUserPayload"))
    b.mutation("deleteUser", b.obj("DeleteUserPayload"))
    b.mutation("login", b.obj("LoginPayload"))
    return b.build()


@pytest.fixture(autouse=True)
def clear_introspection_cache():
    """Keep cached endpoint results from leaking between tests."""
    introspection_cache.clear()
    yield
    introspection_cache.clear()
