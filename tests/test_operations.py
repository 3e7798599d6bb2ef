# tests/test_operations.py

from pginfer.infer.operations import has_real_operation, match_mutation_operations, match_query_operations
from pginfer.models import IntrospectionField


def _fields(builder, specs):
    return [
        IntrospectionField.model_validate(builder.field(name, type_ref, args))
        for name, type_ref, args in specs
    ]


class TestQueryMatching:
    """Test list and single-row query matching."""

    def test_canonical_names(self, builder):
        """Test users / user are found by return type."""
        b = builder
        fields = _fields(b, [
            ("users", b.obj("UsersConnection"), None),
            ("user", b.obj("User"), [("id", b.non_null(b.scalar("UUID")))]),
        ])

        ops = match_query_operations("User", "UsersConnection", fields)

        assert ops == {"all": "users", "one": "user"}

    def test_preferred_list_name_wins(self, builder):
        """Test the pluralized name beats an earlier match."""
        b = builder
        fields = _fields(b, [
            ("allUsers", b.obj("UsersConnection"), None),
            ("users", b.obj("UsersConnection"), None),
        ])

        assert match_query_operations("User", "UsersConnection", fields)["all"] == "users"

    def test_first_list_match_without_preferred(self, builder):
        """Test the first matching field is kept otherwise."""
        b = builder
        fields = _fields(b, [
            ("allUsers", b.obj("UsersConnection"), None),
            ("searchUsers", b.obj("UsersConnection"), None),
        ])

        assert match_query_operations("User", "UsersConnection", fields)["all"] == "allUsers"

    def test_single_requires_id_argument(self, builder):
        """Test fields without id-like arguments are not single lookups."""
        b = builder
        fields = _fields(b, [
            ("currentUser", b.obj("User"), None),
            ("userByEmail", b.obj("User"), [("email", b.scalar("String"))]),
        ])

        assert match_query_operations("User", "UsersConnection", fields)["one"] is None

    def test_single_id_suffix_argument(self, builder):
        """Test arguments ending in id count, case-insensitively."""
        b = builder
        fields = _fields(b, [
            ("userByRowId", b.obj("User"), [("rowID", b.scalar("Int"))]),
        ])

        assert match_query_operations("User", "UsersConnection", fields)["one"] == "userByRowId"

    def test_single_preferred_name(self, builder):
        """Test lowerCamel(entity) beats other id lookups."""
        b = builder
        fields = _fields(b, [
            ("userByNodeId", b.obj("User"), [("nodeId", b.non_null(b.scalar("ID")))]),
            ("user", b.obj("User"), [("id", b.non_null(b.scalar("UUID")))]),
        ])

        assert match_query_operations("User", "UsersConnection", fields)["one"] == "user"

    def test_other_entity_ignored(self, builder):
        """Test fields returning other types never match."""
        b = builder
        fields = _fields(b, [("posts", b.obj("PostsConnection"), None)])

        assert match_query_operations("User", "UsersConnection", fields) == {"all": None, "one": None}


class TestMutationMatching:
    """Test create / update / delete matching by name."""

    def test_canonical(self, builder):
        """Test exact names are matched."""
        b = builder
        fields = _fields(b, [
            ("createUser", b.obj("CreateUserPayload"), None),
            ("updateUser", b.obj("UpdateUserPayload"), None),
            ("deleteUser", b.obj("DeleteUserPayload"), None),
        ])

        ops = match_mutation_operations("User", fields)

        assert ops == {"create": "createUser", "update": "updateUser", "delete": "deleteUser"}

    def test_by_id_variants(self, builder):
        """Test ById variants are used when canonical ones are absent."""
        b = builder
        fields = _fields(b, [
            ("updateUserById", b.obj("UpdateUserPayload"), None),
            ("deleteUserById", b.obj("DeleteUserPayload"), None),
        ])

        ops = match_mutation_operations("User", fields)

        assert ops == {"create": None, "update": "updateUserById", "delete": "deleteUserById"}

    def test_canonical_beats_by_id(self, builder):
        """Test canonical names win regardless of order."""
        b = builder
        fields = _fields(b, [
            ("updateUserById", b.obj("UpdateUserPayload"), None),
            ("deleteUserById", b.obj("DeleteUserPayload"), None),
            ("updateUser", b.obj("UpdateUserPayload"), None),
            ("deleteUser", b.obj("DeleteUserPayload"), None),
        ])

        ops = match_mutation_operations("User", fields)

        assert ops["update"] == "updateUser"
        assert ops["delete"] == "deleteUser"

    def test_other_by_mutations_ignored(self, builder):
        """Test update*By* unique-key mutations are not table CRUD."""
        b = builder
        fields = _fields(b, [("updateUserByEmail", b.obj("UpdateUserPayload"), None)])

        assert match_mutation_operations("User", fields)["update"] is None


class TestHasRealOperation:
    """Test the emit gate."""

    def test_none_found(self):
        """Test no matches means no real operation."""
        assert not has_real_operation(
            {"all": None, "one": None},
            {"create": None, "update": None, "delete": None},
        )

    def test_any_found(self):
        """Test one match is enough."""
        assert has_real_operation(
            {"all": None, "one": None},
            {"create": None, "update": None, "delete": "deleteUser"},
        )
