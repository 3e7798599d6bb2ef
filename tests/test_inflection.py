# tests/test_inflection.py

import pytest

from pginfer.utils.inflection import lower_camel, pluralize, singularize, upper_camel


class TestPluralize:
    """Test pluralization of identifiers."""

    @pytest.mark.parametrize("word,expected", [
        ("User", "Users"),
        ("Person", "People"),
        ("Category", "Categories"),
        ("Schema", "Schemata"),
        ("NodeTypeRegistry", "NodeTypeRegistries"),
        ("OrderItem", "OrderItems"),
        ("Company", "Companies"),
        ("Address", "Addresses"),
        ("UserStatus", "UserStatuses"),
    ])
    def test_pluralize(self, word, expected):
        """Test regular, irregular and compound plurals."""
        assert pluralize(word) == expected

    def test_lowercase_kept(self):
        """Test lowercase identifiers stay lowercase."""
        assert pluralize("user") == "users"

    def test_empty(self):
        """Test empty string passes through."""
        assert pluralize("") == ""


class TestSingularize:
    """Test singularization of identifiers."""

    @pytest.mark.parametrize("word,expected", [
        ("Users", "User"),
        ("People", "Person"),
        ("Categories", "Category"),
        ("Schemata", "Schema"),
        ("NodeTypeRegistries", "NodeTypeRegistry"),
        ("SchemaGrants", "SchemaGrant"),
        ("Addresses", "Address"),
        ("Companies", "Company"),
        ("Schemas", "Schema"),
    ])
    def test_singularize(self, word, expected):
        """Test regular, irregular and compound singulars."""
        assert singularize(word) == expected

    @pytest.mark.parametrize("word", ["User", "Address", "Status", "Bus", "Campus", "Process", "Analysis", "UserAddress"])
    def test_already_singular(self, word):
        """Test singular words are returned unchanged."""
        assert singularize(word) == word

    def test_empty(self):
        """Test empty string passes through."""
        assert singularize("") == ""


class TestCamelCase:
    """Test first-character case helpers."""

    def test_lower_camel(self):
        """Test only the first character is lowered."""
        assert lower_camel("UserProfile") == "userProfile"
        assert lower_camel("") == ""

    def test_upper_camel(self):
        """Test only the first character is raised."""
        assert upper_camel("products") == "Products"
        assert upper_camel("orderItems") == "OrderItems"
