"""Tests for naming conventions."""

import pytest
from graphql import parse

from gql_tsgen.core.errors import ConfigError
from gql_tsgen.core.naming import (
    camel_case,
    constant_case,
    convert_factory,
    node_name,
    pascal_case,
    snake_case,
)


class TestCaseHelpers:
    """Tests for the case conversion helpers."""

    def test_snake_case(self):
        assert snake_case("userId") == "user_id"
        assert snake_case("UserProfile") == "user_profile"
        assert snake_case("HTTPResponse") == "http_response"

    def test_pascal_case(self):
        assert pascal_case("user_name") == "UserName"
        assert pascal_case("userName") == "UserName"
        assert pascal_case("User") == "User"

    def test_camel_case(self):
        assert camel_case("UserName") == "userName"
        assert camel_case("user_name") == "userName"

    def test_constant_case(self):
        assert constant_case("userName") == "USER_NAME"


class TestNodeName:
    """Tests for reading names off nodes."""

    def test_string_passes_through(self):
        assert node_name("User") == "User"

    def test_definition_node(self):
        node = parse("type User { id: ID }").definitions[0]
        assert node_name(node) == "User"

    def test_node_without_name(self):
        document = parse("type User { id: ID }")
        with pytest.raises(TypeError):
            node_name(document)


class TestConvertFactory:
    """Tests for building converters."""

    def test_keep_is_default(self):
        convert = convert_factory()
        assert convert("user_name") == "user_name"

    def test_prefix_and_suffix(self):
        convert = convert_factory("keep")
        assert convert("User", prefix="I", suffix="Type") == "IUserType"

    def test_named_convention(self):
        assert convert_factory("pascalCase")("user_name") == "UserName"
        assert convert_factory("upperCase")("Color") == "COLOR"

    def test_change_case_all_spelling(self):
        assert convert_factory("change-case-all#camelCase")("UserName") == "userName"

    def test_callable_convention(self):
        convert = convert_factory(lambda name: name[::-1])
        assert convert("abc", prefix="_") == "_cba"

    def test_accepts_nodes(self):
        node = parse("type user_profile { id: ID }").definitions[0]
        assert convert_factory("pascalCase")(node) == "UserProfile"

    def test_unknown_convention(self):
        with pytest.raises(ConfigError, match="titleCase"):
            convert_factory("titleCase")
