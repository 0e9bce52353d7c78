"""Tests for assembling the generated module."""

from gql_tsgen.core.config import PluginConfig
from gql_tsgen.core.naming import convert_factory
from gql_tsgen.core.parser import load_schema_from_source
from gql_tsgen.core.plugin import get_wrapper_definitions, plugin

SCHEMA_SDL = """
scalar DateTime
enum Color { RED }
interface Node { id: ID! }
type User implements Node { id: ID!, joined: DateTime, color: Color }
union Result = User
input UserInput { name: String }
type Query { user(id: ID!): User }
"""


class TestWrapperDefinitions:
    """Tests for the helper types."""

    def test_default_helpers(self):
        assert get_wrapper_definitions(PluginConfig()) == [
            "export type Maybe<T> = T | null;",
            "export type InputMaybe<T> = Maybe<T>;",
            "export type Exact<T extends { [key: string]: unknown }> = { [K in keyof T]: T[K] };",
            "export type MakeOptional<T, K extends keyof T> = "
            "Omit<T, K> & { [SubKey in K]?: Maybe<T[SubKey]> };",
            "export type MakeMaybe<T, K extends keyof T> = "
            "Omit<T, K> & { [SubKey in K]: Maybe<T[SubKey]> };",
        ]

    def test_custom_maybe_value(self):
        definitions = get_wrapper_definitions(PluginConfig(maybe_value="T | null | undefined"))
        assert definitions[0] == "export type Maybe<T> = T | null | undefined;"

    def test_field_wrappers(self):
        definitions = get_wrapper_definitions(
            PluginConfig(
                wrap_field_definitions=True,
                field_wrapper_value="T | Promise<T>",
                wrap_entire_field_definitions=True,
            )
        )
        assert definitions[-2:] == [
            "export type FieldWrapper<T> = T | Promise<T>;",
            "export type EntireFieldWrapper<T> = T;",
        ]

    def test_no_export(self):
        definitions = get_wrapper_definitions(PluginConfig(no_export=True))
        assert definitions[0] == "type Maybe<T> = T | null;"

    def test_only_enums(self):
        assert get_wrapper_definitions(PluginConfig(only_enums=True)) == []


class TestScalarsContainer:
    """Tests for the Scalars declaration."""

    def test_container(self, content):
        out = content(SCHEMA_SDL, scalars={"DateTime": "Date"})
        assert out.startswith(
            "/** All built-in and custom scalars, mapped to their actual values */\n"
            "export type Scalars = {\n"
            "  ID: string;\n"
            "  String: string;\n"
            "  Boolean: boolean;\n"
            "  Int: number;\n"
            "  Float: number;\n"
            "  DateTime: Date;\n"
            "};\n"
        )

    def test_scalar_description(self, content):
        out = content('"ISO-8601 timestamp"\nscalar DateTime')
        assert "  /** ISO-8601 timestamp */\n  DateTime: any;\n" in out

    def test_external_scalar(self, generate):
        output = generate(SCHEMA_SDL, scalars={"DateTime": "./scalars#DateTime"})
        assert "import { DateTime } from './scalars';" in output.prepend
        assert "  DateTime: DateTime;\n" in output.content


class TestAssembly:
    """Tests for the order and content of the output."""

    def test_definitions_in_source_order(self, content):
        out = content("type B { id: ID }\ntype A { id: ID }")
        assert out.index("export type B") < out.index("export type A")

    def test_sections_separated_by_blank_line(self, content):
        out = content("type A { id: ID }")
        assert "};\n\nexport type A = {" in out

    def test_prepend_order(self, generate):
        sdl = """
        directive @asMoney on INPUT_FIELD_DEFINITION
        scalar DateTime
        enum Color { RED }
        input Filter { total: String @asMoney }
        """
        output = generate(
            sdl,
            enumValues={"Color": "./enums#Color"},
            directiveArgumentAndInputFieldMappings={"asMoney": "./money#Money"},
            scalars={"DateTime": "./scalars#DateTime"},
        )
        assert output.prepend[:4] == [
            "import { Color } from './enums';",
            "import { Money } from './money';",
            "import { DateTime } from './scalars';",
            "export type Maybe<T> = T | null;",
        ]

    def test_directive_container(self, content):
        sdl = """
        "Parses as a number"
        directive @asNumber on INPUT_FIELD_DEFINITION
        input Filter { amount: String @asNumber }
        """
        out = content(sdl, directiveArgumentAndInputFieldMappings={"asNumber": "number"})
        assert (
            "// Type overrides using directives\n"
            "type DirectiveArgumentAndInputFieldMappings = {\n"
            "  /** Parses as a number */\n"
            "  asNumber: number;\n"
            "};\n"
        ) in out

    def test_no_directive_container_without_mappings(self, content):
        assert "DirectiveArgumentAndInputFieldMappings" not in content(SCHEMA_SDL)

    def test_extensions_merged(self, content):
        out = content("type User { id: ID! }\nextend type User { name: String }")
        assert out.count("export type User") == 1
        assert "  id: Scalars['ID'];\n  name?: Maybe<Scalars['String']>;\n" in out

    def test_introspection_definitions_appended(self):
        loaded = load_schema_from_source(SCHEMA_SDL)
        output = plugin(
            loaded.schema,
            document=loaded.ast,
            introspection_definitions=["export type __Extra = string;\n"],
        )
        assert output.content.endswith("\nexport type __Extra = string;\n")

    def test_custom_converter(self):
        loaded = load_schema_from_source("type user_profile { id: ID }")
        output = plugin(
            loaded.schema, document=loaded.ast, convert=convert_factory("pascalCase")
        )
        assert "export type UserProfile = {" in output.content

    def test_document_built_from_schema(self):
        loaded = load_schema_from_source(SCHEMA_SDL)
        output = plugin(loaded.schema)
        assert "export type User = Node & {" in output.content

    def test_deterministic(self, generate):
        assert generate(SCHEMA_SDL) == generate(SCHEMA_SDL)


class TestOutputFilters:
    """Tests for onlyEnums and onlyOperationTypes."""

    def test_only_enums(self, generate):
        output = generate(SCHEMA_SDL, onlyEnums=True)
        assert "export enum Color {" in output.content
        for name in ("Node", "User", "Result", "UserInput", "Query", "QueryuserArgs"):
            assert f" {name} " not in output.content
        assert output.prepend == []

    def test_only_operation_types(self, content):
        out = content(SCHEMA_SDL, onlyOperationTypes=True)
        assert "export enum Color {" in out
        assert "export type UserInput = {" in out
        assert "QueryuserArgs" not in out
        assert "export type User " not in out
        assert "export interface Node" not in out
        assert "export type Result" not in out
