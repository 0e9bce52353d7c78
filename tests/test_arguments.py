"""Tests for field argument types."""

QUERY_SDL = """
type User { id: ID! }
type Query {
  user(id: ID!, first: Int = 10, limit: Int! = 5, filter: String): User
  me: User
}
"""


class TestArgumentsTypes:
    """Tests for the generated <Type><field>Args declarations."""

    def test_arguments_type(self, content):
        out = content(QUERY_SDL)
        assert (
            "export type QueryuserArgs = {\n"
            "  id: Scalars['ID'];\n"
            "  first?: Maybe<Scalars['Int']>;\n"
            "  limit?: Scalars['Int'];\n"
            "  filter?: Maybe<Scalars['String']>;\n"
            "};\n"
        ) in out

    def test_only_fields_with_arguments(self, content):
        out = content(QUERY_SDL)
        assert "QuerymeArgs" not in out

    def test_follows_parent_declaration(self, content):
        out = content(QUERY_SDL)
        parent = out.index("export type Query = {")
        assert out.index("export type QueryuserArgs") > parent

    def test_underscore(self, content):
        out = content(QUERY_SDL, addUnderscoreToArgsType=True)
        assert "export type Query_userArgs = {" in out

    def test_naming_convention(self, content):
        out = content(QUERY_SDL, namingConvention="change-case-all#pascalCase")
        assert "export type QueryUserArgs = {" in out

    def test_types_prefix_applied_once(self, content):
        out = content(QUERY_SDL, typesPrefix="I")
        assert "export type IQueryuserArgs = {" in out

    def test_avoid_optionals_input_value(self, content):
        out = content(QUERY_SDL, avoidOptionals={"inputValue": True})
        assert "  first: Maybe<Scalars['Int']>;\n" in out
        assert "  limit: Scalars['Int'];\n" in out

    def test_avoid_optionals_default_value(self, content):
        out = content(QUERY_SDL, avoidOptionals={"defaultValue": True})
        assert "  first?: Maybe<Scalars['Int']>;\n" in out
        assert "  limit: Scalars['Int'];\n" in out

    def test_interface_arguments(self, content):
        out = content("interface Node { children(first: Int): [Node] }")
        assert "export type NodechildrenArgs = {\n  first?: Maybe<Scalars['Int']>;\n};\n" in out

    def test_immutable(self, content):
        out = content(QUERY_SDL, immutableTypes=True)
        assert "  readonly id: Scalars['ID'];\n" in out

    def test_not_generated_for_only_enums(self, content):
        assert "Args" not in content(QUERY_SDL, onlyEnums=True)
