"""Tests for generation hooks."""

import pytest
from graphql import DirectiveDefinitionNode, parse

from gql_tsgen.core.hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)


@pytest.fixture
def sample_document():
    """Create a sample schema document for testing."""
    return parse(
        """
        directive @_internal on FIELD_DEFINITION
        enum Status { ACTIVE }
        enum _Internal { A }
        type User { id: ID }
        type _Meta { id: ID }
        type Product { id: ID }
        input CreateUserInput { name: String }
        input _DebugInput { flag: Boolean }
        """
    )


def _names(document):
    return [
        definition.name.value
        for definition in document.definitions
        if not isinstance(definition, DirectiveDefinitionNode)
    ]


class TestAddHeaderHook:
    """Tests for AddHeaderHook."""

    def test_adds_header(self):
        hook = AddHeaderHook("// Auto-generated")
        result = hook.post_generate("types.ts", "export type A = string;\n")
        assert result.startswith("// Auto-generated\n\n")

    def test_preserves_content(self):
        hook = AddHeaderHook("// Header")
        content = "export type A = string;\n"
        result = hook.post_generate("types.ts", content)
        assert content in result

    def test_handles_header_with_newline(self):
        hook = AddHeaderHook("// Header\n")
        result = hook.post_generate("types.ts", "code")
        # Should not double-up newlines
        assert result == "// Header\n\ncode"


class TestFilterTypesHook:
    """Tests for FilterTypesHook."""

    def test_exclude_prefix(self, sample_document):
        hook = FilterTypesHook(exclude_prefix="_")
        names = _names(hook.pre_generate(sample_document))
        assert names == ["Status", "User", "Product", "CreateUserInput"]

    def test_exclude_suffix(self, sample_document):
        hook = FilterTypesHook(exclude_suffix="Input")
        names = _names(hook.pre_generate(sample_document))
        assert "CreateUserInput" not in names
        assert "_DebugInput" not in names
        assert "User" in names

    def test_include_prefix(self, sample_document):
        hook = FilterTypesHook(include_prefix="Create")
        assert _names(hook.pre_generate(sample_document)) == ["CreateUserInput"]

    def test_include_suffix(self, sample_document):
        hook = FilterTypesHook(include_suffix="Input")
        assert _names(hook.pre_generate(sample_document)) == ["CreateUserInput", "_DebugInput"]

    def test_keeps_directive_definitions(self, sample_document):
        result = FilterTypesHook(exclude_prefix="_").pre_generate(sample_document)
        assert isinstance(result.definitions[0], DirectiveDefinitionNode)

    def test_does_not_modify_original(self, sample_document):
        count = len(sample_document.definitions)
        FilterTypesHook(exclude_prefix="_").pre_generate(sample_document)
        assert len(sample_document.definitions) == count


class TestHookRunner:
    """Tests for HookRunner."""

    def test_runs_pre_hooks_in_order(self, sample_document):
        runner = HookRunner()
        runner.add_pre_hook(FilterTypesHook(exclude_prefix="_"))
        runner.add_pre_hook(FilterTypesHook(exclude_suffix="Input"))
        assert _names(runner.run_pre_hooks(sample_document)) == ["Status", "User", "Product"]

    def test_runs_post_hooks_in_order(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("// Second"))
        runner.add_post_hook(AddHeaderHook("// First"))
        result = runner.run_post_hooks("types.ts", "code")
        assert result == "// First\n\n// Second\n\ncode"

    def test_no_hooks(self, sample_document):
        runner = HookRunner()
        assert runner.run_pre_hooks(sample_document) is sample_document
        assert runner.run_post_hooks("types.ts", "code") == "code"


class TestHookProtocols:
    """Tests for hook protocol conformance."""

    def test_builtin_hooks_match_protocols(self):
        assert isinstance(FilterTypesHook(), PreGenerateHook)
        assert isinstance(AddHeaderHook("x"), PostGenerateHook)

    def test_custom_post_hook(self):
        class Uppercase:
            def post_generate(self, filename, content):
                return content.upper()

        runner = HookRunner()
        runner.add_post_hook(Uppercase())
        assert isinstance(Uppercase(), PostGenerateHook)
        assert runner.run_post_hooks("types.ts", "abc") == "ABC"
