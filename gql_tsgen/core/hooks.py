"""Generation hooks for customizing code generation.

Pre-generation hooks receive the schema document before it is folded and
may return a different one. Post-generation hooks transform the rendered
module before it is written.

Example usage:
    from gql_tsgen.core.hooks import HookRunner, FilterTypesHook, AddHeaderHook

    runner = HookRunner()
    runner.add_pre_hook(FilterTypesHook(exclude_prefix="Internal"))
    runner.add_post_hook(AddHeaderHook("/* eslint-disable */"))
"""

from typing import Protocol, runtime_checkable

from graphql import DocumentNode, TypeDefinitionNode


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks.

    Hooks must not modify the document they receive; they return a new one.

    Example:
        class DropUnions(PreGenerateHook):
            def pre_generate(self, document: DocumentNode) -> DocumentNode:
                return DocumentNode(definitions=tuple(
                    d for d in document.definitions
                    if not isinstance(d, UnionTypeDefinitionNode)
                ))
    """

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Called before the document is folded.

        Args:
            document: The schema document

        Returns:
            The document to generate from
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Example:
        class StripBlankLines(PostGenerateHook):
            def post_generate(self, filename: str, content: str) -> str:
                return "\\n".join(line for line in content.splitlines() if line)
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called with the rendered module before it is written.

        Args:
            filename: The name of the generated file (e.g., "types.ts")
            content: The generated code

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("// Auto-generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterTypesHook:
    """Built-in hook to drop type definitions by name prefix/suffix.

    Directive and schema definitions are always kept.

    Example:
        # Remove all types starting with an underscore
        hook = FilterTypesHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if a type should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, document: DocumentNode) -> DocumentNode:
        """Return a document without the filtered type definitions."""
        definitions = tuple(
            definition
            for definition in document.definitions
            if not isinstance(definition, TypeDefinitionNode)
            or self._should_include(definition.name.value)
        )
        return DocumentNode(definitions=definitions)


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, document: DocumentNode) -> DocumentNode:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            document = hook.pre_generate(document)
        return document

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
