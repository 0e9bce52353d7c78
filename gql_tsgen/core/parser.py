"""GraphQL schema loading using graphql-core.

Reads .graphql/.graphqls files into one document, builds the schema, and
prepares the document the fold engine walks.
"""

import logging
import os
from dataclasses import dataclass

from graphql import (
    DirectiveDefinitionNode,
    DocumentNode,
    GraphQLSchema,
    SchemaDefinitionNode,
    TypeDefinitionNode,
    build_ast_schema,
    concat_ast,
    is_specified_scalar_type,
    parse,
    print_type,
    specified_directives,
)

from .errors import SchemaValidationError

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls")

ONE_OF_DIRECTIVE_SDL = "directive @oneOf on INPUT_OBJECT"


@dataclass
class LoadedSchema:
    """A built schema together with the document it was built from."""
    schema: GraphQLSchema
    document: DocumentNode

    @property
    def ast(self) -> DocumentNode:
        """The document to generate from, in source order with extensions merged."""
        return transform_schema_ast(self.schema, self.document)


def _with_one_of_directive(document: DocumentNode) -> DocumentNode:
    """Declare ``@oneOf`` when neither graphql-core nor the document does."""
    if any(directive.name == "oneOf" for directive in specified_directives):
        return document
    declared = any(
        isinstance(definition, DirectiveDefinitionNode) and definition.name.value == "oneOf"
        for definition in document.definitions
    )
    if declared:
        return document
    return concat_ast([parse(ONE_OF_DIRECTIVE_SDL), document])


def load_schema_from_document(document: DocumentNode) -> LoadedSchema:
    document = _with_one_of_directive(document)
    try:
        schema = build_ast_schema(document)
    except TypeError as e:
        # graphql-core reports SDL validation errors as TypeError
        raise SchemaValidationError(f"Invalid schema:\n{e}") from e
    return LoadedSchema(schema=schema, document=document)


def load_schema_from_source(source: str) -> LoadedSchema:
    """Parse SDL text and build the schema."""
    return load_schema_from_document(parse(source))


class SchemaParser:
    """Loads GraphQL schema files from a file or a directory."""

    def __init__(self, schema_path: str):
        self.schema_path = schema_path

    def parse_all(self) -> LoadedSchema:
        """Parse all schema files and build the schema."""
        documents = []
        for file_path in self._collect_schema_files():
            with open(file_path, encoding="utf-8") as f:
                content = f.read()
            try:
                documents.append(parse(content))
            except Exception:
                logger.error("Error parsing %s", os.path.basename(file_path))
                raise
            logger.debug("Parsed %s", file_path)

        if not documents:
            raise FileNotFoundError(f"No GraphQL schema files found in {self.schema_path}")

        return load_schema_from_document(concat_ast(documents))

    def _collect_schema_files(self) -> list[str]:
        """Collect all schema files from the path."""
        files = []
        if os.path.isfile(self.schema_path):
            if self.schema_path.endswith(SCHEMA_EXTENSIONS):
                files.append(self.schema_path)
        else:
            for root, _, filenames in os.walk(self.schema_path):
                for filename in filenames:
                    if filename.endswith(SCHEMA_EXTENSIONS):
                        files.append(os.path.join(root, filename))
        return sorted(files)


def merge_extensions(node: TypeDefinitionNode, extensions) -> TypeDefinitionNode:
    """Return a new definition node carrying the members of its extensions.

    Fields, interfaces, union members and directives of every extension are
    appended in order. The original nodes are left untouched.
    """
    if not extensions:
        return node

    values = {key: getattr(node, key) for key in node.keys if key != "loc"}
    for extension in extensions:
        for key in ("fields", "interfaces", "types", "values", "directives"):
            extra = getattr(extension, key, None)
            if extra and key in values:
                values[key] = tuple(values[key] or ()) + tuple(extra)
    return type(node)(**values)


def transform_schema_ast(schema: GraphQLSchema, document: DocumentNode | None = None) -> DocumentNode:
    """Build the document the fold engine walks.

    Type definitions appear once each, in the order of the source document
    when one is given (schema order otherwise), with extensions merged into
    their base definition. Types without an AST node, such as those of a
    schema built from introspection, are recovered by printing them.
    """
    definitions = []
    seen: set[str] = set()

    if document is not None:
        for definition in document.definitions:
            if isinstance(definition, (DirectiveDefinitionNode, SchemaDefinitionNode)):
                definitions.append(definition)
            elif isinstance(definition, TypeDefinitionNode):
                name = definition.name.value
                named_type = schema.get_type(name)
                if name in seen or named_type is None:
                    continue
                seen.add(name)
                definitions.append(merge_extensions(definition, named_type.extension_ast_nodes))

    for name, named_type in schema.type_map.items():
        if name in seen or name.startswith("__") or is_specified_scalar_type(named_type):
            continue
        seen.add(name)
        node = named_type.ast_node
        if node is None:
            node = parse(print_type(named_type)).definitions[0]
        definitions.append(merge_extensions(node, named_type.extension_ast_nodes))

    return DocumentNode(definitions=tuple(definitions))
