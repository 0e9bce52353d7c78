"""Core modules for GraphQL to TypeScript code generation."""

from .ancestors import AncestorChain, Frame, Scope
from .config import AvoidOptionals, PluginConfig, load_config
from .declaration import DeclarationBlock, transform_comment
from .errors import CodegenError, ConfigError, SchemaConstructionError, SchemaValidationError
from .fragments import MemberFragment
from .generator import CodeGenerator
from .hooks import (
    AddHeaderHook,
    FilterTypesHook,
    HookRunner,
    PostGenerateHook,
    PreGenerateHook,
)
from .mappers import ParsedMapper, parse_mapper
from .naming import convert_factory
from .nullability import TypeFragment, Wrapper
from .parser import LoadedSchema, SchemaParser, load_schema_from_source, transform_schema_ast
from .plugin import PluginOutput, plugin
from .resolver import TypeReferenceResolver
from .symbols import EnumValueMapping, SymbolTables
from .visitor import SchemaFolder

__all__ = [
    # Config
    "AvoidOptionals",
    "PluginConfig",
    "load_config",
    # Errors
    "CodegenError",
    "ConfigError",
    "SchemaConstructionError",
    "SchemaValidationError",
    # Hooks
    "PreGenerateHook",
    "PostGenerateHook",
    "AddHeaderHook",
    "FilterTypesHook",
    "HookRunner",
    # Parser
    "LoadedSchema",
    "SchemaParser",
    "load_schema_from_source",
    "transform_schema_ast",
    # Symbol tables
    "EnumValueMapping",
    "ParsedMapper",
    "SymbolTables",
    "parse_mapper",
    # Fold
    "AncestorChain",
    "DeclarationBlock",
    "Frame",
    "MemberFragment",
    "SchemaFolder",
    "Scope",
    "TypeFragment",
    "TypeReferenceResolver",
    "Wrapper",
    "convert_factory",
    "transform_comment",
    # Output
    "CodeGenerator",
    "PluginOutput",
    "plugin",
]
