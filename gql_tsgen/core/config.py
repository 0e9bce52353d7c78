"""Plugin configuration.

Options are accepted in snake_case or in the camelCase spelling used by
graphql-codegen config files. Options that may be given in more than one
shape (``avoidOptionals`` is either a flag or a per-kind object) are
normalized here, so the rest of the package only sees concrete fields.

Example:
    config = PluginConfig.coerce({"immutableTypes": True, "avoidOptionals": True})
    config.avoid_optionals.field  # True
"""

import json
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import ConfigError


class AvoidOptionals(BaseModel):
    """Which member kinds drop the ``?`` optional sign."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True
    )

    field: bool = False
    input_value: bool = False
    default_value: bool = False


class PluginConfig(BaseModel):
    """Options recognized by the TypeScript schema plugin."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True
    )

    # Scalars
    scalars: dict[str, str] = {}
    default_scalar_type: str = "any"
    strict_scalars: bool = False

    # Enums
    enum_values: str | dict[str, str | dict[str, str | int]] | None = None
    ignore_enum_values_from_schema: bool = False
    enums_as_types: bool = False
    enum_prefix: bool = True
    enum_suffix: bool = True

    # Naming
    naming_convention: str = "keep"
    types_prefix: str = ""
    types_suffix: str = ""
    add_underscore_to_args_type: bool = False

    # Members
    immutable_types: bool = False
    non_optional_typename: bool = False
    skip_typename: bool = False
    avoid_optionals: AvoidOptionals = AvoidOptionals()
    wrap_field_definitions: bool = False
    field_wrapper_value: str = "T"
    wrap_entire_field_definitions: bool = False
    entire_field_wrapper_value: str = "T"
    future_proof_unions: bool = False

    # Output
    no_export: bool = False
    only_enums: bool = False
    only_operation_types: bool = False
    use_type_imports: bool = False
    maybe_value: str = "T | null"
    input_maybe_value: str = "Maybe<T>"

    # Directive driven overrides
    directive_argument_and_input_field_mappings: dict[str, str] = {}
    directive_argument_and_input_field_mapping_type_suffix: str | None = None

    @field_validator("avoid_optionals", mode="before")
    @classmethod
    def _normalize_avoid_optionals(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return AvoidOptionals(field=value, input_value=value, default_value=value)
        if value is None:
            return AvoidOptionals()
        return value

    @classmethod
    def coerce(cls, config: "PluginConfig | Mapping[str, Any] | None") -> "PluginConfig":
        """Return a PluginConfig from a model, a plain mapping, or None."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        try:
            return cls.model_validate(dict(config))
        except ValidationError as e:
            raise ConfigError(f"Invalid plugin configuration:\n{e}") from e


def load_config(path: str | Path) -> PluginConfig:
    """Load a PluginConfig from a JSON file."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {config_path} is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")
    return PluginConfig.coerce(raw)
