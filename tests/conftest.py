"""Shared fixtures for the gql-tsgen test suite."""

import pytest

from gql_tsgen.core.parser import load_schema_from_source
from gql_tsgen.core.plugin import plugin


@pytest.fixture
def generate():
    """Run the plugin on SDL text with keyword config options."""

    def _generate(sdl: str, **config):
        loaded = load_schema_from_source(sdl)
        return plugin(loaded.schema, config, document=loaded.ast)

    return _generate


@pytest.fixture
def content(generate):
    """Only the module body for SDL text."""

    def _content(sdl: str, **config) -> str:
        return generate(sdl, **config).content

    return _content
