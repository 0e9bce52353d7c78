"""Writes the generated TypeScript module.

Renders the plugin output through a Jinja2 template and applies the
generation hooks.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(loaded, config, "./types.ts", template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
import os
from pathlib import Path
from typing import Any, Mapping

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .config import PluginConfig
from .hooks import HookRunner
from .parser import LoadedSchema
from .plugin import PluginOutput, plugin

logger = logging.getLogger(__name__)

MODULE_TEMPLATE = "module.ts.j2"


class CodeGenerator:
    """Generates a TypeScript module from a loaded schema.

    Available templates to override:
        - module.ts.j2: receives ``prepend`` (list of statements) and
          ``content`` (the declarations)

    Example:
        generator = CodeGenerator(
            loaded=SchemaParser("./schema").parse_all(),
            config={"immutableTypes": True},
            output_path="./src/types.ts",
        )
        generator.generate()
    """

    def __init__(
        self,
        loaded: LoadedSchema,
        config: PluginConfig | Mapping[str, Any] | None,
        output_path: str,
        template_dir: str | None = None,
        hooks: HookRunner | None = None,
    ):
        """Initialize the code generator.

        Args:
            loaded: The schema and the document it was built from
            config: Plugin options
            output_path: File the module is written to
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
            hooks: Optional pre/post generation hooks
        """
        self.loaded = loaded
        self.config = PluginConfig.coerce(config)
        self.output_path = output_path
        self.template_dir = template_dir
        self.hooks = hooks or HookRunner()

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
        )

    def render(self) -> str:
        """Run the plugin and render the module text."""
        document = self.hooks.run_pre_hooks(self.loaded.ast)
        output: PluginOutput = plugin(self.loaded.schema, self.config, document=document)
        template = self.env.get_template(MODULE_TEMPLATE)
        content = template.render(prepend=output.prepend, content=output.content)
        return self.hooks.run_post_hooks(os.path.basename(self.output_path), content)

    def generate(self) -> str:
        """Render the module and write it to the output path."""
        content = self.render()
        directory = os.path.dirname(self.output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.output_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.debug("Wrote %d bytes to %s", len(content), self.output_path)
        return content
