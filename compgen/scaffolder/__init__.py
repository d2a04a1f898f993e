"""compgen scaffolder -- renders the component template tree.

Discovers the files under a template root, renders their ``{{ ... }}``
placeholders (in contents and in file names), nests them under
``components/<name>/`` for each component name, and writes them without ever
overwriting an existing file.

Quick usage::

    from compgen.scaffolder import ComponentGenerator

    generator = ComponentGenerator()
    result = await generator.generate(["Foo", "Bar"])
    print(result.summary())
"""

from compgen.scaffolder.errors import (
    ArgumentError,
    CollisionError,
    RenderError,
    ScaffoldError,
    ScaffoldIOError,
)
from compgen.scaffolder.generator import (
    ComponentGenerator,
    GenerationResult,
    GeneratorState,
    TemplateContext,
    build_context,
)
from compgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArgumentError",
    "CollisionError",
    "ComponentGenerator",
    "GenerationResult",
    "GeneratorState",
    "RenderError",
    "ScaffoldError",
    "ScaffoldIOError",
    "TemplateContext",
    "TemplateRenderer",
    "build_context",
]
