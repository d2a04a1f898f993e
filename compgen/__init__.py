"""compgen -- nested React component scaffolding.

Quick usage::

    from compgen import ComponentGenerator, Config

    generator = ComponentGenerator(Config(output_dir="./src"))
    result = await generator.generate(["Header", "Logo"])
"""

from compgen.config import Config
from compgen.scaffolder import ComponentGenerator, GenerationResult

__all__ = [
    "ComponentGenerator",
    "Config",
    "GenerationResult",
]

__version__ = "0.1.0"
