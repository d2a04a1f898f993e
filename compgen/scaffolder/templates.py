"""Jinja2 template rendering for component scaffolding.

Provides the TemplateRenderer class which renders template text (file
contents and path strings alike) against a flat context mapping.  Templates
are restricted to plain interpolation: ``{{ key }}`` optionally followed by
one or more of the registered case filters (``{{ key | kebab_case }}``).
Statements, literals, attribute access, calls and arithmetic are rejected
before rendering, so a template can never evaluate arbitrary expressions.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError, nodes

from .errors import RenderError


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def _camel_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = _pascal_case_filter(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def _snake_case_filter(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def _kebab_case_filter(value: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    return _snake_case_filter(value).replace("_", "-")


FILTERS = {
    "pascal_case": _pascal_case_filter,
    "camel_case": _camel_case_filter,
    "snake_case": _snake_case_filter,
    "kebab_case": _kebab_case_filter,
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------

# Node types a template may contain.  Anything else is an expression or
# statement outside the interpolation grammar.
_ALLOWED_NODES = (nodes.Output, nodes.TemplateData, nodes.Name, nodes.Filter)


class TemplateRenderer:
    """Renders interpolation-only Jinja2 templates.

    Unknown keys raise instead of rendering as an empty string
    (``StrictUndefined``).  Every failure is reported as a
    :class:`~compgen.scaffolder.errors.RenderError` naming the template
    source, so the orchestrator can abort the run with a useful message.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.env.filters.update(FILTERS)
        # Jinja normalises every newline to newline_sequence; CRLF templates
        # render through this overlay so their line endings survive.
        self.crlf_env = self.env.overlay(newline_sequence="\r\n")

    def render_string(
        self,
        template_string: str,
        context: Mapping[str, Any],
        *,
        source: str = "<string>",
    ) -> str:
        """Render an inline template string with the provided context.

        Args:
            template_string: Text containing zero or more placeholders.
            context: Flat mapping of placeholder key to value.
            source: Label used in error messages (usually the template path).

        Returns:
            The rendered text.

        Raises:
            RenderError: If the text is not valid template syntax, uses a
                construct other than interpolation, or references a key
                missing from *context*.
        """
        env = self.crlf_env if "\r\n" in template_string else self.env
        try:
            tree = env.parse(template_string)
        except TemplateError as exc:
            raise RenderError(source, exc.message or str(exc)) from exc

        self._check_grammar(tree, source)

        try:
            return env.from_string(template_string).render(**context)
        except TemplateError as exc:
            raise RenderError(source, exc.message or str(exc)) from exc

    def _check_grammar(self, tree: nodes.Template, source: str) -> None:
        for node in tree.find_all(nodes.Node):
            if not isinstance(node, _ALLOWED_NODES):
                raise RenderError(
                    source,
                    f"unsupported template construct '{type(node).__name__}' "
                    "(only {{ name }} interpolation is allowed)",
                )
            if isinstance(node, nodes.Name) and node.ctx != "load":
                raise RenderError(source, f"cannot assign to '{node.name}'")
            if isinstance(node, nodes.Filter):
                if node.name not in FILTERS:
                    raise RenderError(source, f"unknown filter '{node.name}'")
                if node.args or node.kwargs or node.dyn_args or node.dyn_kwargs:
                    raise RenderError(source, f"filter '{node.name}' takes no arguments")
