"""Path template compilation.

Route paths are written with named placeholders::

    /products/{id}/categories/{cat}

Each placeholder captures one or more ASCII alphanumerics. Everything
else in the template is literal. The compiled pattern is anchored to
the whole path and its groups are unnamed, so captures come back in
left-to-right placeholder order.
"""

import re
from dataclasses import dataclass

from minimvc.errors import RouteError

# What a single placeholder matches
PLACEHOLDER_PATTERN = r"[0-9a-zA-Z]+"

_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")


@dataclass(frozen=True, slots=True)
class CompiledPath:
    """A path template compiled to an anchored regex."""

    template: str
    pattern: re.Pattern[str]
    param_names: tuple[str, ...]


def _fail(template: str, reason: str) -> RouteError:
    return RouteError(f"Invalid route path {template!r}: {reason}")


def _check_literal(template: str, literal: str) -> None:
    """Reject stray syntax in the literal text between placeholders."""
    if "{" in literal or "}" in literal:
        raise _fail(template, "unbalanced or nested braces.")
    if "(" in literal or ")" in literal:
        raise _fail(
            template,
            "raw regex groups are not supported. Use {name} placeholders instead, "
            "e.g. '/products/{id}'.",
        )
    if "<" in literal or ">" in literal:
        raise _fail(
            template,
            "minimvc uses {param} syntax for path parameters, not <param>.",
        )


def compile_path(template: str) -> CompiledPath:
    """Compile a ``{name}`` path template into an anchored pattern.

    Raises ``RouteError`` for anything that is not a well-formed template:
    missing leading slash, empty or non-identifier names, duplicate names,
    unbalanced braces, and raw regex or ``<param>`` syntax.
    """
    if not isinstance(template, str) or not template.startswith("/"):
        raise _fail(str(template), "path must start with '/'.")

    parts: list[str] = []
    names: list[str] = []
    pos = 0
    for m in _PLACEHOLDER.finditer(template):
        literal = template[pos : m.start()]
        _check_literal(template, literal)
        parts.append(re.escape(literal))

        name = m.group(1)
        if not name:
            raise _fail(template, "empty placeholder '{}'.")
        if not name.isidentifier():
            raise _fail(template, f"placeholder name {name!r} is not a valid identifier.")
        if name in names:
            raise _fail(template, f"placeholder {{{name}}} is used more than once.")
        names.append(name)
        parts.append(f"({PLACEHOLDER_PATTERN})")
        pos = m.end()

    tail = template[pos:]
    _check_literal(template, tail)
    parts.append(re.escape(tail))

    return CompiledPath(
        template=template,
        pattern=re.compile("".join(parts)),
        param_names=tuple(names),
    )

