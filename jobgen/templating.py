# jobgen/templating.py
"""
Substitution of derived values into directive and task line templates.

Templates use jinja2 syntax, e.g. ``--ranks {{ total_ranks }}``. Shell
expansions such as ``$VAR`` or ``${VAR}`` are left alone. A reference to an
unknown field is an error rather than an empty string.
"""

import logging
from typing import Any, Dict

from jinja2 import Environment, StrictUndefined, TemplateError

from .exceptions import TemplateSubstitutionError

log = logging.getLogger(__name__)

_env = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
    # `{#` stays free for bash length expansion, e.g. ${#FILES[@]}
    comment_start_string="{##",
    comment_end_string="##}",
)


def render_template(text: str, context: Dict[str, Any], segment: str) -> str:
    """
    Render one template against the given fields.

    Args:
        text: Template text
        context: Named fields available to the template
        segment: Which part of the script is rendered ('header' or 'task'),
            reported on failure

    Returns:
        Rendered text
    """
    # Plain text needs no parsing
    if '{{' not in text and '{%' not in text and '{##' not in text:
        return text

    log.debug("Rendering %s template: %s", segment, text)
    try:
        return _env.from_string(text).render(context)
    except TemplateError as e:
        raise TemplateSubstitutionError(segment, text, str(e)) from e
