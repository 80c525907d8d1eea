"""Pre-approved (DLT) SMS templates.

Gateways reject messages that differ from the registered template by a
single byte, so messages are only ever built through ``render_template``
and can be checked with ``matches_template``.
"""

import re

PLACEHOLDER = "{#var#}"

REGISTRATION_TEMPLATE = (
    "Dear Member, your reg no:{#var#}.You are registered for FESTGO EVENTS "
    "-RBG Palnadu Chapter Launch 21st Sep, 9:30AM @ SNR Convention, NRT. "
    'Lunch follows."RBG TEAM palnadu"'
)


class TemplateError(ValueError):
    """Raised when values don't fit the template placeholders."""


def render_template(template: str, *values: str) -> str:
    """Substitute ``values`` into the template placeholders, in order."""
    parts = template.split(PLACEHOLDER)
    if len(parts) - 1 != len(values):
        raise TemplateError(
            f"template expects {len(parts) - 1} values, got {len(values)}"
        )

    out = [parts[0]]
    for value, tail in zip(values, parts[1:]):
        out.append(str(value))
        out.append(tail)
    return "".join(out)


def matches_template(template: str, message: str) -> bool:
    """Check ``message`` against ``template`` outside placeholder positions."""
    pattern = "(.+?)".join(re.escape(p) for p in template.split(PLACEHOLDER))
    return re.fullmatch(pattern, message, flags=re.DOTALL) is not None


def registration_message(reg_no: str) -> str:
    return render_template(REGISTRATION_TEMPLATE, reg_no)
