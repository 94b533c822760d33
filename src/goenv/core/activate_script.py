"""The ``bin/activate`` script template and its renderer.

The script is written for bash and must be sourced, never executed: it
exports ``GOPATH``, ``PATH`` and ``PS1`` into the calling shell, keeps
the previous values under ``GOENV_OLD*`` names, and defines a
``deactivate`` function that restores them.

Placeholders use the ``{{.Name}}`` form.  Values are substituted
literally; paths containing spaces or quotes produce a broken script.
"""

from __future__ import annotations

import re

from goenv.core.models import ActivationParams
from goenv.exceptions import TemplateError

ACTIVATE_TEMPLATE: str = """
# This file must be used with "source activate" or ". activate"

if [[ -n "${GOENV+1}" ]]; then
	deactivate
fi

export GOENV={{.ProjectName}}
export GOENV_OLDPS1=$PS1
export GOENV_OLDGOPATH=$GOPATH
export GOENV_OLDPATH=$PATH

export GOPATH={{.GoPath}}
export PATH="$GOPATH/bin:$PATH"
export PS1="($(basename $GOPATH))$PS1"

mkdir -p $(dirname $GOPATH/src/{{.ImportPath}})
rm -f $GOPATH/src/{{.ImportPath}}
ln -s {{.ProjectPath}} $GOPATH/src/{{.ImportPath}}

deactivate() {
	export PS1=$GOENV_OLDPS1
	export GOPATH=$GOENV_OLDGOPATH
	export PATH=$GOENV_OLDPATH

	unset GOENV GOENV_OLDPS1 GOENV_OLDPATH GOENV_OLDGOPATH
	unset -f deactivate
}
"""

_PLACEHOLDER = re.compile(r"\{\{\s*\.(\w+)\s*\}\}")


def render_activate_script(
    params: ActivationParams,
    template: str = ACTIVATE_TEMPLATE,
) -> str:
    """Substitute *params* into *template* and return the script text.

    Raises
    ------
    TemplateError
        When the template names a field :class:`ActivationParams` does
        not have, or leaves a ``{{`` action unterminated.
    """
    fields = params.template_fields()

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        try:
            return fields[name]
        except KeyError:
            raise TemplateError(
                f"template: activate: can't evaluate field {name}",
            ) from None

    rendered_parts: list[str] = []
    position = 0
    for match in _PLACEHOLDER.finditer(template):
        literal = template[position:match.start()]
        _check_literal(literal)
        rendered_parts.append(literal)
        rendered_parts.append(_substitute(match))
        position = match.end()
    tail = template[position:]
    _check_literal(tail)
    rendered_parts.append(tail)
    return "".join(rendered_parts)


def _check_literal(text: str) -> None:
    # Values are inserted verbatim, so only template text is checked.
    if "{{" in text:
        raise TemplateError("template: activate: unclosed action")
