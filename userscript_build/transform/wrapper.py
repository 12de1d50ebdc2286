"""Wraps transformed module code in an IIFE that publishes `exports`."""

import re

DEFAULT_GLOBAL_NAME = "_spitroast"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_TEMPLATE = """(function() {{
  const exports = {{}};

{source}

  window.{global_name} = exports;
}})();"""


def is_valid_global_name(name: str) -> bool:
    return bool(_IDENTIFIER.match(name))


def wrap_module(source: str, global_name: str = DEFAULT_GLOBAL_NAME) -> str:
    """Isolate source in a closure and assign its exports to window.<global_name>.

    Re-running the result overwrites the global property; nothing is merged.
    """
    if not is_valid_global_name(global_name):
        raise ValueError(f"Invalid global name: {global_name!r}")
    return _TEMPLATE.format(source=source, global_name=global_name)
