"""Common literal values used across learning_hub.

These constants keep ids, filenames and option values centralized so the
renderer, config loader, templates and tests can import the same values
without drifting. Intended for internal use within the learning_hub package.

Examples
--------
>>> from learning_hub import _constants
>>> _constants.MODULE_ID_TEMPLATE.format(index=0)
'module-0'
>>> "per_run" in _constants.LIST_WRAPPING_MODES
True
"""

import typing as typ

ListWrapping = typ.Literal["document", "per_run"]

MODULE_ID_TEMPLATE = "module-{index}"
LIST_WRAPPING_MODES: tuple[str, ...] = ("document", "per_run")
HUB_TEMPLATE_NAME = "learning_hub.jinja"
