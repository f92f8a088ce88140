"""Logger namespacing for gridtables.

Every module logs under the ``gridtables`` hierarchy, so one handler on
``logging.getLogger("gridtables")`` sees the parser's and document scanner's
DEBUG messages about rejected table candidates. Nothing here installs
handlers or sets levels; that is left to the application.

Example:
    >>> import logging
    >>> logging.getLogger("gridtables").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``gridtables.`` namespace.

    Names already inside the namespace are used as is.

    Example:
        >>> get_logger("gridtables.parser").name
        'gridtables.parser'
        >>> get_logger("mymodule").name
        'gridtables.mymodule'
    """
    if not (name == "gridtables" or name.startswith("gridtables.")):
        name = f"gridtables.{name}"
    return logging.getLogger(name)
