"""Logger object shared by all the modules of PyCpar."""

import logging

__all__ = ("log",)

log = logging.getLogger("pycpar")
