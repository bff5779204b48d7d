"""Version information for PyCpar."""

__version_info__ = (0, 2, 0)
__version__ = ".".join("{0}".format(x) for x in __version_info__)
__author__ = "Matt"
__email__ = "m@cdbz.ca"
