"""Supervisor command-line program.

The release version and commit reported by ``supervisor version`` are stamped
at build time; see supervisor.core.build_info.
"""

__version__ = "0.1.0"
