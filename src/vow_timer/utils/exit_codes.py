"""
Exit codes for Vow Timer.

A missing connection string and an unreachable store are both fatal at
startup and share the general error code.
"""

# Success
SUCCESS = 0

# General error (missing configuration, store unreachable at startup)
ERROR_GENERAL = 1
