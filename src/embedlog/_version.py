"""
Version information for embedlog.

__version__ is the human-readable release string (0.1.0-alpha);
get_pip_version() gives the PEP 440 form setuptools expects (0.1.0a0).
"""

MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta" or "rcN"

__app_name__ = "embedlog"
__version__ = f"{MAJOR}.{MINOR}.{PATCH}" + (f"-{PHASE}" if PHASE else "")

_PEP440_PHASES = {"alpha": "a0", "beta": "b0"}


def get_pip_version():
    """Return the PEP 440 spelling of __version__ (no hyphens)."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base += _PEP440_PHASES.get(PHASE, PHASE)
    return base
