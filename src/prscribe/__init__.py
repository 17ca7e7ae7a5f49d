"""prscribe - pull-request descriptions synthesized from branch history."""

__version__ = "0.1.0"
