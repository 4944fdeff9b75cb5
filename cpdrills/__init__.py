"""Solutions to short competitive-programming drills, with a command-line runner."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "sequences", "strings", "cli"]