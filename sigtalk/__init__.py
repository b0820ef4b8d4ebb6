"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2.

Also holds the printf, number, string and character helpers it uses.
"""

__version__ = "0.1.0"

__all__ = ["ctype", "numbers", "strings", "printf", "protocol", "server", "client"]