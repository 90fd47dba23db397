"""LSU Game Room RevOps activity service."""

__version__ = "0.1.0"
