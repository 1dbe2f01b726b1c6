"""Send signed, keyword-highlighted notifications to a Lark/Feishu bot webhook."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "signing",
    "message",
    "notifier",
    "cli",
]
