"""Entry point for sending a Lark webhook notification."""

from __future__ import annotations

from lark_notifier.cli import main


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    main()
