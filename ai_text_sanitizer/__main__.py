"""Module entrypoint for running the sanitizer as ``python -m ai_text_sanitizer``."""

from __future__ import annotations

from ai_text_sanitizer.cli import main


if __name__ == "__main__":
    main()
