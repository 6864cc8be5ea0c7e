"""Entry point for the tipster Textual app."""

from __future__ import annotations

from tipster.tipster_app import TipsterApp


def main() -> None:
    TipsterApp().run()


if __name__ == "__main__":
    main()
