"""Main CLI entry point."""

import sys


def main() -> None:
    """Main CLI entry point."""
    try:
        from latin_transcode.cli.app import create_app
        app = create_app()
    except ImportError as exc:
        print(f"latin-transcode: {exc}", file=sys.stderr)
        sys.exit(1)
    app()


if __name__ == "__main__":
    main()
