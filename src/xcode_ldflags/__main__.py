"""
`python -m xcode_ldflags` entrypoint.

This is mainly for convenience; the installed console script `xcode-ldflags` calls
the same `xcode_ldflags.cli:main`.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
