#!/usr/bin/env python3
"""
Source-checkout entrypoint.

Allows running the patcher without installing it:
  python3 xcode_ldflags.py -p ios/Runner.xcodeproj
"""

import os
import sys

# Support running from a source checkout without installation by adding `src/`
# to sys.path.
_HERE = os.path.dirname(os.path.abspath(__file__))
_SRC = os.path.join(_HERE, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

# Make this module behave like a package shim when imported as `xcode_ldflags`.
# This avoids shadowing `src/xcode_ldflags/` during test/import usage.
__path__ = [os.path.join(_SRC, "xcode_ldflags")]


def main(argv: list[str] | None = None) -> int:
    from xcode_ldflags.cli import main as _main

    return _main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
