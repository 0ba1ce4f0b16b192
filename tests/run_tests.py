"""Run the svgtree test suite.

Usage: ``python tests/run_tests.py [MODULE ...]`` where each MODULE is a test
module name such as ``test_geometry``; with no arguments every module runs.
"""
from __future__ import annotations

import sys
import unittest
from pathlib import Path
from typing import List, Optional

TESTS_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(TESTS_DIR.parent / "src"))
sys.path.insert(0, str(TESTS_DIR))


def _module_name(name: str) -> str:
    name = Path(name).name
    return name[:-3] if name.endswith(".py") else name


def main(argv: Optional[List[str]] = None) -> int:
    modules = sys.argv[1:] if argv is None else argv
    loader = unittest.defaultTestLoader
    if modules:
        suite = loader.loadTestsFromNames([_module_name(name) for name in modules])
    else:
        suite = loader.discover(start_dir=str(TESTS_DIR), pattern="test_*.py")
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    raise SystemExit(main())
