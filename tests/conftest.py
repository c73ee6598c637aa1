"""Add the repository root to sys.path so `import leasedeck` resolves without an install."""
import os
import sys

_root_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _root_dir not in sys.path:
    sys.path.insert(0, _root_dir)
