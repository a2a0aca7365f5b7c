from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from grid_rover.cli import main


if __name__ == "__main__":
    sys.exit(main())
