"""Print CO2 footprint reports for the reference building, car and bicycle.

Equivalent to ``python -m carbon_footprint``; usable from a checkout without
installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

sys.path.insert(0, str(ROOT / "src"))

from carbon_footprint.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
