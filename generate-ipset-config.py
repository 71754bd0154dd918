# ./generate-ipset-config.py
#!/usr/bin/env python3

from __future__ import annotations

import sys
from pathlib import Path

# Allow imports from the repo checkout even when executed from elsewhere
sys.path.insert(0, str(Path(__file__).resolve().parent))

from ipsetgen.cli import main  # noqa: E402

if __name__ == "__main__":
    main()
