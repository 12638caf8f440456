from __future__ import annotations

from decllang.cli import main

raise SystemExit(main())
