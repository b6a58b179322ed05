from __future__ import annotations

from hrmachine.main import main

raise SystemExit(main())
