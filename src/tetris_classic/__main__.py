from __future__ import annotations

from tetris_classic.apps.play.entrypoint import main

raise SystemExit(main())
