from __future__ import annotations

from .init_main import main

if __name__ == "__main__":
    raise SystemExit(main())
