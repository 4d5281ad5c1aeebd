#!/usr/bin/env python3
from __future__ import annotations

from beetables.ui.grid_textual import run_grid_demo


def main() -> int:
    model = run_grid_demo()
    for target in model.targets():
        print(f"{target}: {model.text_for(target)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
