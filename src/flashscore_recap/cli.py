"""Console-script wrapper for the recap generator."""

from __future__ import annotations

from .__main__ import main as _run_main


def main() -> int:
    """Entry point used by ``flashscore-recap`` and ``python -m flashscore_recap.cli``."""

    return _run_main()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    raise SystemExit(main())
