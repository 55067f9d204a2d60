"""Safari履歴インポートCLI実行用エントリポイント

Usage:
    python -m src.history_import <safari.db> <chrome.db> [options]
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
