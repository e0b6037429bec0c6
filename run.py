#!/usr/bin/env python3
"""
Banking System Entry Point

Starts the interactive banking console.
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from banking_system.console import main


if __name__ == "__main__":
    print("🏦 Starting Banking System...")
    print("💰 All financial calculations use Decimal precision")
    print()

    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n👋 Shutting down Banking System...")
