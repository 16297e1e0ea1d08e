#!/usr/bin/env python3
"""
Terminal front-end entrypoint - validates configuration and launches the demo screens.
"""

import argparse
import sys
from pathlib import Path

# Load environment variables from .env file first
import dotenv
dotenv.load_dotenv()

# Add project root to path for imports when run from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent))


def main(argv=None):
    """Parse arguments, check configuration and run the terminal app."""
    from remotetasks.core.config import VERSION, validate_config

    parser = argparse.ArgumentParser(description="Run the RemoteTasks demo screens in the terminal")
    parser.add_argument(
        "--screen",
        choices=["weather", "studyhive", "videos"],
        default="weather",
        help="Screen to open first (default: weather)"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    args = parser.parse_args(argv)

    issues = validate_config()
    if issues:
        print("❌ Configuration problems:")
        for issue in issues:
            print(f"   - {issue}")
        return 1

    try:
        from remotetasks.tui.main import main as tui_main
    except ImportError as e:
        print(f"❌ Failed to import terminal front-end: {e}")
        print("   Make sure textual is installed: pip install textual")
        return 1

    try:
        tui_main(start_screen=args.screen)
    except KeyboardInterrupt:
        print("\nℹ️  Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
