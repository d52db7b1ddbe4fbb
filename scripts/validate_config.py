"""
Check one or more journey configuration files.

Usage:
    python scripts/validate_config.py configs/default_journey.yaml [more.yaml ...]

Exits with status 1 if any file fails to load or has ERROR messages.
"""

import sys
from pathlib import Path

# Add src to path so we can import the lightspeed package
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from lightspeed.config import JourneyParameters, group_messages


def check_file(config_path: str) -> bool:
    """Print the report for one file. Returns False if it is unusable."""
    print(f"{config_path}")
    print("-" * 70)

    try:
        params = JourneyParameters.from_yaml(config_path)
    except (FileNotFoundError, ValueError, TypeError) as e:
        print(f"  [ERROR] {e}")
        print()
        return False

    grouped = group_messages(params.validate())
    for severity in ('ERROR', 'WARNING', 'INFO'):
        for message in grouped[severity]:
            print(f"  {message}")

    if grouped['ERROR']:
        print(f"  -> {len(grouped['ERROR'])} error(s); do not use this file")
    else:
        for line in repr(params).splitlines():
            print(f"  {line}")
        print("  -> OK" if not grouped['WARNING'] else "  -> usable, see warnings")
    print()
    return not grouped['ERROR']


def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/validate_config.py <config_file.yaml> [...]")
        sys.exit(1)

    results = [check_file(path) for path in sys.argv[1:]]
    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()
