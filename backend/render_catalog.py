"""
Regenerate the pattern document from the live samples
Run with: python render_catalog.py [output_path]
"""

import sys

from pattern_atlas.config import configure_logging
from pattern_atlas.renderer import write_catalog


def main(argv):
    configure_logging()
    target = argv[1] if len(argv) > 1 else "PATTERNS.md"
    path = write_catalog(target)
    print(f"Catalog written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
