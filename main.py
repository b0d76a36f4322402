"""toml-describe: compiler capability checks for Cargo builds.

Run from a build script (or by hand) to turn the version requirements in
Cargo.toml into cargo:rustc-cfg directives.

Usage:
    python main.py check --target x86_64-unknown-linux-gnu
    python main.py probe
    python main.py list --manifest-dir path/to/crate
"""

import sys
from pathlib import Path

# Make the package importable when run from a checkout
sys.path.insert(0, str(Path(__file__).parent))

from toml_describe.cli.cli import cli


def main():
    """Main entry point."""
    cli(prog_name="toml-describe")


if __name__ == "__main__":
    main()
