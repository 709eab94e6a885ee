"""Run the green eggs stemming example.

Tokenizes and stems the lines in lines.csv with recipes/stem_text.yml and
prints the stemmed token lists.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from textprep import run_recipe_from_yaml
from textprep.core.logging import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the green eggs recipe")
    parser.add_argument(
        "--language",
        default="porter",
        help="Snowball language passed to the stemmer",
    )
    args = parser.parse_args()

    configure_logging(level="INFO")
    base_dir = Path(__file__).parent
    baked = run_recipe_from_yaml(
        str(base_dir / "recipes" / "stem_text.yml"),
        base_dir / "lines.csv",
        cli_vars={"language": args.language},
    )
    for tokens in baked.column("text"):
        print(tokens)


if __name__ == "__main__":
    main()
