"""Generate a feature module from a YAML/JSON definition file."""
import argparse
import sys
from pathlib import Path
from pydantic import ValidationError
from app.builder.loader import load_feature_definition
from app.core.logging import configure_logging
from app.generators.feature_gen.generator import generate_feature_files
from app.generators.feature_gen.packager import PackagingError, download_feature_files
from app.generators.feature_gen.writer import write_files


def main():
    parser = argparse.ArgumentParser(description="Generate feature module files from a definition")
    parser.add_argument("definition", help="Path to a .yaml/.yml/.json feature definition")
    parser.add_argument(
        "--out",
        default="generated",
        help="Output directory (default: generated)",
    )
    parser.add_argument(
        "--zip",
        action="store_true",
        help="Write {name}-feature.zip into the output directory instead of a file tree",
    )
    args = parser.parse_args()
    configure_logging()

    try:
        definition = load_feature_definition(args.definition)
    except (OSError, ValueError, ValidationError) as e:
        print(f"❌ Invalid definition: {e}")
        sys.exit(1)

    config, fields, relations = definition.to_model()
    out_dir = Path(args.out)

    if args.zip:
        try:
            archive = download_feature_files(config, fields, relations, out_dir)
        except PackagingError as e:
            print(f"❌ Packaging failed: {e}")
            sys.exit(1)
        print(f"✅ Archive written: {archive}")
        return

    files = generate_feature_files(config, fields, relations)
    target = out_dir / config.name.lower()
    write_files(files, target)
    print(f"✅ Generated {len(files)} files in {target}")
    for f in files:
        print(f"   {f.path}")


if __name__ == "__main__":
    main()
