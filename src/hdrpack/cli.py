# src/hdrpack/cli.py
import sys
import argparse
import os
from pathlib import Path

# Module imports
from hdrpack.config import (
    BundleConfig,
    DEFAULT_FOLDERS,
    DEFAULT_IGNORE_FILE,
    DEFAULT_IMPL_MACRO,
    DEFAULT_OUTPUT,
)
from hdrpack.core.bundler import bundle, collect, summarize
from hdrpack.core.classify import parse_extensions
from hdrpack.core.tree import generate_layout_tree
from hdrpack.errors import HdrpackError


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="hdrpack",
        description="Amalgamate a header/source library into a single drop-in header file."
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=None, help="Project root directory (default: current directory)")
    parser.add_argument("--root", type=str, default=None, help="Project root directory (same as the positional argument)")
    parser.add_argument("-o", "--out", type=str, default=DEFAULT_OUTPUT, help=f"Output single header (default: {DEFAULT_OUTPUT})")
    parser.add_argument("-m", "--impl-macro", type=str, default=DEFAULT_IMPL_MACRO, help=f"Implementation macro name (default: {DEFAULT_IMPL_MACRO})")
    parser.add_argument(
        "-e", "--extensions",
        type=str,
        default=".cpp=source,.hpp=header",
        help="Comma-separated extension table, e.g. '.cpp=source,.hpp=header,.h=header'"
    )
    parser.add_argument("--ignore-file", type=str, default=None, help=f"Gitignore-style exclusions (default: <root>/{DEFAULT_IGNORE_FILE} if present)")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be bundled without writing anything")
    return parser


def build_config(args) -> BundleConfig:
    root_dir = Path(args.root or args.root_dir or os.getcwd()).resolve()
    return BundleConfig(
        root=root_dir,
        out=Path(args.out),
        impl_macro=args.impl_macro,
        folders=DEFAULT_FOLDERS,
        extensions=parse_extensions(args.extensions),
        ignore_file=Path(args.ignore_file) if args.ignore_file else None,
    )


def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()
        if args.root and args.root_dir:
            parser.error("give the project root either positionally or with --root, not both")
        config = build_config(args)

        print(f"--- hdrpack ---")
        print(f"Scanning: {', '.join(str(p) for p in config.folder_paths())}")
        print(f"Output:   {config.out}")
        print(f"Macro:    {config.impl_macro}")

        # 2. Dry run: report the layout only
        if args.dry_run:
            result = collect(config)
            entries = [(r.path.relative_to(config.root).as_posix(), r.kind.value) for r in result.records]
            entries += [(p.relative_to(config.root).as_posix(), "unsupported") for p in result.skipped]
            print()
            print(generate_layout_tree(entries, config.root.name or "project"), end="")
            print(summarize(result))
            return

        # 3. Bundle and write
        result = bundle(config)
        print(summarize(result))
        print(f"\nSuccess! Single header written to: {config.out}")

    except HdrpackError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
