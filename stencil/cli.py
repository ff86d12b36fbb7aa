import argparse
import logging
import sys

from .loader import load_spec
from .writer import WriteResult


def cmd_render(args: argparse.Namespace) -> None:
    builder = load_spec(args.spec)
    sys.stdout.write(builder.render(newline="\n"))


def cmd_write(args: argparse.Namespace) -> None:
    builder = load_spec(args.spec)
    target = builder.output_path(args.out_dir)
    if builder.write(args.out_dir) is WriteResult.CREATED:
        print(f"Created {target}")
    else:
        print(f"Skipped {target} (already exists)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("stencil")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(required=True)

    s = sub.add_parser("render", help="Print the class file described by a JSON class description")
    s.add_argument("spec", help="Path to the JSON class description")
    s.set_defaults(func=cmd_render)

    s = sub.add_parser("write", help="Write the class file unless it already exists")
    s.add_argument("spec", help="Path to the JSON class description")
    s.add_argument("out_dir", help="Directory that receives <ClassName>.php")
    s.set_defaults(func=cmd_write)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except ValueError as e:
        print(f"Invalid class description {args.spec}: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
