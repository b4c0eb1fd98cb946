"""
Command line wrapper around the gff library.

    gff validate FORM...                 decode and analyze form documents
    gff merge FORM... [-o OUT]           merge documents into one
    gff convert FORM --to yaml|json      re-encode a document

Files ending in .yaml/.yml are read as YAML, everything else as JSON.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from gff.analyzer import analyze_form
from gff.errors import GFFError
from gff.merge import merge_forms
from gff.model import FormDefinition
from gff.serialization import from_json, from_yaml, to_json, to_yaml


logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def load_form(path: Path) -> FormDefinition:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        return from_yaml(text)
    return from_json(text)


def _write(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        logger.info("wrote %s", output)
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


def cmd_validate(args: argparse.Namespace) -> int:
    failed = False
    for name in args.files:
        path = Path(name)
        try:
            form = load_form(path)
        except (OSError, GFFError) as e:
            print(f"FAIL {path.name} - {e}")
            failed = True
            continue

        report = analyze_form(form)
        status = "OK  " if report.is_valid else "FAIL"
        print(f"{status} {path.name} - {report.total_fields} fields, {report.total_dependencies} dependencies")
        for error in report.errors:
            print(f"     error: {error}")
        for warning in report.warnings:
            print(f"     warning: {warning}")
        failed = failed or not report.is_valid

    return 1 if failed else 0


def cmd_merge(args: argparse.Namespace) -> int:
    try:
        forms = [load_form(Path(name)) for name in args.files]
        merged = merge_forms(
            forms,
            form_id=args.form_id,
            title=args.title,
            description=args.description,
        )
    except (OSError, GFFError) as e:
        print(f"merge failed: {e}", file=sys.stderr)
        return 1

    _write(to_json(merged, pretty=not args.compact), args.output)
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    try:
        form = load_form(Path(args.file))
    except (OSError, GFFError) as e:
        print(f"convert failed: {e}", file=sys.stderr)
        return 1

    text = to_yaml(form) if args.to == "yaml" else to_json(form, pretty=not args.compact)
    _write(text, args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gff", description="Generic Form Format tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Decode and analyze form documents")
    p_validate.add_argument("files", nargs="+", help="Form documents (.json, .yaml, .yml)")
    p_validate.set_defaults(func=cmd_validate)

    p_merge = sub.add_parser("merge", help="Merge form documents into one")
    p_merge.add_argument("files", nargs="+", help="Form documents, in merge order")
    p_merge.add_argument("-o", "--output", help="Write to this file instead of stdout")
    p_merge.add_argument("--form-id", help="formId of the merged form")
    p_merge.add_argument("--title", help="Title of the merged form")
    p_merge.add_argument("--description", help="Description of the merged form")
    p_merge.add_argument("--compact", action="store_true", help="Emit compact JSON")
    p_merge.set_defaults(func=cmd_merge)

    p_convert = sub.add_parser("convert", help="Convert a form document between JSON and YAML")
    p_convert.add_argument("file", help="Form document")
    p_convert.add_argument("--to", choices=["json", "yaml"], required=True)
    p_convert.add_argument("-o", "--output", help="Write to this file instead of stdout")
    p_convert.add_argument("--compact", action="store_true", help="Emit compact JSON")
    p_convert.set_defaults(func=cmd_convert)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
