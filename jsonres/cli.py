#!/usr/bin/env python3
"""
jsonres - command line host for the JSON resources provider

Drives import and export from the shell and prints JSON result documents,
so scripts and agents can consume the output directly.

Commands:
    import - Read the resource tree and print resource strings
    export - Write resource strings from a JSON/YAML file into the tree
    info   - Show provider metadata

Example Workflow:
    1. jsonres import --base locales --output resources.json
       → Returns: stats, resources written to resources.json

    2. [Edit resources.json, add translations]

    3. jsonres export --base locales --input resources.json
       → Returns: one result per written file
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from .config import ProviderConfig, load_config
from .errors import InvalidConfiguration
from .provider import JsonResourcesProvider
from .resources import ResourceString, valid_only


def build_config(args) -> ProviderConfig:
    """Combine --config file settings with command line overrides."""
    if args.config:
        config = load_config(args.config, storage_location=args.base)
        if args.root:
            config.solution_path = args.root
    elif args.base:
        config = ProviderConfig(storage_location=args.base, solution_path=args.root)
    else:
        raise InvalidConfiguration("No storage location given. Use --base DIR or --config FILE")

    if args.project:
        config.project_name = args.project
    return config


def load_resources_document(input_file: str) -> list[ResourceString]:
    """
    Read resource strings from a JSON or YAML document.

    Accepts either a list of resource entries or a mapping with a
    "resources" list, as written by `jsonres import --output`.
    """
    path = Path(input_file)
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yml", ".yaml"):
        data = yaml.safe_load(content)
    else:
        data = json.loads(content)

    if isinstance(data, dict):
        data = data.get("resources", [])
    if not isinstance(data, list):
        raise ValueError(f"{input_file} must contain a list of resources")

    return [ResourceString.from_dict(entry) for entry in data]


def cmd_import(args) -> dict:
    """Import resource strings from the resource tree."""
    config = build_config(args)
    provider = JsonResourcesProvider.from_config(config)

    resources = provider.import_resource_strings(config.project_name)
    valid = valid_only(resources)
    selected = resources if args.all else valid
    dropped = len(resources) - len(valid)

    result: dict[str, Any] = {
        "status": "ok",
        "project_name": config.project_name,
        "base_directory": str(provider.base_directory),
        "stats": {
            "total": len(resources),
            "valid": len(valid),
            "without_invariant": dropped,
        },
    }

    document = [r.to_dict() for r in selected]
    if args.output:
        Path(args.output).write_text(
            json.dumps({"resources": document}, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        result["output_file"] = args.output
    else:
        result["resources"] = document

    result["summary"] = (
        f"Imported {len(selected)} resource strings"
        + (f" ({dropped} without invariant text skipped)" if dropped and not args.all else "")
        + "."
    )
    return result


def cmd_export(args) -> dict:
    """Export resource strings into the resource tree."""
    config = build_config(args)
    provider = JsonResourcesProvider.from_config(config)
    resources = load_resources_document(args.input)

    results = provider.export_resource_strings(config.project_name, resources)
    errors = [r for r in results if not r.ok]

    return {
        "status": "ok" if not errors else "error",
        "project_name": config.project_name,
        "base_directory": str(provider.base_directory),
        "stats": {
            "resources": len(resources),
            "written": len(results) - len(errors),
            "errors": len(errors),
        },
        "results": [r.to_dict() for r in results],
        "summary": f"{len(results) - len(errors)} files written, {len(errors)} failed.",
    }


def cmd_info(args) -> dict:
    """Show provider metadata."""
    return {"status": "ok", **JsonResourcesProvider.describe()}


def add_location_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--base", "-b", help="Base directory of the JSON files (absolute or relative to --root)")
    parser.add_argument("--root", "-r", help="Solution directory relative base paths are resolved against (default: cwd)")
    parser.add_argument("--config", "-c", help="YAML config file with storage_location/solution_path/project_name")
    parser.add_argument("--project", "-p", help="Project name reported in results")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="jsonres",
        description="jsonres - JSON resources provider for localization hosts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
File naming:
  strings.json         - invariant (default language) strings
  strings.de-DE.json   - German (Germany) translations of strings.json
  sub/strings.fr.json  - group "sub/strings", locale "fr"

Examples:
  # Import all valid strings below ./locales
  jsonres import --base locales

  # Import everything, including strings without invariant text
  jsonres import --base locales --all --output resources.json

  # Export strings from a YAML document
  jsonres export --base /abs/path/locales --input resources.yaml

  # Use a config file
  jsonres import --config jsonres.yml
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log file activity to stderr")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # import command
    import_parser = subparsers.add_parser("import", help="Read resource strings from the resource tree")
    add_location_arguments(import_parser)
    import_parser.add_argument("--all", "-a", action="store_true", help="Include strings without invariant text")
    import_parser.add_argument("--output", "-o", help="Write resources to this file instead of stdout")

    # export command
    export_parser = subparsers.add_parser("export", help="Write resource strings into the resource tree")
    add_location_arguments(export_parser)
    export_parser.add_argument("--input", "-i", required=True, help="JSON or YAML file with resources")

    # info command
    subparsers.add_parser("info", help="Show provider metadata")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # stdout carries the JSON result; logs go to stderr
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
            stream=sys.stderr,
        )

    try:
        if args.command == "import":
            result = cmd_import(args)
        elif args.command == "export":
            result = cmd_export(args)
        elif args.command == "info":
            result = cmd_info(args)
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
