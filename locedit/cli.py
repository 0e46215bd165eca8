#!/usr/bin/env python3
"""
locedit - Apple .strings Localization Editor CLI

Command line front end to the localization provider. Every command prints a
JSON document on stdout; diagnostics go to stderr.

Commands:
    scan  - List localization groups found under a project directory
    show  - Print the key/language table of one group
    set   - Update one translation value

Example:
    locedit scan ./MyApp
    locedit show ./MyApp Localizable.strings
    locedit set ./MyApp Localizable.strings fr greeting 'Bonjour'
"""

import argparse
import json
import sys

from .config import load_config
from .errors import ConfigError, ScanTargetUnavailable
from .logging_config import setup_logging
from .provider import LocalizationProvider, select_group


def cmd_scan(args, provider: LocalizationProvider) -> dict:
    """List localization groups."""
    result = provider.scan(args.root)

    unavailable = [e for e in result.errors if isinstance(e, ScanTargetUnavailable)]
    if unavailable:
        return {"status": "error", **unavailable[0].to_dict()}

    groups = [
        {
            "name": group.name,
            "path": group.path,
            "languages": [
                {
                    "language": localization.language,
                    "label": str(localization),
                    "path": localization.path,
                    "keys": len(localization.translations),
                }
                for localization in group.localizations
            ],
            "keys": len(group.keys()),
        }
        for group in result.groups
    ]

    return {
        "status": "ok",
        "root": args.root,
        "format": provider.handler.name,
        "groups": groups,
        "errors": [e.to_dict() for e in result.errors],
        "summary": f"{len(groups)} groups found, {len(result.errors)} files could not be parsed",
    }


def _load_groups(provider: LocalizationProvider, root: str):
    """Scan root; returns (groups, error dict or None)."""
    result = provider.scan(root)
    for error in result.errors:
        if isinstance(error, ScanTargetUnavailable):
            return [], {"status": "error", **error.to_dict()}
    return result.groups, None


def _unknown_group(name: str, groups) -> dict:
    return {
        "status": "error",
        "error_type": "unknown_group",
        "error": f"No localization group named {name!r}",
        "available": [group.path for group in groups],
    }


def cmd_show(args, provider: LocalizationProvider) -> dict:
    """Print the key by language table of one group."""
    groups, error = _load_groups(provider, args.root)
    if error:
        return error

    group = select_group(groups, args.group)
    if group is None:
        return _unknown_group(args.group, groups)

    table = group.table()
    missing = {
        key: [language for language, value in values.items() if value is None]
        for key, values in table.items()
        if None in values.values()
    }

    return {
        "status": "ok",
        "group": group.name,
        "path": group.path,
        "languages": group.languages(),
        "table": table,
        "missing": missing,
    }


def cmd_set(args, provider: LocalizationProvider) -> dict:
    """Update one translation value."""
    groups, error = _load_groups(provider, args.root)
    if error:
        return error

    group = select_group(groups, args.group)
    if group is None:
        return _unknown_group(args.group, groups)

    localization = group.localization_for(args.language)
    if localization is None:
        return {
            "status": "error",
            "error_type": "unknown_language",
            "error": f"Group {group.name!r} has no {args.language!r} localization",
            "available": group.languages(),
        }

    previous = localization.value_for(args.key)
    result = provider.update(localization, args.key, args.value)
    if result.error is not None:
        return {"status": "error", **result.error.to_dict()}

    return {
        "status": "ok",
        "path": localization.path,
        "key": args.key,
        "previous": previous,
        "value": args.value,
        "written": result.written,
        "summary": "Value updated" if result.written else "Same value provided, file left untouched",
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="locedit",
        description="locedit - Apple .strings Localization Editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List groups and languages
  locedit scan ./MyApp

  # Show all keys of one group across languages
  locedit show ./MyApp Localizable.strings

  # Select a group by logical path when several share a file name
  locedit show ./MyApp Feature/Localizable.strings

  # Update a value (file is left untouched when the value is unchanged)
  locedit set ./MyApp Localizable.strings fr greeting 'Bonjour'

Config file (YAML):
  ignored_directories: [Pods, Carthage, build, .framework]
  leading_newline: false
        """,
    )
    parser.add_argument("--config", "-c", help="YAML configuration file")
    parser.add_argument("--debug", "-d", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--log-file", help="Also write debug log to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # scan command
    scan_parser = subparsers.add_parser("scan", help="List localization groups")
    scan_parser.add_argument("root", help="Project directory")

    # show command
    show_parser = subparsers.add_parser("show", help="Show the key/language table of a group")
    show_parser.add_argument("root", help="Project directory")
    show_parser.add_argument("group", help="Group name or logical path")

    # set command
    set_parser = subparsers.add_parser("set", help="Update one translation value")
    set_parser.add_argument("root", help="Project directory")
    set_parser.add_argument("group", help="Group name or logical path")
    set_parser.add_argument("language", help="Language code (e.g. en, fr)")
    set_parser.add_argument("key", help="Localization key")
    set_parser.add_argument("value", help="New value")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(debug=args.debug, log_file=args.log_file)

    commands = {
        "scan": cmd_scan,
        "show": cmd_show,
        "set": cmd_set,
    }

    try:
        provider = LocalizationProvider(load_config(args.config))
        result = commands[args.command](args, provider)
    except ConfigError as e:
        print(json.dumps({"status": "error", **e.to_dict()}), file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    if result.get("status") != "ok":
        sys.exit(1)


if __name__ == "__main__":
    main()
