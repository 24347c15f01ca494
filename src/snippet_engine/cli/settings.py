"""Settings CLI commands."""

import argparse

from snippet_engine.settings import load_settings, parse_extensions, save_settings


def cmd_settings_show(args: argparse.Namespace) -> int:
    from snippet_engine.paths import backup_dir, settings_path

    settings = load_settings(args.settings)
    print(f"  Settings file:    {args.settings or settings_path()}")
    print(f"  Extensions:       {settings.filter_string}")
    print(f"  Backup dir:       {settings.backup_dir or backup_dir()}")
    print(f"  Special solution: {'yes' if settings.prefer_special_solution else 'no'}")
    return 0


def cmd_settings_set_extensions(args: argparse.Namespace) -> int:
    settings = load_settings(args.settings)
    settings.extensions = parse_extensions(args.extensions)
    path = save_settings(settings, args.settings)
    print(f"  Extensions set to: {settings.filter_string}")
    print(f"  Saved {path}")
    return 0


def cmd_settings_set_backup_dir(args: argparse.Namespace) -> int:
    settings = load_settings(args.settings)
    settings.backup_dir = args.directory
    path = save_settings(settings, args.settings)
    print(f"  Backup dir set to: {settings.backup_dir}")
    print(f"  Saved {path}")
    return 0
