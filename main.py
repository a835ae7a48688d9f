#!/usr/bin/env python3
"""
CSS Class Suggestor
Main entry point for the application.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from core.catalog_store import CatalogStore
from core.completion_provider import provide_completion_items
from core.settings import DEFAULT_PACKAGE, Settings

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Suggest CSS classes shipped with an npm package.")
    parser.add_argument('--package', default=None,
                        help=f"npm package to scan (default: {DEFAULT_PACKAGE})")
    parser.add_argument('--project-root', type=Path, default=None,
                        help="folder containing node_modules")
    parser.add_argument('--line', default=None,
                        help="line text before the cursor; prints completions instead of the class list")
    parser.add_argument('--language', default='html', help="editor language id of the document")
    parser.add_argument('--serve', action='store_true', help="serve completions over HTTP")
    return parser

def load_settings(args) -> Settings:
    settings = Settings.from_env()
    overrides = {}
    if args.package:
        overrides['package_name'] = args.package
    if args.project_root:
        overrides['project_root'] = args.project_root
    return replace(settings, **overrides)

def main(argv=None):
    """Main execution function."""
    args = build_parser().parse_args(argv)
    settings = load_settings(args)
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    store = CatalogStore(settings.project_root, settings.package_name)
    for notification in store.load():
        print(f"[{notification.level}] {notification.message}")

    if args.serve:
        from web.app import create_app
        app = create_app(settings, store=store)
        app.run(host=settings.host, port=settings.port)
        return 0

    if args.line is not None:
        items = provide_completion_items(store.catalog, args.line, args.language)
        if items is None:
            print("No class attribute context")
            return 1
        for item in items:
            print(item.label)
        return 0

    for class_name, properties in store.catalog.items():
        print(f".{class_name} {{")
        for declaration in properties.splitlines():
            print(f"  {declaration.strip()}")
        print("}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
