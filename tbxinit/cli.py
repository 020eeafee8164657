"""Command-line entry point.

Usage::

    tbxinit banana
    tbxinit "My Tools" -o ~/work --function-name mytool --toolbox-version 0.1.0
    python -m tbxinit banana --skip-environment-check
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from tbxinit.config import Config
from tbxinit.scaffolder import (
    DirectoryPlan,
    ScaffoldError,
    ScaffoldRequest,
    Scaffolder,
    TemplateCatalog,
)
from tbxinit.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_tree,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tbxinit",
        description="Create a MATLAB toolbox project from the standard templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  tbxinit banana\n"
            "  tbxinit banana -o ./work --toolbox-name 'Banana Tools'\n"
            "  tbxinit 2bad-name --function-name helper.m\n"
        ),
    )

    parser.add_argument(
        "root_name",
        nargs="?",
        help="Name of the project folder to create",
    )
    parser.add_argument(
        "--output-folder", "-o",
        default=None,
        help="Folder in which the project folder is created (default: current directory)",
    )
    parser.add_argument(
        "--function-name",
        default=None,
        help="Name of the stub function (default: ROOT_NAME if valid, else 'myfunction')",
    )
    parser.add_argument(
        "--toolbox-name",
        default=None,
        help="Toolbox display name (default: 'ROOT_NAME Toolbox')",
    )
    parser.add_argument(
        "--toolbox-version",
        default=None,
        help="Toolbox version (default: 1.0.0)",
    )
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Use templates from this folder instead of the bundled ones",
    )
    parser.add_argument(
        "--matlab-release",
        default=None,
        help="MATLAB release of this host, e.g. R2024b (default: detected)",
    )
    parser.add_argument(
        "--minimum-release",
        default=None,
        help="Oldest MATLAB release to accept (default: R2023b)",
    )
    parser.add_argument(
        "--skip-environment-check",
        action="store_true",
        help="Do not check the host MATLAB release",
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="List the available templates and exit",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the summary",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``tbxinit`` and ``python -m tbxinit``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env(
            template_dir=Path(args.template_dir) if args.template_dir else None,
            matlab_release=args.matlab_release,
            minimum_release=args.minimum_release,
            check_environment=False if args.skip_environment_check else None,
            verbose=False if args.quiet else None,
        )
    except ValidationError as exc:
        print_error(_first_error(exc))
        sys.exit(1)

    if args.list_templates:
        catalog = TemplateCatalog(config.template_dir)
        for template_id in catalog.list_templates():
            console.print(template_id)
        absent = catalog.missing(_catalog_entries(catalog))
        if absent:
            print_warning(f"Missing templates: {', '.join(absent)}")
        return

    if not args.root_name:
        parser.error("the following arguments are required: root_name")

    if not config.check_environment:
        print_warning("Skipping the MATLAB release check.")

    try:
        request = ScaffoldRequest(
            root_name=args.root_name,
            **{
                key: value
                for key, value in (
                    ("output_folder", args.output_folder),
                    ("function_name", args.function_name),
                    ("toolbox_name", args.toolbox_name),
                    ("toolbox_version", args.toolbox_version),
                )
                if value is not None
            },
        )
    except ValidationError as exc:
        print_error(_first_error(exc))
        sys.exit(1)

    try:
        result = Scaffolder(config).initialize(request)
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    console.print()
    print_summary_table(
        {
            "Project folder": str(result.root),
            "Toolbox name": request.toolbox_name,
            "Version": request.toolbox_version,
            "Function": result.function_name,
            "Identifier": result.toolbox_identifier,
        },
        title="Toolbox created",
    )
    print_tree(result.root, result.files)
    print_success(f"Created {len(result.files)} files in {len(result.directories)} folders.")


def _catalog_entries(catalog: TemplateCatalog):
    """Catalog entries for a throwaway request; only the template ids matter."""
    request = ScaffoldRequest(root_name="example")
    return catalog.entries(
        DirectoryPlan.for_request(request),
        function_name=request.function_name,
        test_class_name=request.test_class_name,
        toolbox_name=request.toolbox_name,
        toolbox_version=request.toolbox_version,
        toolbox_identifier="",
    )


def _first_error(exc: ValidationError) -> str:
    """Format the first validation error as ``field: message``."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", str(exc))
    return f"{location}: {message}" if location else message


if __name__ == "__main__":
    main()
