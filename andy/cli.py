"""Andy command-line entry point.

Asks the project questions, shows what was resolved, and writes the
scaffold into the output directory.

Usage::

    andy
    andy --output ./MyApp
    andy --answers answers.json --no-greeting
    python -m andy.cli
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from andy import __version__
from andy.config import Config
from andy.scaffolder import (
    ANDROID_SCHEMA,
    InputAborted,
    ProjectGenerator,
    StaticInputProvider,
    WriteFailure,
)
from andy.scaffolder.deriver import ResolvedConfig
from andy.utils import (
    console,
    load_json,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def _summary(resolved: ResolvedConfig) -> dict[str, str]:
    enabled = [k for k, on in resolved.support_libraries.enabled.items() if on]
    return {
        "Application": resolved.application_name,
        "Module": resolved.module_name or "(project root)",
        "Package": resolved.package_name,
        "Minimum SDK": f"API {resolved.minimum_api_level}",
        "Target SDK": f"API {resolved.target_sdk_version}",
        "Compile SDK": f"API {resolved.compile_sdk_version}",
        "Java level": resolved.java_language_level,
        "Theme": resolved.theme_parent,
        "Support libraries": ", ".join(enabled) or "none",
    }


async def _run(generator: ProjectGenerator) -> int:
    answers = generator.collect()
    resolved = generator.resolve(answers)
    print_summary_table(_summary(resolved), title="Project")
    written = await generator.write(resolved)
    console.print()
    print_success(
        f"Generated {len(written)} files in {generator.config.output_dir.resolve()}"
    )
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``andy`` / ``python -m andy.cli``."""
    import argparse

    env_config = Config.from_env()

    parser = argparse.ArgumentParser(
        prog="andy",
        description="Andy -- scaffold a new Android application project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  andy\n"
            "  andy --output ./MyApp\n"
            "  andy --answers answers.json --no-greeting\n"
        ),
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help=f"Output directory (default: {env_config.output_dir})",
    )
    parser.add_argument(
        "--answers",
        default=None,
        help="JSON file of answers keyed by question (skips the prompts)",
    )
    parser.add_argument(
        "--no-greeting",
        action="store_true",
        help="Do not show the greeting banner",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    config = env_config.model_copy(
        update={
            "output_dir": Path(args.output) if args.output else env_config.output_dir,
            "show_greeting": env_config.show_greeting and not args.no_greeting,
        }
    )

    provider = None
    if args.answers:
        try:
            provider = StaticInputProvider(load_json(args.answers), schema=ANDROID_SCHEMA)
        except (OSError, ValueError) as exc:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            print_error(f"Error: invalid answers file {args.answers}: {exc}")
            sys.exit(1)

    generator = ProjectGenerator(config, provider)
    try:
        code = asyncio.run(_run(generator))
    except InputAborted as exc:
        print_warning(f"{exc}. Nothing was written.")
        sys.exit(1)
    except ValidationError as exc:
        print_error(f"Error: invalid answers: {exc}")
        sys.exit(1)
    except WriteFailure as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
