"""CLI entrypoints for convscout commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .commands import discover_commands, group_by_category, quick_reference
from .config import ConfigError, ConvScoutConfig, load_config
from .engine import InvalidInputError, analyze
from .git import GitPorcelain
from .logging import configure_logging, get_logger
from .models import Command, FileInfo
from .render import render_json, render_markdown
from .repo_scanner import RepoScanner


class _NoGit:
    """Git source used when git inspection is disabled."""

    def recent_commits(self, root: Path, limit: int) -> List[str]:
        return []

    def local_branches(self, root: Path) -> List[str]:
        return []


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    # Subparsers suppress the default so a flag given before the command survives.
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Show debug output, including per-detector results.",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )


def _add_max_commands_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--max-commands",
        type=int,
        default=None,
        help="Size of the command quick reference (0 lists every command).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convscout",
        description="Infer coding conventions and key developer commands from a repository.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs (with timestamps) to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Report conventions, git style and prioritized commands.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_path_argument(analyze_parser)
    _add_max_commands_option(analyze_parser)
    analyze_parser.add_argument(
        "--format",
        choices=("markdown", "json"),
        default=None,
        help="Output format (defaults to the config value, else markdown).",
    )
    analyze_parser.add_argument(
        "--no-git",
        action="store_true",
        help="Skip commit and branch inspection.",
    )
    analyze_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout.",
    )

    commands_parser = subparsers.add_parser(
        "commands",
        help="Print the command quick reference grouped by category.",
    )
    _add_verbose_option(commands_parser, suppress_default=True)
    _add_path_argument(commands_parser)
    _add_max_commands_option(commands_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for convscout commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        root = Path(args.path).expanduser().resolve()
        config = load_config(root)
        files = RepoScanner().scan(root)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except ConfigError as exc:
        parser.exit(1, f"Invalid configuration: {exc}\n")

    commands = _collect_commands(root, files, config)
    size = args.max_commands if args.max_commands is not None else config.commands.quick_reference

    if args.command == "analyze":
        git_enabled = config.git.enabled and not args.no_git
        try:
            report = analyze(
                root,
                files,
                commands,
                git=GitPorcelain() if git_enabled else _NoGit(),
                commit_limit=config.git.commit_limit,
                quick_reference_size=size or None,
            )
        except InvalidInputError as exc:
            parser.exit(1, f"convscout analyze failed: {exc}\n")

        output_format = args.format or config.output_format
        if output_format == "json":
            text = render_json(report)
        else:
            text = render_markdown(report, title=f"{root.name} conventions")

        if args.output is not None:
            try:
                args.output.write_text(text, encoding="utf-8")
            except OSError as exc:
                parser.exit(1, f"Cannot write report to {args.output}: {exc}\n")
            logger.info("Report written to %s", args.output)
        else:
            sys.stdout.write(text)
    elif args.command == "commands":
        selected = quick_reference(commands, size or len(commands))
        if not selected:
            print("No commands found.")
            return
        for category, items in group_by_category(selected).items():
            print(f"{category}:")
            for command in items:
                suffix = f"  # {command.description}" if command.description else ""
                print(f"  {command.name}{suffix}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _collect_commands(root: Path, files: List[FileInfo], config: ConvScoutConfig) -> List[Command]:
    commands = discover_commands(root, files)
    commands.extend(config.commands.extra)
    return commands


if __name__ == "__main__":
    main(sys.argv[1:])
