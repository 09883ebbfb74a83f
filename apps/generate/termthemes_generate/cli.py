"""CLI entrypoints for regenerating, validating, and previewing the theme catalog."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from termthemes import ThemeNotFound, get_all_themes, get_theme
from termthemes_generator import GeneratorError, generate_catalog, load_config, validate_catalog
from termthemes_generator.logging_setup import configure_logging, get_logger


EXIT_OK = 0
EXIT_GENERATOR_ERROR = 1
EXIT_INVALID_CATALOG = 2
EXIT_UNKNOWN_THEME = 3
EXIT_PREVIEW_FAILED = 4


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def cmd_generate(args: argparse.Namespace) -> int:
    cfg = args.cfg
    if args.repo:
        cfg.upstream.repo_url = args.repo
    source_dir = Path(args.source_dir).expanduser().resolve() if args.source_dir else None
    output = Path(args.output).expanduser().resolve() if args.output else None

    try:
        result = generate_catalog(cfg, source_dir=source_dir, output_path=output)
    except GeneratorError as exc:
        get_logger().error("generation failed: %s", exc, extra={"event": "generation_failed"})
        return EXIT_GENERATOR_ERROR

    _print_json(asdict(result))
    return EXIT_OK


def cmd_validate(_args: argparse.Namespace) -> int:
    report = validate_catalog(get_all_themes())
    payload = asdict(report)
    payload["success"] = report.ok
    _print_json(payload)
    return EXIT_OK if report.ok else EXIT_INVALID_CATALOG


def cmd_preview(args: argparse.Namespace) -> int:
    from termthemes_generator.preview import render_swatch

    try:
        theme = get_theme(args.name)
    except ThemeNotFound as exc:
        get_logger().error("%s", exc, extra={"event": "preview_unknown_theme"})
        return EXIT_UNKNOWN_THEME

    try:
        path = render_swatch(theme, Path(args.out).expanduser(), cell=args.cell)
    except (OSError, ValueError) as exc:
        get_logger().error("preview of %s failed: %s", theme.name, exc, extra={"event": "preview_failed"})
        return EXIT_PREVIEW_FAILED

    _print_json({"theme": theme.name, "path": str(path)})
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termthemes-generate", description="termthemes catalog tools")
    parser.add_argument("--config", default=None, help="Path to generator config JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    gen_cmd = sub.add_parser("generate", help="Regenerate the embedded catalog module")
    gen_cmd.add_argument("--source-dir", default=None, help="Read schemes from a local directory instead of cloning")
    gen_cmd.add_argument("--output", default=None, help="Catalog module path (defaults to the installed package)")
    gen_cmd.add_argument("--repo", default=None, help="Upstream git repository URL")
    gen_cmd.set_defaults(func=cmd_generate)

    val_cmd = sub.add_parser("validate", help="Check the embedded catalog")
    val_cmd.set_defaults(func=cmd_validate)

    prev_cmd = sub.add_parser("preview", help="Render a PNG swatch sheet for one theme")
    prev_cmd.add_argument("name", help="Theme name (case-insensitive)")
    prev_cmd.add_argument("--out", required=True, help="Output PNG path")
    prev_cmd.add_argument("--cell", type=int, default=48, help="Swatch size in pixels")
    prev_cmd.set_defaults(func=cmd_preview)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config(Path(args.config).expanduser() if args.config else None)
    args.cfg = cfg
    configure_logging(
        level=cfg.logging.level,
        log_file=Path(cfg.logging.log_file).expanduser() if cfg.logging.log_file else None,
        keep_files=cfg.logging.keep_log_files,
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
