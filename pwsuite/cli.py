"""
Command line interface for the PW training suite.

Runs the suites under a named environment profile, inspects and validates the
YAML presets, renders HTML reports from a results file, and previews test data.
"""

import argparse
import json
import os
import sys
import uuid
from pathlib import Path
from typing import List, Optional

import pytest

from . import __version__
from .core.config import Config
from .core.exceptions import SuiteError
from .core.logging_config import setup_logging
from .core.profiles import list_profiles, load_profile, override_profile, resolve_profile
from .data.csv_reader import read_csv_file
from .data.generators import FakerDataGenerator, UserDataGenerator
from .reporting import load_report, render_html_report


DEFAULT_SUITES = "suites"


def _runtime_config(args: argparse.Namespace) -> Config:
    config = Config.from_env()
    if getattr(args, "env", None):
        config.environment = args.env
    if getattr(args, "project", None):
        config.project = args.project
    # CI stays headless
    if getattr(args, "headed", False) and not config.is_ci_mode:
        config.headless_mode = False
    return config


def build_pytest_args(args: argparse.Namespace, config: Config) -> List[str]:
    """Translate ``run`` options and the resolved profile into pytest arguments."""
    profile = resolve_profile(config)

    overrides = {}
    if args.workers is not None:
        overrides["workers"] = args.workers
    if args.retries is not None:
        overrides["retries"] = args.retries
    if overrides:
        profile = override_profile(profile, **overrides)

    pytest_args = profile.to_pytest_args(output_dir=config.artifacts_dir)
    pytest_args.extend(["--pwsuite-env", config.environment])
    if config.project:
        pytest_args.extend(["--pwsuite-project", config.project])
    if args.keyword:
        pytest_args.extend(["-k", args.keyword])
    if args.markers:
        pytest_args.extend(["-m", args.markers])
    if args.faker_seed is not None:
        pytest_args.extend(["--faker-seed", str(args.faker_seed)])

    pytest_args.extend(args.paths or [DEFAULT_SUITES])
    return pytest_args


def cmd_run(args: argparse.Namespace) -> int:
    """Run the suites through pytest."""
    try:
        config = _runtime_config(args)
        run_id = uuid.uuid4().hex[:12]
        setup_logging(config, run_id)

        print(f"🚀 Running suites with profile '{config.profile_name}'...")
        pytest_args = build_pytest_args(args, config)

        # Picked up by the results plugin and the headless override in workers
        os.environ["PWSUITE_RUN_ID"] = run_id
        if config.headless_mode is not None:
            os.environ["PWSUITE_HEADLESS"] = "true" if config.headless_mode else "false"

        if args.verbose:
            print(f"⚙️  pytest {' '.join(pytest_args)}")

        exit_code = int(pytest.main(pytest_args))

        if exit_code == 0:
            print("✅ All suites passed!")
        else:
            print(f"❌ pytest exited with code {exit_code}")
        print(f"📊 Results: {config.results_file}")
        return exit_code

    except SuiteError as e:
        print(f"❌ Suite error: {e}")
        return 1


def cmd_config(args: argparse.Namespace) -> int:
    """Inspect and validate environment profiles."""
    config = _runtime_config(args)
    configs_dir = Path(args.configs_dir) if args.configs_dir else config.configs_dir

    if args.config_command == "list":
        try:
            names = list_profiles(configs_dir)
        except SuiteError as e:
            print(f"❌ {e}")
            return 1
        print("📋 Available profiles:")
        for name in names:
            print(f"   • {name}")
        return 0

    if args.config_command == "show":
        try:
            profile = load_profile(args.name, configs_dir)
        except SuiteError as e:
            print(f"❌ {e}")
            return 1
        print(json.dumps(profile.to_dict(), indent=2))
        return 0

    if args.config_command == "validate":
        print("🔍 Validating configuration...")
        has_errors = False

        try:
            config.validate()
            print("   ✅ Runtime configuration is valid")
        except SuiteError as e:
            has_errors = True
            print("   ❌ Runtime configuration has errors")
            for violation in e.context.get("violations", []):
                print(f"      • {violation}")

        try:
            names = list_profiles(configs_dir)
        except SuiteError as e:
            has_errors = True
            names = []
            print(f"   ❌ {e}")

        for name in names:
            try:
                load_profile(name, configs_dir)
                print(f"   ✅ {name}")
            except SuiteError as e:
                has_errors = True
                print(f"   ❌ {name}: {e}")

        if has_errors:
            print("❌ Configuration validation failed")
            return 1
        print("✅ Configuration is valid")
        return 0

    print("❌ Missing config command (list, show, validate)")
    return 1


def cmd_report(args: argparse.Namespace) -> int:
    """Render the HTML summary for a results file."""
    config = Config.from_env()
    results = Path(args.results) if args.results else config.results_file
    output = Path(args.output) if args.output else config.artifacts_dir / "report.html"

    try:
        report = load_report(results)
    except SuiteError as e:
        print(f"❌ {e}")
        return 1

    render_html_report(report, output)
    summary = report.summary
    print(f"📊 {summary.passed}/{summary.total_tests} passed ({summary.success_rate:.1f}%)")
    print(f"✅ Report written to {output}")
    return 0


def cmd_data(args: argparse.Namespace) -> int:
    """Preview CSV files and generated users."""
    if args.data_command == "preview":
        try:
            rows = read_csv_file(args.file, args.delimiter)
        except SuiteError as e:
            print(f"❌ {e}")
            return 1
        print(f"📄 {len(rows)} rows in {args.file}")
        for index, row in enumerate(rows, start=1):
            print(f"   {index}: {json.dumps(row)}")
        return 0

    if args.data_command == "users":
        if args.faker:
            generator = FakerDataGenerator(seed=args.seed)
            users = [generator.generate_user().to_dict() for _ in range(args.count)]
        else:
            users = [u.to_dict() for u in UserDataGenerator().generate_multiple_users(args.count)]
        print(json.dumps(users, indent=2, default=str))
        return 0

    print("❌ Missing data command (preview, users)")
    return 1


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"pwsuite {__version__}")
    if args.verbose:
        config = Config.from_env()
        print()
        print("System Information:")
        print(f"  Python: {sys.version}")
        print(f"  Platform: {sys.platform}")
        print(f"  Profile: {config.profile_name}")
        print(f"  CI: {config.is_ci_mode}")
        print(f"  Log Level: {config.log_level}")
    return 0


def create_main_parser() -> argparse.ArgumentParser:
    """Create main CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pwsuite",
        description="PW training suite - Playwright end-to-end suites and tooling",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pwsuite run --env staging -m smoke
  pwsuite run --project prod-mobile suites/saucedemo
  pwsuite config show prod-firefox
  pwsuite report --output test-results/report.html
  pwsuite data preview test-data/orangehrm/invalid-logins.csv
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser("run", help="Run the suites under a profile")
    run_parser.add_argument("paths", nargs="*", help="Suite paths (default: suites)")
    run_parser.add_argument("--env", help="Environment profile (dev, staging, prod)")
    run_parser.add_argument("--project", help="Unified project, e.g. prod-firefox")
    run_parser.add_argument("--headed", action="store_true", help="Show the browser (ignored in CI)")
    run_parser.add_argument("--workers", type=int, help="Override parallel workers")
    run_parser.add_argument("--retries", type=int, help="Override reruns of failures")
    run_parser.add_argument("-k", dest="keyword", help="pytest keyword expression")
    run_parser.add_argument("-m", dest="markers", help="pytest marker expression")
    run_parser.add_argument("--faker-seed", type=int, help="Seed for Faker data")
    run_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Print the pytest command line"
    )
    run_parser.set_defaults(func=cmd_run)

    # Config command
    config_parser = subparsers.add_parser("config", help="Environment profiles")
    config_parser.add_argument("--configs-dir", help="Directory holding the YAML presets")
    config_sub = config_parser.add_subparsers(dest="config_command")
    config_sub.add_parser("list", help="List profiles and projects")
    show_parser = config_sub.add_parser("show", help="Show one resolved profile")
    show_parser.add_argument("name", help="Profile or project name")
    config_sub.add_parser("validate", help="Validate runtime config and every profile")
    config_parser.set_defaults(func=cmd_config)

    # Report command
    report_parser = subparsers.add_parser("report", help="Render the HTML summary")
    report_parser.add_argument("--results", help="Results JSON (default: test-results/results.json)")
    report_parser.add_argument("--output", help="HTML output (default: test-results/report.html)")
    report_parser.set_defaults(func=cmd_report)

    # Data command
    data_parser = subparsers.add_parser("data", help="Test data helpers")
    data_sub = data_parser.add_subparsers(dest="data_command")
    preview_parser = data_sub.add_parser("preview", help="Print parsed CSV rows")
    preview_parser.add_argument("file", help="CSV file path")
    preview_parser.add_argument("--delimiter", default=",", help="Field delimiter")
    users_parser = data_sub.add_parser("users", help="Print generated users")
    users_parser.add_argument("--count", type=int, default=3, help="Number of users")
    users_parser.add_argument("--faker", action="store_true", help="Use Faker data")
    users_parser.add_argument("--seed", type=int, help="Faker seed")
    data_parser.set_defaults(func=cmd_data)

    # Version command
    version_parser = subparsers.add_parser("version", help="Show version information")
    version_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show detailed version information"
    )
    version_parser.set_defaults(func=cmd_version)

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_main_parser()

    if args is None:
        args = sys.argv[1:]

    parsed_args = parser.parse_args(args)

    if not hasattr(parsed_args, "func"):
        parser.print_help()
        return 1

    return parsed_args.func(parsed_args)


if __name__ == "__main__":
    sys.exit(main())
