#!/usr/bin/env python3
"""
aws-sso-login CLI

A command-line utility around the AWS CLI's SSO login. It reads the
role credentials the AWS CLI caches for an SSO profile and hands them out
as shell exports, credential_process JSON, a credentials file entry or a
web console sign-in.
"""

import argparse
import logging
import sys

from . import __version__
from .commands import export_credentials, process_credentials, import_credentials, open_console
from .errors import ProfileNotSpecifiedError, SSOLoginError
from .logger import configure_logging

PROG = "aws-sso-login"

logger = logging.getLogger(__name__)


def _profile(args):
    if not args.profile:
        raise ProfileNotSpecifiedError()
    return args.profile


def handle_console(args):
    """Handle the console command."""
    open_console(_profile(args), force_logout=args.force_logout, logout_wait=args.logout_wait)


def handle_export(args):
    """Handle the export command."""
    export_credentials(_profile(args))


def handle_import(args):
    """Handle the import command."""
    import_credentials(_profile(args))


def handle_process(args):
    """Handle the process command."""
    process_credentials(_profile(args))


def handle_version(args):
    """Handle the version command."""
    print(f"{PROG} {__version__}")


def _add_profile_argument(parser):
    parser.add_argument("--profile", default="", help="Name of the AWS profile")


def build_parser():
    parser = argparse.ArgumentParser(prog=PROG, description="AWS SSO utility")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (overrides --verbose)")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Console command
    console_parser = subparsers.add_parser(
        "console", help="Opens the default browser and logs into AWS Web Console using SSO")
    _add_profile_argument(console_parser)
    console_parser.add_argument("--force-logout", action=argparse.BooleanOptionalAction, default=True,
                                help="Force logout of any existing session in the browser first")
    console_parser.add_argument("--logout-wait", type=int, default=1,
                                help="Number of seconds to wait after forcing logout before logging in")
    console_parser.set_defaults(func=handle_console)

    # Export command
    export_parser = subparsers.add_parser("export", help="Prints credentials for exporting to your shell")
    _add_profile_argument(export_parser)
    export_parser.set_defaults(func=handle_export)

    # Import command
    import_parser = subparsers.add_parser(
        "import", help="Fetches new credentials and writes them to the local credentials file")
    _add_profile_argument(import_parser)
    import_parser.set_defaults(func=handle_import)

    # Process command
    process_parser = subparsers.add_parser("process", help="Fetches credential process compatible JSON output")
    _add_profile_argument(process_parser)
    process_parser.set_defaults(func=handle_process)

    # Version command
    version_parser = subparsers.add_parser("version", help="Print the version information")
    version_parser.set_defaults(func=handle_version)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(getattr(logging, args.log_level))
    else:
        configure_logging(logging.INFO if args.verbose else logging.WARNING)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    try:
        args.func(args)
    except SSOLoginError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
