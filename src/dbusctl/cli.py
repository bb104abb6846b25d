"""CLI for D-Bus method calls."""

import argparse
import asyncio
import logging
import os
import sys
from typing import Optional

from dbusctl import (
    __version__,
    ArgumentError,
    BusConnector,
    DbusConnectionError,
    DbusCtlError,
    DbusMethodError,
    parse_call_arguments,
)
from dbusctl.const import ARGUMENT_GRAMMAR_HELP, ENV_BUS_ADDRESS
from dbusctl.utils import format_reply

logging.basicConfig(level=logging.INFO, format='%(message)s')
_LOGGER = logging.getLogger(__name__)


def get_bus_address(args) -> Optional[str]:
    """Get an explicit bus address from args or environment."""
    return getattr(args, "address", None) or os.getenv(ENV_BUS_ADDRESS) or None


async def cmd_call(args) -> int:
    """Call a D-Bus method. Returns the process exit status."""
    # Parse everything before touching the bus
    try:
        call_args = parse_call_arguments(args.args)
    except ArgumentError as e:
        print(f"Error parsing argument '{e.argument}': {e}")
        print(ARGUMENT_GRAMMAR_HELP)
        return 1

    connector = BusConnector(system=args.system, address=get_bus_address(args))
    try:
        body = await connector.call(args.service, args.object, args.interface, args.method, call_args)
    except DbusConnectionError as e:
        print(f"Connection failed: {e}")
        return 1
    except DbusMethodError as e:
        print(f"Method call failed: {e}")
        return 1
    except DbusCtlError as e:
        _LOGGER.error("Error calling method: %s", e)
        return 1

    output = format_reply(body)
    if output is not None:
        print(output)
    return 0


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(description="A command-line utility for interacting with D-Bus")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # Call
    parser_call = subparsers.add_parser(
        "call",
        help="Call a D-Bus method",
        epilog=ARGUMENT_GRAMMAR_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser_call.add_argument("--system", action="store_true", help="Use system bus instead of session bus")
    parser_call.add_argument("--address", help=f"Explicit bus address (or {ENV_BUS_ADDRESS} env var)")
    parser_call.add_argument("-s", "--service", required=True, help="D-Bus service name")
    parser_call.add_argument("-o", "--object", required=True, help="D-Bus object path")
    parser_call.add_argument("-i", "--interface", required=True, help="D-Bus interface name")
    parser_call.add_argument("-m", "--method", required=True, help="D-Bus method name")
    parser_call.add_argument("args", nargs="*", help="D-Bus method arguments (type:value)")

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.command:
        parser.print_help()
        return

    try:
        if args.command == "call":
            sys.exit(asyncio.run(cmd_call(args)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
