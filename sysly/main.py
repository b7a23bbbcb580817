# sysly/main.py
"""Command line entry point: format one syslog line and send it."""

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from colorama import Fore, Style, just_fix_windows_console

from .config import create_logger, load_config
from .errors import SyslyError
from .priority import Severity

SEVERITY_COLORS = {
    Severity.EMERGENCY: Fore.MAGENTA + Style.BRIGHT,
    Severity.ALERT: Fore.MAGENTA,
    Severity.CRITICAL: Fore.RED + Style.BRIGHT,
    Severity.ERROR: Fore.RED,
    Severity.WARNING: Fore.YELLOW,
    Severity.NOTICE: Fore.CYAN,
    Severity.INFO: Fore.GREEN,
    Severity.DEBUG: Fore.WHITE + Style.DIM,
}


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='sysly',
        description='Send an RFC 5424 syslog message',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Send to the local syslog UDP port
  sysly --app myapp "service started"

  # Send to a remote collector at warning severity
  sysly --host 192.168.1.100 --port 514 --severity warning "disk almost full"

  # Write to a local unix stream socket
  sysly --mode unix --socket /var/run/collector.sock --facility local0 "hello"
        """
    )
    parser.add_argument('message', nargs='+', help='Message text')

    output_group = parser.add_argument_group('Transport Options')
    output_group.add_argument(
        '--mode', '-m',
        choices=['udp', 'unix'],
        default=None,
        help='Transport (default: from config or udp)'
    )
    output_group.add_argument(
        '--host', '-H',
        default=None,
        help='Collector host (udp mode)'
    )
    output_group.add_argument(
        '--port', '-P',
        type=int,
        default=None,
        help='Collector port (udp mode)'
    )
    output_group.add_argument(
        '--socket', '-s',
        default=None,
        help='Unix socket path (unix mode)'
    )

    header_group = parser.add_argument_group('Header Options')
    header_group.add_argument('--facility', '-f', default=None, help='Facility name (default: user)')
    header_group.add_argument('--severity', '-p', default='info', help='Severity name (default: info)')
    header_group.add_argument('--hostname', default=None, help='HOSTNAME header field')
    header_group.add_argument('--app', '-a', default=None, help='APP-NAME header field')
    header_group.add_argument('--pid', default=None, help='PROCID header field')
    header_group.add_argument('--msgid', default=None, help='MSGID header field')

    config_group = parser.add_argument_group('Configuration')
    config_group.add_argument(
        '--config',
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    config_group.add_argument(
        '--echo', '-e',
        action='store_true',
        help='Print the formatted line to stdout'
    )
    config_group.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)
    just_fix_windows_console()

    try:
        severity = Severity.from_name(args.severity)
    except ValueError as e:
        logging.error(str(e))
        return 1

    try:
        config = load_config(args.config)
    except SyslyError as e:
        logging.error(f"Failed to load configuration: {e}")
        return 1

    # Override config with command line arguments
    if args.mode:
        config.transport.mode = args.mode
    if args.host:
        config.transport.host = args.host
    if args.port is not None:
        config.transport.port = args.port
    if args.socket:
        config.transport.socket_path = args.socket
    if args.facility:
        config.syslog.facility = args.facility
    if args.hostname:
        config.syslog.host = args.hostname
    if args.app:
        config.syslog.app = args.app
    if args.pid:
        config.syslog.pid = args.pid
    if args.msgid:
        config.syslog.msgid = args.msgid

    message = ' '.join(args.message)

    try:
        syslog = create_logger(config)
    except SyslyError as e:
        logging.error(f"Cannot create logger: {e}")
        return 1

    stamp = datetime.now().astimezone()
    with syslog:
        try:
            syslog.log(severity, message, stamp)
        except OSError as e:
            logging.error(f"Send failed: {e}")
            return 2

    if args.echo:
        line = syslog.format(severity, message, stamp)
        print(f"{SEVERITY_COLORS[severity]}{line}{Style.RESET_ALL}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
