"""
Main entry point for the ping sweep.

This module provides the command-line interface: argument parsing, request
validation, auto-detection of the local prefix, pre-flight checks and
running the sweep.
"""

import argparse
import signal
import sys
import threading
from typing import List, Optional, Tuple

from . import __version__
from .config.config_loader import ConfigLoader, SweepConfig
from .core.data_models import SweepMode, SweepRequest
from .core.network_detector import NetworkDetector
from .core.sweep_coordinator import SweepCoordinator
from .probers.base_prober import BaseProber
from .probers.ping_prober import PingProber
from .probers.resolver import BaseResolver, NullResolver, SocketResolver
from .utils.error_handler import (
    ConfigurationError,
    DetectionError,
    ErrorContext,
    ErrorHandler,
    ErrorSeverity,
    ErrorType,
    ToolValidator,
)
from .utils.logger import LogLevel, get_logger, set_log_level
from .utils.report_printer import ReportPrinter

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class PingSweepApp:
    """
    Main application class for the ping sweep.

    Handles request validation, pre-flight checks and the sweep lifecycle.
    The prober, resolver, detector and printer can be injected; the defaults
    use the system ping, the system resolver and stdout.
    """

    def __init__(
        self,
        prober: Optional[BaseProber] = None,
        resolver: Optional[BaseResolver] = None,
        detector: Optional[NetworkDetector] = None,
        printer: Optional[ReportPrinter] = None,
    ):
        """Initialize the application."""
        self.logger = get_logger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.prober = prober
        self.resolver = resolver
        self.detector = detector
        self.printer = printer

    def _signal_handler(self, signum: int, frame) -> None:
        """
        Turn SIGTERM into the same interruption path as Ctrl-C.

        Args:
            signum: Signal number
            frame: Current stack frame
        """
        self.logger.warning(f"Received signal {signum} - stopping")
        raise KeyboardInterrupt

    def _install_signal_handlers(self):
        # signal.signal() is only allowed from the main thread
        if threading.current_thread() is threading.main_thread():
            return signal.signal(signal.SIGTERM, self._signal_handler)
        return None

    def load_config(self, args: argparse.Namespace) -> SweepConfig:
        """
        Load sweep_config.yml and apply command-line overrides.

        Args:
            args: Parsed command line arguments

        Returns:
            SweepConfig: Effective configuration
        """
        config = ConfigLoader(args.config_dir, logger=self.logger).load_sweep_config()

        if args.timeout is not None:
            config.timeout = args.timeout
        if args.workers is not None:
            config.max_workers = args.workers
        if args.resolve_timeout is not None:
            config.resolve_timeout = args.resolve_timeout
        if args.no_resolve:
            config.resolve_names = False
        if args.no_color:
            config.color = False

        if config.timeout <= 0:
            raise ConfigurationError(f"Timeout must be a positive number of seconds, got {config.timeout}")
        if config.max_workers <= 0:
            raise ConfigurationError(f"Worker count must be positive, got {config.max_workers}")
        if config.resolve_timeout <= 0:
            raise ConfigurationError(f"Resolve timeout must be positive, got {config.resolve_timeout}")
        return config

    def build_request(
        self, args: argparse.Namespace, config: SweepConfig
    ) -> Tuple[SweepRequest, bool]:
        """
        Validate the arguments and build the sweep request.

        Args:
            args: Parsed command line arguments
            config: Effective configuration

        Returns:
            Tuple of (request, whether the prefix was auto-detected)

        Raises:
            ConfigurationError: If the mode, prefix or range bounds are missing or malformed
            DetectionError: If auto-detect mode cannot find a local address
        """
        # SweepRequest validates the prefix, bounds and timeout itself
        if args.hostname is not None:
            request = SweepRequest(
                mode=SweepMode.NAME_RANGE,
                prefix=args.hostname,
                range_start=args.range_start,
                range_end=args.range_end,
                timeout=config.timeout,
            )
            return request, False

        if args.ip is not None:
            return SweepRequest(mode=SweepMode.ADDRESS_RANGE, prefix=args.ip, timeout=config.timeout), False

        if args.detect:
            detector = self.detector or NetworkDetector(self.logger)
            prefix = detector.detect_prefix()
            return SweepRequest(mode=SweepMode.ADDRESS_RANGE, prefix=prefix, timeout=config.timeout), True

        raise ConfigurationError("A sweep mode is required: -i <prefix>, -d or -n <prefix>")

    def _perform_preflight_checks(self) -> bool:
        """
        Check that the ping binary is available.

        Returns:
            bool: True if all checks pass, False otherwise
        """
        all_valid, missing_tools = ToolValidator(self.error_handler).validate_all_tools()
        if not all_valid:
            self.logger.error(f"Missing required tools: {', '.join(missing_tools)}. Use --skip-checks to bypass.")
        return all_valid

    def _report(self, error: Exception, error_type: ErrorType, operation: str) -> None:
        context = ErrorContext(
            error_type=error_type,
            severity=ErrorSeverity.HIGH,
            operation=operation,
            component="PingSweepApp",
        )
        self.error_handler.handle_error(error, context)

    def run(self, args: argparse.Namespace, parser: Optional[argparse.ArgumentParser] = None) -> int:
        """
        Run the ping sweep.

        Args:
            args: Parsed command line arguments
            parser: Parser used to print usage on configuration errors

        Returns:
            int: Exit code (0 for a completed sweep, non-zero for failure)
        """
        resolver = self.resolver
        owns_resolver = resolver is None
        previous_handler = self._install_signal_handlers()
        try:
            config = self.load_config(args)
            request, detected = self.build_request(args, config)

            if self.prober is None and not args.skip_checks:
                if not self._perform_preflight_checks():
                    return EXIT_FAILURE

            prober = self.prober or PingProber(self.logger, slack=config.probe_slack)
            if resolver is None:
                if config.resolve_names:
                    resolver = SocketResolver(
                        timeout=config.resolve_timeout,
                        max_workers=config.max_workers,
                        logger=self.logger,
                    )
                else:
                    resolver = NullResolver()
            printer = self.printer or ReportPrinter(color=None if config.color else False)

            printer.write_line()
            if detected:
                printer.detected_prefix(request.prefix)
            printer.banner()

            coordinator = SweepCoordinator(
                prober,
                resolver,
                printer=printer,
                max_workers=config.max_workers,
                logger=self.logger,
            )
            coordinator.run(request)
            return EXIT_OK

        except ConfigurationError as e:
            self._report(e, ErrorType.CONFIGURATION_ERROR, "validate_arguments")
            if parser is not None:
                parser.print_usage(sys.stderr)
            return EXIT_FAILURE
        except DetectionError as e:
            self._report(e, ErrorType.DETECTION_ERROR, "detect_prefix")
            return EXIT_FAILURE
        except KeyboardInterrupt:
            self.logger.warning("Sweep interrupted by user")
            return EXIT_INTERRUPTED
        finally:
            error_summary = self.error_handler.get_error_summary()
            if error_summary:
                self.logger.debug("Errors handled during this run", **error_summary)
            if owns_resolver and resolver is not None:
                resolver.close()
            if previous_handler is not None:
                signal.signal(signal.SIGTERM, previous_handler)


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="pingsweep",
        description="Ping sweep - find reachable hosts in an address range or a numbered hostname range",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog="""
Examples:
  pingsweep -i 192.168.1
  pingsweep -i 10.0.0 -t 2
  pingsweep -d
  pingsweep -d -t 2
  pingsweep -n onyxnode- -r 1 -e 20
  pingsweep -n node -r 01 -e 12 -t 2
        """
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-i", "--ip",
        metavar="PREFIX",
        help="Network prefix for IP sweep (e.g., 192.168.1)"
    )
    mode.add_argument(
        "-d", "--detect",
        action="store_true",
        help="Auto-detect network prefix from this machine's IP"
    )
    mode.add_argument(
        "-n", "--hostname",
        metavar="PREFIX",
        help="Hostname prefix for hostname sweep (e.g., onyxnode-)"
    )

    parser.add_argument(
        "-r", "--range-start",
        metavar="START",
        help="Range start (required for hostname mode); its length sets the zero padding"
    )
    parser.add_argument(
        "-e", "--range-end",
        metavar="END",
        help="Range end (required for hostname mode)"
    )
    parser.add_argument(
        "-t", "--timeout",
        type=int,
        help="Ping timeout in seconds (default: 1)"
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        help="Maximum number of hosts probed at once (default: 64)"
    )
    parser.add_argument(
        "--resolve-timeout",
        type=float,
        help="Seconds to wait for a hostname/address lookup (default: 2)"
    )
    parser.add_argument(
        "--no-resolve",
        action="store_true",
        help="Do not look up names or addresses for reachable hosts"
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        help="Directory containing sweep_config.yml. Defaults to pingsweep/config/"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )
    parser.add_argument(
        "--skip-checks",
        action="store_true",
        help="Skip pre-flight check for the ping command"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging output"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pingsweep {__version__}"
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Display this help message and exit"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the ping sweep.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Help is a usage request, which exits non-zero
    if args.help:
        parser.print_help()
        return EXIT_FAILURE

    if args.verbose:
        set_log_level(LogLevel.DEBUG)

    app = PingSweepApp()
    return app.run(args, parser)


if __name__ == "__main__":
    sys.exit(main())
