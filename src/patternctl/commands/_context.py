"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings
    from patternctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: PatternSettings) -> None:
        self.settings = settings

        # Configure structured logging
        from patternctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        # Stage timings are collected only under --verbose
        if settings.verbose:
            from patternctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult, *, fatal: bool = True) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr and exits with code 1; with
          ``fatal=False`` writes to stdout and returns normally instead.
        """
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                self._echo_warnings(result)
        elif not fatal:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_lines(self, result: ServiceResult) -> None:
        """Print the lines a checkout/export produced, one per line.

        Pipe-friendly: stdout carries only ``result.data["lines"]``. JSON
        mode and failures go through :meth:`emit`. In verbose mode the
        rendered summary (with timings) follows on stderr.
        """
        if self.settings.json_output or not result.ok:
            self.emit(result)
            return

        for line in result.lines:
            click.echo(line)
        self._echo_warnings(result)
        if self.settings.verbose:
            click.echo(format_result(result, settings=self.output_settings), err=True)

    @staticmethod
    def _echo_warnings(result: ServiceResult) -> None:
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
