"""Command group: export the sample documents or financial records (Visitor demo)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternGroup
from patternctl.domain.types import DocumentFormat, RecordFormat

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  patternctl export documents
  patternctl export documents --format markdown
  patternctl export records
  patternctl --json export records --format json"""


@click.group(cls=PatternGroup, examples=_EXPORT_EXAMPLES)
def export() -> None:
    """Render sample elements through an exporter visitor."""


@export.command(
    examples="""\
  patternctl export documents
  patternctl export documents --format markdown > page.md"""
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice([str(f) for f in DocumentFormat], case_sensitive=False),
    default=None,
    help="Output format (default: [export] document_format, 'html').",
)
@click.pass_obj
def documents(app: AppContext, fmt: str | None) -> None:
    """Export the sample document elements."""
    from patternctl.domain.samples import sample_documents
    from patternctl.services.export import ExportService

    app.emit_lines(ExportService(app.settings).export_documents(sample_documents(), fmt=fmt))


@export.command(
    examples="""\
  patternctl export records
  patternctl export records --format json"""
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice([str(f) for f in RecordFormat], case_sensitive=False),
    default=None,
    help="Output format (default: [export] record_format, 'csv').",
)
@click.pass_obj
def records(app: AppContext, fmt: str | None) -> None:
    """Export the sample financial records."""
    from patternctl.domain.samples import sample_records
    from patternctl.services.export import ExportService

    app.emit_lines(ExportService(app.settings).export_records(sample_records(), fmt=fmt))
