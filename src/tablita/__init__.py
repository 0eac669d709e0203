"""
Tablita: readable tables as text, Markdown or HTML

Turns tabular data into aligned console text, Markdown pipe tables or HTML,
with captions, subtitles, footers, column alignment, indented row groups and
automatic splitting of tables that are wider than the line.

Quick Start:
    >>> from tablita import export_table
    >>> data = {"Parameter": ["(Intercept)", "x"], "Coefficient": [2.5, -0.0312]}
    >>> print(export_table(data, caption="Model"))  # doctest: +SKIP
    Model

     Parameter  | Coefficient
    -------------------------
    (Intercept) |        2.50
    x           |       -0.03

    >>> # Markdown lines for a document pipeline
    >>> lines = export_table(data, format="md")

    >>> # Split wide tables at the configured line width
    >>> from tablita import TablitaConfig, config_context
    >>> with config_context(TablitaConfig(line_width=60)):
    ...     out = export_table(data, table_width="auto")

Installation:
    pip install tablita              # zero runtime dependencies
"""

from tablita.alignment import apply_alignment, parse_directive, resolve_alignment
from tablita.colors import colour, is_valid_colour
from tablita.config import (
    TablitaConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from tablita.decoration import StyledText, TableDecoration, resolve_decoration
from tablita.errors import (
    AlignmentError,
    RenderError,
    TablitaError,
    TableShapeError,
    UnsupportedFormatError,
)
from tablita.export import export_table, merge_for_html
from tablita.formatting import format_value
from tablita.indent import ExplicitRows, GroupMarker, apply_indent, choose_indent
from tablita.matrix import Alignment, CellMatrix, build_cell_matrix
from tablita.output import HtmlTable, MarkdownTable, TextTable
from tablita.renderers import HtmlRenderer, MarkdownRenderer, TableRenderer, TextRenderer
from tablita.split import SplitPlan, apply_split, plan_split
from tablita.table import NumericColumn, Table, TableMeta, TextColumn, column_from_values

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "export_table",
    "format_value",
    "merge_for_html",
    # Data model
    "Table",
    "TableMeta",
    "NumericColumn",
    "TextColumn",
    "column_from_values",
    "CellMatrix",
    "Alignment",
    "SplitPlan",
    # Decoration
    "StyledText",
    "TableDecoration",
    "resolve_decoration",
    "colour",
    "is_valid_colour",
    # Layout steps
    "build_cell_matrix",
    "parse_directive",
    "resolve_alignment",
    "apply_alignment",
    "GroupMarker",
    "ExplicitRows",
    "choose_indent",
    "apply_indent",
    "plan_split",
    "apply_split",
    # Renderers
    "TableRenderer",
    "TextRenderer",
    "MarkdownRenderer",
    "HtmlRenderer",
    # Outputs
    "TextTable",
    "MarkdownTable",
    "HtmlTable",
    # Configuration (ContextVar-based)
    "TablitaConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
    # Errors
    "TablitaError",
    "TableShapeError",
    "UnsupportedFormatError",
    "AlignmentError",
    "RenderError",
]
