"""
Delimited-text analyzer.

Profiles CSV/TSV content and projects the profile into an outline:
one "Columns" section with a child per column.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from docoutline.analyzers.base import BaseAnalyzer
from docoutline.core.outline import GeneratorOptions, OutlineNode
from docoutline.hierarchy.filters import filter_by_depth
from docoutline.hierarchy.identifiers import generate_id
from docoutline.tabular.config import TabularConfig
from docoutline.tabular.inference import build_profile
from docoutline.tabular.profile import ColumnProfile, InferredType, TabularProfile

logger = logging.getLogger(__name__)

COLUMNS_SECTION_ID = "csv-columns"


def _column_metadata(column: ColumnProfile) -> dict[str, Any]:
    metadata: dict[str, Any] = {
        "index": column.index,
        "type": column.inferred_type.value,
        "nullable": column.nullable,
        "unique_values": column.unique_value_count,
        "sample_values": list(column.sample_values),
        "min_length": column.min_length,
        "max_length": column.max_length,
        "avg_length": round(column.avg_length, 2),
    }
    if column.inferred_type is InferredType.NUMBER:
        metadata.update(min=column.min, max=column.max, avg=column.avg, median=column.median)
    return metadata


def profile_to_outline(
    profile: TabularProfile, options: GeneratorOptions | None = None
) -> list[OutlineNode]:
    """Project a tabular profile into outline nodes.

    Args:
        profile: Profile from build_profile.
        options: Generator options (only max_depth applies).

    Returns:
        A single "Columns" section, or an empty list when there are no columns.
    """
    opts = options or GeneratorOptions()
    if not profile.columns:
        return []

    section = OutlineNode(
        title="Columns",
        type="section",
        depth=1,
        id=COLUMNS_SECTION_ID,
        metadata={
            "count": len(profile.columns),
            "delimiter": profile.delimiter,
            "has_header": profile.has_header,
            "total_rows": profile.total_row_count,
            "data_rows": profile.data_row_count,
        },
    )

    for column in profile.columns:
        section.add_child(
            OutlineNode(
                title=column.name,
                type=f"{column.inferred_type.value}_column",
                depth=2,
                id=generate_id(column.name, "column", column.index or None),
                metadata=_column_metadata(column),
            )
        )

    return filter_by_depth([section], opts.max_depth)


class TabularAnalyzer(BaseAnalyzer):
    """
    Analyze delimited text (CSV, TSV and similar).

    Infers the delimiter, whether a header row is present, and a type
    plus summary statistics for every column.
    """

    SUPPORTED_DISCRIMINATORS: ClassVar[tuple[str, ...]] = ("csv", "tsv")
    ANALYZER_NAME: ClassVar[str] = "tabular"

    def __init__(self, config: TabularConfig | None = None) -> None:
        self.config = config or TabularConfig()

    def profile(self, content: str) -> TabularProfile:
        """Infer the structure of the content without projecting it."""
        return build_profile(content, self.config)

    def analyze(self, content: str, options: GeneratorOptions | None = None) -> list[OutlineNode]:
        profile = self.profile(content)
        logger.debug(
            "Tabular profile: %d rows, %d columns, delimiter=%r, header=%s",
            profile.total_row_count,
            profile.column_count,
            profile.delimiter,
            profile.has_header,
        )
        return profile_to_outline(profile, options)
