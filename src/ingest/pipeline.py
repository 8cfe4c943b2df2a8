"""Monthly update orchestration.

This module runs the fail-fast monthly pipeline: locate the latest
input file, read and validate it, enrich every record, aggregate, and
publish the tables. Aggregation starts only after every record has
been transformed, so any failure leaves the output directory untouched.
"""

from __future__ import annotations

from core.config import StatsConfig
from core.logging_config import get_logger
from core.types import MonthlyUpdateResult
from ingest.file_locator import locate_latest_file
from ingest.schema_validator import validate_schema
from ingest.table_reader import read_table
from report.chart_writer import ChartWriter
from report.csv_writer import CsvTableWriter
from report.result_writer import ResultWriter, publish_results
from transforms.aggregation import aggregate_records
from transforms.record_transformer import transform_records

_LOGGER = get_logger(__name__)


def run_monthly_update(
    config: StatsConfig,
    writers: list[ResultWriter] | None = None,
) -> MonthlyUpdateResult:
    """Run the monthly statistics pipeline once.

    Args:
        config: Runtime configuration with input and output locations.
        writers: Optional writers replacing the default CSV and chart writers.

    Returns:
        Processed input path, aggregation outputs, and written files.

    Raises:
        NoInputFileError: If the input directory holds no supported file.
        UnsupportedFileTypeError: If the selected file has no parser.
        MalformedInputError: If the file cannot be parsed.
        SchemaValidationError: If required columns are missing.
        DateParseError: If a row has an unparseable date.
        RecordValueError: If a row lacks a usable age or council area.
        StatsOutputError: If outputs cannot be written.
    """
    input_path = locate_latest_file(config.data_dir)
    table = validate_schema(read_table(input_path))
    records = transform_records(table)
    aggregation = aggregate_records(records)
    active_writers = writers if writers is not None else build_default_writers(config)
    artifact_paths = publish_results(aggregation, active_writers)
    _LOGGER.info(
        "monthly_update_completed",
        input_path=str(input_path),
        output_dir=str(config.output_dir),
        total_records=aggregation.total_records,
        artifact_count=len(artifact_paths),
    )
    return MonthlyUpdateResult(
        input_path=input_path,
        aggregation=aggregation,
        artifact_paths=artifact_paths,
    )


def build_default_writers(config: StatsConfig) -> list[ResultWriter]:
    """Build the CSV writer plus the chart writer when charts are enabled."""
    writers: list[ResultWriter] = [CsvTableWriter(config.output_dir)]
    if config.render_charts:
        writers.append(ChartWriter(config.output_dir))
    return writers
