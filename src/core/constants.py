"""Core constants used across monthly-stats modules.

This module centralizes file names, column names, and classification
bounds so business logic never carries magic literals.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_DIR = Path("data")
DEFAULT_OUTPUT_DIR = Path("outputs")
SUPPORTED_INPUT_EXTENSIONS = ("csv", "tsv", "txt", "xlsx", "xls")
MISSING_CELL_VALUES = ("", "NA")
REQUIRED_COLUMNS = ("date", "age", "council_area")
DATE_COLUMN = "date"
AGE_COLUMN = "age"
COUNCIL_AREA_COLUMN = "council_area"
SUPPORTED_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d", "%Y%m%d")
AGE_GROUP_BOUNDARIES = ((20, "0-19"), (40, "20-39"), (65, "40-64"))
OLDEST_AGE_GROUP = "65+"
MONTHLY_SUMMARY_TABLE = "monthly_statistics"
TOTALS_BY_COUNCIL_TABLE = "total_deaths_by_council"
TOTALS_BY_AGE_GROUP_TABLE = "total_deaths_by_age_group"
COUNTS_BY_MONTH_TABLE = "counts_by_month"
TABLE_COLUMNS = {
    MONTHLY_SUMMARY_TABLE: ("month", "council_area", "age_group", "n"),
    TOTALS_BY_COUNCIL_TABLE: ("council_area", "total_deaths"),
    TOTALS_BY_AGE_GROUP_TABLE: ("age_group", "total_deaths_age"),
    COUNTS_BY_MONTH_TABLE: ("month", "n"),
}
CSV_TABLE_NAMES = (
    MONTHLY_SUMMARY_TABLE,
    TOTALS_BY_COUNCIL_TABLE,
    TOTALS_BY_AGE_GROUP_TABLE,
)
MONTHLY_PLOT_NAME = "monthly_plot"
COUNCIL_STACKED_PLOT_NAME = "deaths_by_council_stacked"
AGE_GROUP_STACKED_PLOT_NAME = "deaths_by_agegroup_stacked"
CHART_FILE_SUFFIX = ".png"
CHART_SIZE_INCHES = (6, 4)
SUCCESS_MESSAGE = "Monthly update completed successfully."
RUN_CONFIG_VERSION = 1
VERIFICATION_REPORT_FILE_NAME = "verification_report.json"
