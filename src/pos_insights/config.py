"""Unified configuration for POS Insights.

This module provides the filesystem configuration used by the CSV record
repository and the reporting CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pos_insights.exceptions import ConfigError

DATA_ROOT_ENV = "POS_INSIGHTS_DATA_ROOT"


@dataclass
class DataPaths:
    """All filesystem paths used to read point-of-sale records.

    Attributes:
        data_root: Root directory for all record layers.

    Directory Structure:
        data_root/
        └── b_clean/
            ├── sales/            # fact_sales_record_line.csv
            └── register_close/   # fact_register_close_daily.csv
    """

    data_root: Path

    @classmethod
    def from_root(cls, data_root: str | Path) -> DataPaths:
        """Create DataPaths from a root directory.

        Args:
            data_root: Root directory for record data.

        Returns:
            DataPaths instance.

        Examples:
            >>> paths = DataPaths.from_root("data")
            >>> paths.data_root
            PosixPath('data')
        """
        if isinstance(data_root, str):
            data_root = Path(data_root)

        return cls(data_root=data_root)

    @classmethod
    def from_env(cls) -> DataPaths:
        """Create DataPaths from the ``POS_INSIGHTS_DATA_ROOT`` environment variable.

        Raises:
            ConfigError: If the variable is unset or empty.
        """
        value = os.environ.get(DATA_ROOT_ENV, "").strip().strip('"').strip("'")
        if not value:
            raise ConfigError(f"{DATA_ROOT_ENV} is not set; pass a data root explicitly.")
        return cls.from_root(value)

    @property
    def clean_sales(self) -> Path:
        """Silver layer: transaction-line facts."""
        return self.data_root / "b_clean" / "sales"

    @property
    def clean_register_close(self) -> Path:
        """Silver layer: daily register-close facts."""
        return self.data_root / "b_clean" / "register_close"

    @property
    def transaction_lines_csv(self) -> Path:
        return self.clean_sales / "fact_sales_record_line.csv"

    @property
    def register_closes_csv(self) -> Path:
        return self.clean_register_close / "fact_register_close_daily.csv"

    def ensure_dirs(self) -> None:
        """Create all directories in the data structure."""
        for path in [self.clean_sales, self.clean_register_close]:
            path.mkdir(parents=True, exist_ok=True)
