"""Consumers that drain generators into pandas DataFrames and Arrow tables."""

import logging
from typing import Iterator, List, Optional, TypeVar

import pandas as pd
import pyarrow as pa

from .generator import LazyGenerator
from .protocols import LoggerProtocol

T = TypeVar("T")


class ValueBatcher:
    """
    Pulls values from a generator and groups them into batches.

    Single Responsibility: Group generator values into batches.
    """

    def __init__(self, batch_size: int = 1000):
        """
        Initialize batcher.

        Args:
            batch_size: Number of values per batch
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.batch_size = batch_size

    def batch(self, generator: LazyGenerator[T]) -> Iterator[List[T]]:
        """
        Batch the values of a generator.

        Args:
            generator: Generator to drain

        Yields:
            Lists of values (batches)
        """
        batch: List[T] = []
        while not generator.is_exhausted():
            batch.append(generator.take_value())
            if len(batch) >= self.batch_size:
                yield batch
                batch = []

        # Yield remaining values
        if batch:
            yield batch


class DataFrameSink:
    """
    Collects generator values into pandas DataFrames and Arrow tables.

    Single Responsibility: Convert value batches to tabular form.
    """

    def __init__(self, column: str = "value", logger: Optional[LoggerProtocol] = None):
        """
        Initialize sink.

        Args:
            column: Name of the column holding the values
            logger: Logger instance
        """
        self.column = column
        self._logger = logger or logging.getLogger(__name__)

    @property
    def columns(self) -> List[str]:
        return ["position", self.column, "batch_number"]

    def transform(self, batches: Iterator[List[T]]) -> Iterator[pd.DataFrame]:
        """
        Transform batches to DataFrames.

        Args:
            batches: Iterator of value batches

        Yields:
            One DataFrame per batch, with position and batch_number columns
        """
        position = 0
        for batch_num, batch in enumerate(batches, 1):
            df = pd.DataFrame(
                {
                    "position": range(position, position + len(batch)),
                    self.column: batch,
                }
            )
            df["batch_number"] = batch_num
            position += len(batch)

            if self._logger:
                self._logger.debug(f"Created DataFrame batch {batch_num} with {len(df)} values")
            yield df

    def collect(self, generator: LazyGenerator[T], batch_size: int = 1000) -> pd.DataFrame:
        """
        Drain a generator into a single DataFrame.

        Args:
            generator: Generator to drain
            batch_size: Number of values per batch

        Returns:
            DataFrame with one row per value, in emission order
        """
        batches = ValueBatcher(batch_size).batch(generator)
        frames = list(self.transform(batches))

        if not frames:
            return pd.DataFrame(
                {
                    "position": pd.Series([], dtype="int64"),
                    self.column: pd.Series([], dtype="object"),
                    "batch_number": pd.Series([], dtype="int64"),
                }
            )

        df = pd.concat(frames, ignore_index=True)
        if self._logger:
            self._logger.info(
                f"Collected {len(df):,} values from {generator.name} in {len(frames)} batches"
            )
        return df

    def to_arrow_table(self, generator: LazyGenerator[T], batch_size: int = 1000) -> pa.Table:
        """
        Drain a generator into a PyArrow table.

        Args:
            generator: Generator to drain
            batch_size: Number of values per batch

        Returns:
            PyArrow Table with the same columns as collect()
        """
        df = self.collect(generator, batch_size)
        table = pa.Table.from_pandas(df, preserve_index=False)
        if self._logger:
            self._logger.debug(
                f"Created PyArrow table with {table.num_rows:,} rows and {table.num_columns} columns"
            )
        return table
