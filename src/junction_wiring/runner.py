"""Convenience helpers for running the wiring engine end-to-end."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .coordinates import Point
from .errors import JunctionWiringError
from .pipeline import BoundedResult, CircuitBuilder, CircuitBuilderConfig, ConnectedResult

COLUMNS = ["x", "y", "z"]


@dataclass
class WiringReport:
    """Answers to both queries for one input file."""

    bounded: BoundedResult | None
    connected: ConnectedResult


def solve_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: Optional[CircuitBuilderConfig] = None,
) -> WiringReport | None:
    """Run both queries on the points in `input_path`, optionally saving per-point circuit labels."""

    input_path = Path(input_path)
    try:
        points = load_points(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError as exc:
        print(f"ERROR: Could not read points from '{input_path}': {exc}")
        return None

    config = config or CircuitBuilderConfig()
    try:
        builder = CircuitBuilder(points, config)
    except JunctionWiringError as exc:
        print(f"ERROR: {exc}")
        return None

    bounded: BoundedResult | None
    try:
        bounded = builder.connect_bounded()
    except JunctionWiringError as exc:
        print(f"ERROR: {exc}")
        bounded = None

    try:
        connected = builder.connect_all()
    except JunctionWiringError as exc:
        print(f"ERROR: {exc}")
        return None

    if output_path is not None and bounded is not None:
        try:
            _save_dataframe(circuit_table(builder.store.array.tolist(), bounded), output_path)
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return None
        if config.verbose:
            print(f"\n   Processing complete. Results saved to '{output_path}'")

    return WiringReport(bounded=bounded, connected=connected)


def load_points(path: str | Path) -> List[Point]:
    """Read comma separated `x,y,z` rows (no header) from a text, CSV or Excel file."""

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in {".csv", ".txt", ""}:
        frame = pd.read_csv(path, header=None, skip_blank_lines=True)
    elif suffix == ".xlsx":
        frame = pd.read_excel(path, header=None)
    else:
        raise ValueError(f"unsupported format '{suffix}'")

    if frame.shape[1] != len(COLUMNS):
        raise ValueError(f"expected {len(COLUMNS)} columns, found {frame.shape[1]}")
    frame.columns = COLUMNS
    for column in COLUMNS:
        if not pd.api.types.is_integer_dtype(frame[column]):
            raise ValueError(f"column '{column}' contains non-integer values")
    return [(int(x), int(y), int(z)) for x, y, z in frame.itertuples(index=False, name=None)]


def circuit_table(points: List[List[int]], result: BoundedResult) -> pd.DataFrame:
    """Tabulate every point with the root and size of the circuit it ended up in."""

    forest = result.forest
    df = pd.DataFrame(points, columns=COLUMNS)
    df["cluster_id"] = df.index.map(forest.find)
    df["cluster_size"] = df["cluster_id"].map(forest.root_sizes())
    return df


def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix == ".xlsx":
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
