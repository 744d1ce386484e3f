"""I/O layer: parameter parsing, scenario generation, reports, and Parquet logs."""
