from pathlib import Path
import pandas as pd

# The source files carry an unnamed leading row-index column.
INDEX_COLUMN = "X"


def read_raw_csv(file_path: str | Path) -> pd.DataFrame:
    df = pd.read_csv(file_path, low_memory=False)
    first = df.columns[0] if len(df.columns) else None
    if first is not None and (first == "" or str(first).startswith("Unnamed: 0")):
        df = df.rename(columns={first: INDEX_COLUMN})
    return df
