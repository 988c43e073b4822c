import pandas as pd
import pytest
import requests

from wle_ml.dataio import download
from wle_ml.dataio.download import DataDownloadError, fetch_dataset
from wle_ml.dataio.readers import read_raw_csv


class FakeResponse:
    def __init__(self, body: bytes = b"", status_code: int = 200):
        self.body = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i : i + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_read_raw_csv_names_index_column(tmp_path, raw_training):
    path = tmp_path / "pml-training.csv"
    raw_training.drop(columns=["X"]).to_csv(path)

    df = read_raw_csv(path)
    assert df.columns[0] == "X"
    assert len(df) == len(raw_training)
    assert "#DIV/0!" in set(df["kurtosis_yaw_belt"].dropna())


def test_fetch_dataset_downloads_missing_file(tmp_path, monkeypatch):
    calls = []

    def fake_get(url, stream, timeout):
        calls.append(url)
        return FakeResponse(b"a,b\n1,2\n")

    monkeypatch.setattr(download.requests, "get", fake_get)
    dest = tmp_path / "nested" / "data.csv"

    assert fetch_dataset("https://example.org/data.csv", dest) == dest
    assert dest.read_text() == "a,b\n1,2\n"
    assert calls == ["https://example.org/data.csv"]
    assert not dest.with_name("data.csv.part").exists()


def test_fetch_dataset_skips_existing_file(tmp_path, monkeypatch):
    dest = tmp_path / "data.csv"
    dest.write_text("cached")

    def fail_get(*args, **kwargs):
        raise AssertionError("should not download")

    monkeypatch.setattr(download.requests, "get", fail_get)
    fetch_dataset("https://example.org/data.csv", dest)
    assert dest.read_text() == "cached"


def test_fetch_dataset_http_error(tmp_path, monkeypatch):
    monkeypatch.setattr(download.requests, "get", lambda *a, **k: FakeResponse(status_code=404))
    dest = tmp_path / "data.csv"

    with pytest.raises(DataDownloadError, match="Failed to download"):
        fetch_dataset("https://example.org/missing.csv", dest)
    assert not dest.exists()
    assert not dest.with_name("data.csv.part").exists()


def test_fetch_dataset_connection_error(tmp_path, monkeypatch):
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(download.requests, "get", refuse)
    with pytest.raises(DataDownloadError):
        fetch_dataset("https://example.org/data.csv", tmp_path / "data.csv")
