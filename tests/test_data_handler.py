import numpy as np
import pytest
from core.data_handler import CSVDataHandler
from core.errors import InvalidInputError

def write_ohlcv(path, closes):
    lines = ["timestamp,open,high,low,close,volume"]
    for i, close in enumerate(closes):
        lines.append(f"{i},{close},{close + 1},{close - 1},{close},10")
    path.write_text("\n".join(lines) + "\n")
    return path

def test_reads_close_column(tmp_path):
    csv = write_ohlcv(tmp_path / "prices.csv", [100.0, 101.5, 99.25])

    closes = CSVDataHandler(csv).get_close_prices()

    assert isinstance(closes, np.ndarray)
    assert closes.tolist() == [100.0, 101.5, 99.25]

def test_other_column(tmp_path):
    csv = write_ohlcv(tmp_path / "prices.csv", [100.0, 200.0])
    highs = CSVDataHandler(csv, close_column=2).get_close_prices()
    assert highs.tolist() == [101.0, 201.0]

def test_missing_rows_are_dropped(tmp_path):
    csv = tmp_path / "gaps.csv"
    csv.write_text("timestamp,open,high,low,close,volume\n0,1,1,1,10.0,5\n1,1,1,1,,5\n2,1,1,1,12.0,5\n")

    assert CSVDataHandler(csv).get_close_prices().tolist() == [10.0, 12.0]

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CSVDataHandler(tmp_path / "absent.csv").get_close_prices()

def test_missing_column(tmp_path):
    csv = tmp_path / "short.csv"
    csv.write_text("timestamp,close\n0,10.0\n")

    with pytest.raises(InvalidInputError):
        CSVDataHandler(csv).get_close_prices()

def test_non_numeric_column(tmp_path):
    csv = tmp_path / "text.csv"
    csv.write_text("timestamp,open,high,low,close,volume\n0,1,1,1,abc,5\n")

    with pytest.raises(InvalidInputError):
        CSVDataHandler(csv).get_close_prices()

def test_empty_file(tmp_path):
    csv = tmp_path / "empty.csv"
    csv.write_text("")

    with pytest.raises(InvalidInputError):
        CSVDataHandler(csv).get_close_prices()

def test_malformed_file(tmp_path):
    # Ligne 3 : plus de champs que l'en-tête -> erreur du parseur
    csv = tmp_path / "broken.csv"
    csv.write_text("timestamp,open,high,low,close,volume\n0,1,1,1,10.0,5\n1,1,1,1,11.0,5,7,8\n")

    with pytest.raises(InvalidInputError):
        CSVDataHandler(csv).get_close_prices()
