import pandas as pd
import pytest
from ptp_calc.dataio import DataValidationError, assess_frame, parse_csv_content, read_patients


def test_assess_frame():
    df = pd.DataFrame(
        {
            "age": [45, 25, None, 104],
            "sex": ["men", "men", "women", "men"],
            "symptom": ["chestPain", "chestPain", "dyspnea", "dyspnea"],
            "cac": [None, 50, 1500, -1],
        }
    )
    results = assess_frame(df)
    assert list(results["ptp_ok"]) == [True, False, False, True]
    assert results.loc[0, "ptp_percent"] == 22
    assert results.loc[0, "ptp_category"] == "intermediateHigh"
    assert pd.isna(results.loc[0, "cac_range"])
    assert results.loc[1, "age_band"] == "lt30"
    assert results.loc[1, "cac_category"] == "low"
    assert "Age is required" in results.loc[2, "flags"]
    assert results.loc[2, "cac_range"] == ">50%"
    assert results.loc[3, "flags"] == "Age >100: verify input.; CAC input invalid (must be ≥0)."


def test_assess_frame_without_cac_column():
    df = pd.DataFrame({"age": [35], "sex": ["women"], "symptom": ["dyspnea"]})
    results = assess_frame(df)
    assert results.loc[0, "ptp_display"] == "≤3%"
    assert results.loc[0, "flags"] == ""


def test_assess_frame_missing_columns():
    df = pd.DataFrame({"age": [45], "sex": ["men"]})
    with pytest.raises(ValueError, match="Missing required columns"):
        assess_frame(df)


def test_read_patients_normalizes_columns(tmp_path):
    path = tmp_path / "patients.csv"
    path.write_text(" Age ,SEX,Symptom\n45,men,chestPain\n")
    df = read_patients(path)
    assert list(df.columns) == ["age", "sex", "symptom"]


def test_parse_csv_content_non_numeric_age():
    df = parse_csv_content(b"age,sex,symptom\nabc,men,chestPain\n50,women,dyspnea\n", "upload.csv")
    results = assess_frame(df)
    assert list(results["ptp_ok"]) == [False, True]
    assert results.loc[1, "ptp_percent"] == 9


def test_parse_csv_content_empty():
    with pytest.raises(DataValidationError):
        parse_csv_content(b"", "empty.csv")


def test_parse_csv_content_header_only():
    with pytest.raises(DataValidationError, match="is empty"):
        parse_csv_content(b"age,sex,symptom\n", "header.csv")


def test_percent_stays_integer_when_some_rows_fail(tmp_path):
    df = pd.DataFrame({"age": [45, 25], "sex": ["men", "men"], "symptom": ["chestPain", "chestPain"]})
    results = assess_frame(df)
    assert str(results["ptp_percent"].dtype) == "Int64"
    assert pd.isna(results.loc[1, "ptp_percent"])

    path = tmp_path / "results.csv"
    results.to_csv(path, index=False)
    content = path.read_text(encoding="utf-8")
    assert ",22," in content
    assert "22.0" not in content


def test_reassessing_results_replaces_result_columns():
    df = pd.DataFrame({"age": [45, 25], "sex": ["men", "women"], "symptom": ["chestPain", "dyspnea"]})
    first = assess_frame(df)
    second = assess_frame(first)
    assert list(second.columns) == list(first.columns)
    assert list(second["ptp_ok"]) == [True, False]
    assert second.loc[0, "ptp_percent"] == 22


def test_read_patients_latin1(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes("name,age,sex,symptom\nJosé,45,men,chestPain\n".encode("latin-1"))
    df = read_patients(path)
    assert df.loc[0, "name"] == "José"


def test_read_patients_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_bytes(b"")
    with pytest.raises(DataValidationError, match="contains no data"):
        read_patients(path)
