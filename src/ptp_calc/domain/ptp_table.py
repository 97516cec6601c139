"""
Pretest probability reference table.

Values are transcribed from the ACC/AHA 2021 chest pain guideline figure
(percent). Some cells are printed with "≤" in the figure; the numeric value
is stored and the display string adds the prefix.
"""

from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping

from .age_bands import AgeBand, TABLE_BANDS


class Symptom(str, Enum):
    CHEST_PAIN = "chestPain"
    DYSPNEA = "dyspnea"

    @classmethod
    def parse(cls, value) -> "Symptom | None":
        return _parse_member(cls, value)


class Sex(str, Enum):
    MEN = "men"
    WOMEN = "women"

    @classmethod
    def parse(cls, value) -> "Sex | None":
        return _parse_member(cls, value)


def _parse_member(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _freeze(rows: dict) -> Mapping:
    return MappingProxyType(
        {
            symptom: MappingProxyType({sex: MappingProxyType(dict(bands)) for sex, bands in by_sex.items()})
            for symptom, by_sex in rows.items()
        }
    )


def _row(*percents: int) -> dict:
    return dict(zip(TABLE_BANDS, percents))


PTP_TABLE: Mapping[Symptom, Mapping[Sex, Mapping[AgeBand, int]]] = _freeze(
    {
        Symptom.CHEST_PAIN: {
            Sex.MEN: _row(4, 22, 32, 44, 52),
            Sex.WOMEN: _row(5, 10, 13, 16, 27),
        },
        Symptom.DYSPNEA: {
            Sex.MEN: _row(0, 12, 20, 27, 32),
            Sex.WOMEN: _row(3, 3, 9, 14, 12),
        },
    }
)


def lookup_ptp(symptom: Symptom, sex: Sex, band: AgeBand) -> int | None:
    return PTP_TABLE.get(symptom, {}).get(sex, {}).get(band)


def table_rows() -> Iterator[tuple[Symptom, Sex, AgeBand, int]]:
    for symptom, by_sex in PTP_TABLE.items():
        for sex, by_band in by_sex.items():
            for band, percent in by_band.items():
                yield symptom, sex, band, percent


def table_frame():
    """Reference table as a DataFrame, one row per symptom/sex and one column per age band."""
    import pandas as pd

    records = [
        {"symptom": symptom.value, "sex": sex.value, "age_band": band.value, "percent": percent}
        for symptom, sex, band, percent in table_rows()
    ]
    df = pd.DataFrame.from_records(records)
    pivot = df.pivot(index=["symptom", "sex"], columns="age_band", values="percent")
    return pivot[[band.value for band in TABLE_BANDS]]
