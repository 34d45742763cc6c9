"""
===========================================================
owid.py
Last Updated: 2026-10-18
===========================================================

Description:
    Loader for the Our World in Data (OWID) COVID-19 dataset and
    helpers to turn it into tidy per-location series:
        - load_owid_covid(): fetch (URL or local file) and parse
        - select_locations(): subset for the data explorer plot
        - vaccinated_fraction(): total_vaccinations / population
          since a start date, the observable for growth fitting

Notes:
    - One fetch, no retry, no caching. A failed request or an
      unreadable body raises RuntimeError.
    - Column names used: date, location, population,
      total_cases, total_vaccinations.
-----------------------------------------------------------
License: MIT
===========================================================
"""

from __future__ import annotations
import io
from pathlib import Path
from typing import Optional, Sequence
import pandas as pd
import requests

OWID_COVID_CSV = "https://covid.ourworldindata.org/data/owid-covid-data.csv"


def load_owid_covid(source: str | Path = OWID_COVID_CSV, timeout_s: int = 30) -> pd.DataFrame:
    """
    Load the OWID COVID-19 table from a URL or a local CSV file.

    Returns the full table with 'date' parsed as datetime64.
    """
    p = Path(str(source))
    if p.exists():
        try:
            df = pd.read_csv(p, parse_dates=["date"])
        except pd.errors.EmptyDataError as e:
            raise RuntimeError(f"File exists but is empty: {p}") from e
        return _check_columns(df, str(p))

    headers = {"User-Agent": "Mozilla/5.0 (popmodels-owid-loader)"}
    try:
        resp = requests.get(str(source), headers=headers, timeout=timeout_s)
    except requests.RequestException as e:
        raise RuntimeError(f"Failed to fetch URL: {source}\n{e}") from e

    if resp.status_code != 200:
        raise RuntimeError(f"HTTP {resp.status_code} fetching {source}")

    content = resp.content or b""
    if not content.strip():
        raise RuntimeError(f"Empty response from {source}")

    try:
        df = pd.read_csv(io.BytesIO(content), parse_dates=["date"])
    except (pd.errors.EmptyDataError, pd.errors.ParserError, ValueError) as e:
        raise RuntimeError(f"Response from {source} is not a readable OWID CSV: {e}") from e
    return _check_columns(df, str(source))


def _check_columns(df: pd.DataFrame, origin: str) -> pd.DataFrame:
    missing = {"date", "location"} - set(df.columns)
    if missing:
        raise RuntimeError(f"{origin} is missing columns {sorted(missing)}")
    return df


def select_locations(
    df: pd.DataFrame,
    locations: Sequence[str] = ("Austria",),
    columns: Sequence[str] = ("total_cases",),
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> pd.DataFrame:
    """
    Tidy subset: date, location and the requested columns, sorted by
    location then date, optionally restricted to [start, end].
    """
    unknown = [c for c in columns if c not in df.columns]
    if unknown:
        raise KeyError(f"Columns not in dataset: {unknown}")
    sub = df.loc[df["location"].isin(list(locations)), ["date", "location", *columns]]
    if start:
        sub = sub[sub["date"] >= pd.to_datetime(start)]
    if end:
        sub = sub[sub["date"] <= pd.to_datetime(end)]
    return sub.sort_values(["location", "date"]).reset_index(drop=True)


def vaccinated_fraction(
    df: pd.DataFrame,
    location: str = "Austria",
    start: str = "2021-01-01",
    end: Optional[str] = None,
) -> pd.DataFrame:
    """
    Vaccinations per head of population for one location.

    Return columns:
        date (datetime64[ns])
        t (float)              # days since the first included date
        vaccinated (float)     # total_vaccinations / population
    Rows without a reported total are dropped.
    """
    sub = select_locations(df, [location], ["total_vaccinations", "population"], start=start, end=end)
    sub = sub.dropna(subset=["total_vaccinations"]).copy()
    if sub.empty:
        raise ValueError(f"No vaccination data for {location} from {start}")

    # population is constant per location
    sub["population"] = sub["population"].ffill().bfill()
    sub["vaccinated"] = sub["total_vaccinations"].astype(float) / sub["population"].astype(float)

    sub = sub.reset_index(drop=True)
    sub["t"] = (sub["date"] - sub["date"].iloc[0]).dt.days.astype(float)
    return sub[["date", "t", "vaccinated"]]
