from typing import List, Optional

from pydantic import BaseModel


class CandleOut(BaseModel):
    year: str
    open: float
    high: float
    low: float
    close: float


class HistogramPointOut(BaseModel):
    year: int
    value: float


class PredictionOut(BaseModel):
    year: int
    value: float


class RegionsResponse(BaseModel):
    regions: List[str]


class CandleSeriesResponse(BaseModel):
    region: str
    shown: int
    total: int
    notice: Optional[str] = None
    candles: List[CandleOut]
    chart: List[str]


class HistogramResponse(BaseModel):
    region: str
    mode: str
    shown: int
    total: int
    notice: Optional[str] = None
    points: List[HistogramPointOut]
    chart: List[str]


class ForecastResponse(BaseModel):
    region: str
    slope: float
    intercept: float
    predictions: List[PredictionOut]
    chart: List[str]
