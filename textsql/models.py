from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

ChartKind = Literal["bar", "pie", "line"]

Scalar = int | float | str


class QueryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    columns: list[str]
    rows: list[list[Scalar]]

    @model_validator(mode="after")
    def _rows_match_columns(self) -> "QueryResult":
        width = len(self.columns)
        for i, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"row {i} has {len(row)} values, expected {width}")
        return self


class ChartSpec(BaseModel):
    labels: list[str] = []
    series: list[float] = []
    title: str = "Data Visualization"
    kind: ChartKind = "bar"
    series_label: str = "Sales Amount ($)"
    background_color: str | list[str] = "rgba(99, 102, 241, 0.6)"
    border_color: str = "rgba(99, 102, 241, 1)"
    border_width: int = 1

    @model_validator(mode="after")
    def _series_matches_labels(self) -> "ChartSpec":
        if len(self.series) != len(self.labels):
            raise ValueError("labels and series must be the same length")
        return self


class SalesSummary(BaseModel):
    row_count: int = 0
    total_sales: float = 0.0
    average_sale: float = 0.0


class QueryRequest(BaseModel):
    prompt: str
    chart_kind: ChartKind | None = None


class ChartRequest(BaseModel):
    kind: ChartKind


class QueryResponse(BaseModel):
    prompt: str = ""
    accepted: bool = True
    sql: str = ""
    error: str = ""
    columns: list[str] = []
    rows: list[list[Scalar]] = []
    chart: ChartSpec | None = None
    summary: SalesSummary | None = None
    elapsed_s: float = 0.0
    model: str = ""
    busy: bool = False
