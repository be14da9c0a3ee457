"""Keyword rules mapping a prompt to a canned dataset and a chart projection.

Each classifier is an ordered list of (predicate, outcome) pairs evaluated
top to bottom against the lower-cased prompt. The first match wins, and the
last entry always matches.
"""

import logging
from collections.abc import Callable

from textsql import datasets
from textsql.colors import ColorProvider
from textsql.datasets import CREATED_AT_COL, NAME_COL, TOTAL_SALES_COL
from textsql.models import ChartKind, ChartSpec, QueryResult, SalesSummary

log = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


def all_of(*words: str) -> Predicate:
    return lambda text: all(w in text for w in words)


def any_of(*words: str) -> Predicate:
    return lambda text: any(w in text for w in words)


def always(text: str) -> bool:
    return True


DATASET_RULES: list[tuple[Predicate, QueryResult]] = [
    (all_of("top 5", "product"), datasets.TOP_PRODUCTS),
    (any_of("last 30 days", "last month"), datasets.RECENT_SIGNUPS),
    (any_of("spent more than", "$1000"), datasets.HIGH_SPENDERS),
    (all_of("average", "month"), datasets.MONTHLY_AVERAGE),
    (always, datasets.DEFAULT),
]

# (label column, value column)
COLUMN_RULES: list[tuple[Predicate, tuple[int, int]]] = [
    (any_of("user", "customer"), (NAME_COL, TOTAL_SALES_COL)),
    (any_of("product", "sale"), (NAME_COL, TOTAL_SALES_COL)),
    (any_of("month", "year", "date"), (CREATED_AT_COL, TOTAL_SALES_COL)),
    (always, (NAME_COL, TOTAL_SALES_COL)),
]

TITLE_RULES: list[tuple[Predicate, str]] = [
    (any_of("sale"), "Sales by Customer"),
    (any_of("product"), "Product Performance"),
    (any_of("month", "year"), "Time-based Analysis"),
    (always, "Data Visualization"),
]

_SERIES_FILL = "rgba(99, 102, 241, 0.6)"
_BORDER = "rgba(99, 102, 241, 1)"
_LINE_BORDER = "rgb(99, 102, 241)"


def _first_match(rules, prompt: str):
    lower = prompt.lower()
    for predicate, outcome in rules:
        if predicate(lower):
            return outcome
    raise LookupError("rule table has no catch-all entry")


def select_dataset(prompt: str) -> QueryResult:
    # Callers get their own copy; the canned tables are shared module state.
    return _first_match(DATASET_RULES, prompt).model_copy(deep=True)


def select_columns(prompt: str) -> tuple[int, int]:
    return _first_match(COLUMN_RULES, prompt)


def chart_title(prompt: str) -> str:
    return _first_match(TITLE_RULES, prompt)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_chart_spec(
    result: QueryResult,
    prompt: str,
    kind: ChartKind = "bar",
    colors: ColorProvider | None = None,
) -> ChartSpec:
    """Project `result` into a chart.

    A result with no rows, or too few columns for the selected pair, gives an
    empty chart. Rows whose value column is not a number are left out.
    """
    label_col, value_col = select_columns(prompt)
    labels: list[str] = []
    series: list[float] = []
    if len(result.columns) > max(label_col, value_col):
        for row in result.rows:
            if _is_number(row[value_col]):
                labels.append(str(row[label_col]))
                series.append(float(row[value_col]))
    else:
        log.warning(
            "Result has %d columns, chart needs columns %d and %d; drawing nothing",
            len(result.columns),
            label_col,
            value_col,
        )

    if kind == "pie":
        background: str | list[str] = (colors or ColorProvider()).rgba(len(labels))
    else:
        background = _SERIES_FILL

    return ChartSpec(
        labels=labels,
        series=series,
        title=chart_title(prompt),
        kind=kind,
        background_color=background,
        border_color=_LINE_BORDER if kind == "line" else _BORDER,
    )


def summarize(result: QueryResult) -> SalesSummary:
    """Total and average of the sales column."""
    total = 0.0
    if len(result.columns) > TOTAL_SALES_COL:
        for row in result.rows:
            value = row[TOTAL_SALES_COL]
            if _is_number(value):
                total += value
    count = len(result.rows)
    return SalesSummary(
        row_count=count,
        total_sales=total,
        average_sale=round(total / (count or 1), 2),
    )
