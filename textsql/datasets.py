"""Canned result tables standing in for real query execution."""

from textsql.models import QueryResult

COLUMNS = ["id", "name", "email", "created_at", "total_sales"]

# Column positions used by the chart projection.
NAME_COL = 1
CREATED_AT_COL = 3
TOTAL_SALES_COL = 4


def _table(rows: list[list]) -> QueryResult:
    return QueryResult(columns=list(COLUMNS), rows=rows)


TOP_PRODUCTS = _table([
    [1, "Premium Headphones", "electronics@example.com", "2023-05-15", 12500],
    [2, "Smartphone X", "mobile@example.com", "2023-06-20", 9800],
    [3, "Laptop Pro", "computers@example.com", "2023-04-10", 8400],
    [4, "Smart Watch", "wearables@example.com", "2023-07-05", 6200],
    [5, "Wireless Earbuds", "audio@example.com", "2023-03-22", 5100],
])

RECENT_SIGNUPS = _table([
    [101, "Emma Wilson", "emma@example.com", "2023-10-28", 1200],
    [102, "Michael Chen", "michael@example.com", "2023-10-25", 950],
    [103, "Sophia Rodriguez", "sophia@example.com", "2023-10-20", 1450],
    [104, "James Kim", "james@example.com", "2023-10-15", 800],
    [105, "Olivia Singh", "olivia@example.com", "2023-10-10", 1100],
])

HIGH_SPENDERS = _table([
    [201, "Robert Johnson", "robert@example.com", "2023-02-15", 3500],
    [202, "Jennifer Lopez", "jennifer@example.com", "2023-03-20", 2800],
    [203, "David Williams", "david@example.com", "2023-01-10", 4200],
    [204, "Sarah Brown", "sarah@example.com", "2023-04-05", 1800],
    [205, "Thomas Garcia", "thomas@example.com", "2023-05-12", 2100],
])

MONTHLY_AVERAGE = _table([
    [301, "January", "stats@example.com", "2023-01-31", 2200],
    [302, "February", "stats@example.com", "2023-02-28", 2400],
    [303, "March", "stats@example.com", "2023-03-31", 2100],
    [304, "April", "stats@example.com", "2023-04-30", 2600],
    [305, "May", "stats@example.com", "2023-05-31", 2800],
    [306, "June", "stats@example.com", "2023-06-30", 3100],
])

DEFAULT = _table([
    [1, "John Doe", "john@example.com", "2023-01-15", 5420],
    [2, "Jane Smith", "jane@example.com", "2023-02-20", 8750],
    [3, "Bob Johnson", "bob@example.com", "2023-03-25", 3200],
    [4, "Alice Brown", "alice@example.com", "2023-04-30", 6800],
    [5, "Charlie Davis", "charlie@example.com", "2023-05-05", 4300],
])

EXAMPLE_PROMPTS = [
    "Find all users who signed up in the last 30 days",
    "Show me the top 5 products with the highest sales",
    "List all customers who have spent more than $1000",
    "Find the average order value by month for the past year",
]
