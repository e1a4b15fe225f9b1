"""
Shared fixture table for the filter/summary logic.

The server (SQL) and the client (pure Python) implementations are both
checked against these rows and expectations so they cannot drift apart.
Rows are listed in insertion order.
"""

ROWS = [
    # key, type, amount, category, description, date
    ("salary", "income", 1000, "Salary", "January pay", "2024-01-01"),
    ("food1", "expense", 200, "Food", "", "2024-01-02"),
    ("rent", "expense", 500, "Housing", "", "2024-01-05"),
    ("gift", "income", 50, "", "", "2024-01-05"),
    ("misc", "expense", 30, "", "coffee", "2024-01-05"),
    ("food2", "expense", 45.5, "Food", "", "2024-02-10"),
    ("freelance", "income", 300, "Freelance", "", "2024-02-10"),
]

ALL_NEWEST_FIRST = ["freelance", "food2", "misc", "gift", "rent", "food1", "salary"]

ALL_BY_CATEGORY = {"Food": 245.5, "Housing": 500, "Uncategorized": 30}

# name, filters, expected keys (in order), expected summary
CASES = [
    ("no filter", {},
     ALL_NEWEST_FIRST,
     {"totalIncome": 1350, "totalExpense": 775.5, "byCategory": ALL_BY_CATEGORY}),
    ("all sentinels", {"type": "all", "category": "all"},
     ALL_NEWEST_FIRST,
     {"totalIncome": 1350, "totalExpense": 775.5, "byCategory": ALL_BY_CATEGORY}),
    ("expenses only", {"type": "expense"},
     ["food2", "misc", "rent", "food1"],
     {"totalIncome": 0, "totalExpense": 775.5, "byCategory": ALL_BY_CATEGORY}),
    ("income only zeroes expense", {"type": "income"},
     ["freelance", "gift", "salary"],
     {"totalIncome": 1350, "totalExpense": 0, "byCategory": {}}),
    ("single category", {"category": "Food"},
     ["food2", "food1"],
     {"totalIncome": 0, "totalExpense": 245.5, "byCategory": {"Food": 245.5}}),
    ("lower bound inclusive", {"from": "2024-01-05"},
     ["freelance", "food2", "misc", "gift", "rent"],
     {"totalIncome": 350, "totalExpense": 575.5,
      "byCategory": {"Food": 45.5, "Housing": 500, "Uncategorized": 30}}),
    ("upper bound inclusive", {"to": "2024-01-05"},
     ["misc", "gift", "rent", "food1", "salary"],
     {"totalIncome": 1050, "totalExpense": 730,
      "byCategory": {"Food": 200, "Housing": 500, "Uncategorized": 30}}),
    ("range and type", {"from": "2024-01-02", "to": "2024-01-05", "type": "expense"},
     ["misc", "rent", "food1"],
     {"totalIncome": 0, "totalExpense": 730,
      "byCategory": {"Food": 200, "Housing": 500, "Uncategorized": 30}}),
    ("unknown category", {"category": "Travel"},
     [],
     {"totalIncome": 0, "totalExpense": 0, "byCategory": {}}),
    ("empty range", {"from": "2024-03-01"},
     [],
     {"totalIncome": 0, "totalExpense": 0, "byCategory": {}}),
]


def payload(row):
    key, tx_type, amount, category, description, date = row
    return {"type": tx_type, "amount": amount, "category": category,
            "description": description, "date": date}


def client_rows():
    """The table as the API would return it (ids by insertion order), newest first."""
    rows = [dict(payload(row), id=i, user_id=1, key=row[0]) for i, row in enumerate(ROWS, start=1)]
    return sorted(rows, key=lambda r: (r["date"], r["id"]), reverse=True)
