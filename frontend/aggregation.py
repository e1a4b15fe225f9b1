# frontend/aggregation.py
# Client-side mirror of the server's filter predicate and summary.
# Operates on transaction dicts as returned by the API.

UNCATEGORIZED = "Uncategorized"
ANY = "all"


def default_filters():
    return {"type": ANY, "category": ANY, "from": "", "to": ""}


def _active(value):
    return value not in (None, "", ANY)


def matches(tx, filters):
    if _active(filters.get("type")) and tx.get("type") != filters["type"]:
        return False
    if _active(filters.get("category")) and (tx.get("category") or "") != filters["category"]:
        return False
    if filters.get("from") and tx.get("date", "") < filters["from"]:
        return False
    if filters.get("to") and tx.get("date", "") > filters["to"]:
        return False
    return True


def filter_transactions(transactions, filters):
    """Keep the cached order (newest first) and drop non-matching rows."""
    return [t for t in transactions if matches(t, filters)]


def sort_newest_first(transactions):
    return sorted(transactions, key=lambda t: (t.get("date", ""), t.get("id", 0)), reverse=True)


def summarize(transactions):
    summary = {"totalIncome": 0, "totalExpense": 0, "byCategory": {}}
    for t in transactions:
        amount = t.get("amount") or 0
        if t.get("type") == "income":
            summary["totalIncome"] += amount
        elif t.get("type") == "expense":
            summary["totalExpense"] += amount
            key = t.get("category") or UNCATEGORIZED
            summary["byCategory"][key] = summary["byCategory"].get(key, 0) + amount
    return summary


def pie_data(by_category):
    return [{"name": name, "value": round(float(value), 2)} for name, value in by_category.items()]
