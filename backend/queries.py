# backend/queries.py
"""
Query/aggregation engine.

Both the listing and the summary are built from the same WHERE clause so a
filter restricts exactly the same rows in both. Note that an active type
filter also applies to the totals: with type=income, totalExpense is 0.
"""
from . import db
from .models import UNCATEGORIZED, Summary

ORDER_BY = "ORDER BY date DESC, id DESC"


def filter_clause(owner_id, f):
    """Return (where_sql, params) for an owner-scoped Filter."""
    where = "user_id = ?"
    params = [owner_id]
    if f.type:
        where += " AND type = ?"
        params.append(f.type)
    if f.category:
        where += " AND category = ?"
        params.append(f.category)
    if f.date_from:
        where += " AND date >= ?"
        params.append(f.date_from)
    if f.date_to:
        where += " AND date <= ?"
        params.append(f.date_to)
    return where, params


def summarize(owner_id, f):
    where, params = filter_clause(owner_id, f)

    income_row = db.query_db(
        f"SELECT IFNULL(SUM(amount), 0) AS total FROM transactions WHERE {where} AND type = 'income'",
        params, one=True
    )
    expense_row = db.query_db(
        f"SELECT IFNULL(SUM(amount), 0) AS total FROM transactions WHERE {where} AND type = 'expense'",
        params, one=True
    )

    # breakdown by category (expenses only)
    rows = db.query_db(
        f"SELECT category, SUM(amount) AS total FROM transactions WHERE {where} AND type = 'expense' GROUP BY category",
        params
    )
    by_category = {}
    for r in rows:
        key = r['category'] or UNCATEGORIZED
        by_category[key] = by_category.get(key, 0) + r['total']

    return Summary(
        total_income=income_row['total'] if income_row else 0,
        total_expense=expense_row['total'] if expense_row else 0,
        by_category=by_category,
    )
