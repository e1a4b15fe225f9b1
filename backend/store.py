# backend/store.py
# Transaction store. Every statement is scoped by user_id; callers cannot
# reach another user's rows even if they pass a foreign transaction id.
import logging

from . import db
from .errors import NotFound
from .models import Transaction
from .queries import ORDER_BY, filter_clause

logger = logging.getLogger("finance-backend")

COLUMNS = "id, user_id, type, amount, description, category, date"


def get(tx_id, owner_id):
    row = db.query_db(
        f"SELECT {COLUMNS} FROM transactions WHERE id=? AND user_id=?",
        (tx_id, owner_id), one=True
    )
    if not row:
        raise NotFound("Transaction not found")
    return Transaction.from_row(row)


def insert(owner_id, fields):
    tx_id, _ = db.execute_db(
        "INSERT INTO transactions (user_id, type, amount, description, category, date) VALUES (?,?,?,?,?,?)",
        (owner_id, fields['type'], fields['amount'], fields['description'], fields['category'], fields['date'])
    )
    logger.info(f"Transaction {tx_id} created for user {owner_id}")
    return get(tx_id, owner_id)


def update(tx_id, owner_id, fields):
    """Full-field replace. Last writer wins."""
    _, count = db.execute_db(
        "UPDATE transactions SET type=?, amount=?, description=?, category=?, date=? WHERE id=? AND user_id=?",
        (fields['type'], fields['amount'], fields['description'], fields['category'], fields['date'],
         tx_id, owner_id)
    )
    if count == 0:
        raise NotFound("Transaction not found")
    return get(tx_id, owner_id)


def delete(tx_id, owner_id):
    """Idempotent: deleting a missing or foreign row is a no-op."""
    _, count = db.execute_db("DELETE FROM transactions WHERE id=? AND user_id=?", (tx_id, owner_id))
    if count:
        logger.info(f"Transaction {tx_id} deleted for user {owner_id}")
    return True


def list_by_filter(owner_id, f):
    where, params = filter_clause(owner_id, f)
    rows = db.query_db(f"SELECT {COLUMNS} FROM transactions WHERE {where} {ORDER_BY}", params)
    return [Transaction.from_row(r) for r in rows]
