# backend/models.py
# lightweight model classes (not DB-bound ORM)
import math
from datetime import datetime

from .errors import ValidationError

TRANSACTION_TYPES = ("income", "expense")
DATE_FORMAT = "%Y-%m-%d"
UNCATEGORIZED = "Uncategorized"

# Filter values that mean "no restriction" (select-box default on the client)
ANY_VALUES = (None, "", "all")


class User:
    def __init__(self, id, username, password_hash=None):
        self.id = id
        self.username = username
        self.password_hash = password_hash

    @classmethod
    def from_row(cls, row):
        return cls(row['id'], row['username'], row['password_hash'] if 'password_hash' in row.keys() else None)

    def to_dict(self):
        # never expose the hash
        return {"id": self.id, "username": self.username}


class Transaction:
    def __init__(self, id, user_id, type, amount, date, category='', description=''):
        self.id = id
        self.user_id = user_id
        self.type = type
        self.amount = amount
        self.date = date
        self.category = category
        self.description = description

    @classmethod
    def from_row(cls, row):
        return cls(
            id=row['id'],
            user_id=row['user_id'],
            type=row['type'],
            amount=row['amount'],
            date=row['date'],
            category=row['category'] or '',
            description=row['description'] or '',
        )

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "type": self.type,
            "amount": self.amount,
            "category": self.category,
            "description": self.description,
            "date": self.date,
        }

    def __repr__(self):
        return f"<Transaction {self.id} {self.type} {self.amount} {self.date}>"


class Filter:
    """Ephemeral query descriptor shared by listing and summary."""

    def __init__(self, type=None, category=None, date_from=None, date_to=None):
        self.type = None if type in ANY_VALUES else type
        self.category = None if category in ANY_VALUES else category
        self.date_from = date_from or None
        self.date_to = date_to or None

    @classmethod
    def from_args(cls, args):
        """Build a filter from query-string args (type, category, from, to)."""
        f = cls(
            type=args.get('type'),
            category=args.get('category'),
            date_from=args.get('from'),
            date_to=args.get('to'),
        )
        if f.type is not None and f.type not in TRANSACTION_TYPES:
            raise ValidationError(f"type must be one of {', '.join(TRANSACTION_TYPES)}")
        for bound in (f.date_from, f.date_to):
            if bound is not None:
                parse_date(bound)
        return f


class Summary:
    def __init__(self, total_income=0, total_expense=0, by_category=None):
        self.total_income = total_income
        self.total_expense = total_expense
        self.by_category = by_category or {}

    def to_dict(self):
        return {
            "totalIncome": self.total_income,
            "totalExpense": self.total_expense,
            "byCategory": dict(self.by_category),
        }


def parse_date(s):
    """Validate a YYYY-MM-DD string and return it unchanged."""
    if not isinstance(s, str):
        raise ValidationError("date must be a YYYY-MM-DD string")
    try:
        parsed = datetime.strptime(s, DATE_FORMAT)
    except ValueError:
        raise ValidationError(f"Invalid date: {s!r} (expected YYYY-MM-DD)")
    # dates are compared as text, so only the zero-padded form is accepted
    if parsed.strftime(DATE_FORMAT) != s:
        raise ValidationError(f"Invalid date: {s!r} (expected YYYY-MM-DD)")
    return s


def parse_amount(value):
    """Amounts are non-negative finite numbers; strings are accepted if numeric."""
    if isinstance(value, bool):
        raise ValidationError("amount must be a number")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid amount: {value!r}")
    if math.isnan(amount) or math.isinf(amount):
        raise ValidationError(f"Invalid amount: {value!r}")
    if amount < 0:
        raise ValidationError("amount cannot be negative")
    return amount


def transaction_fields(data):
    """Validate a create/replace payload and normalize optional text fields.

    Returns a dict with type, amount, category, description and date.
    """
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")

    missing = [k for k in ("type", "amount", "date") if data.get(k) in (None, "")]
    if missing:
        raise ValidationError(f"{', '.join(missing)} required")

    tx_type = data['type']
    if tx_type not in TRANSACTION_TYPES:
        raise ValidationError(f"type must be one of {', '.join(TRANSACTION_TYPES)}")

    category = data.get('category') or ''
    description = data.get('description') or ''
    if not isinstance(category, str) or not isinstance(description, str):
        raise ValidationError("category and description must be strings")

    return {
        'type': tx_type,
        'amount': parse_amount(data['amount']),
        'category': category,
        'description': description,
        'date': parse_date(data['date']),
    }
