# frontend/controller.py
"""
Client state controller.

Holds the logged-in user, the cached transaction list, the current filters
and the draft form. The full list is fetched once after login; filtering and
summaries are then recomputed locally, and mutations patch the cache with the
server's response instead of refetching.

Failures of the initial fetch are only logged. Failures of user actions
(login, add, update, delete) go through the injected ``alert`` callback.
"""
import logging
from datetime import date

from . import aggregation
from .api import ApiRequestError

logger = logging.getLogger("finance-frontend")

TOKEN_KEY = "token"
USERNAME_KEY = "username"

CATEGORIES = {
    "income": ["Salary", "Freelance", "Investment", "Gift", "Other Income"],
    "expense": ["Food", "Transport", "Housing", "Entertainment", "Healthcare",
                "Shopping", "Utilities", "Other Expense"],
}


def _log_alert(message):
    logger.error(message)


class ClientStateController:
    def __init__(self, api, storage, alert=None, today=None):
        self.api = api
        self.storage = storage
        self.alert = alert or _log_alert
        self._today = today or date.today

        self.user = None
        self.token = None
        self.transactions = []
        self.filters = aggregation.default_filters()
        self.login_form = {"username": "", "password": ""}
        self.draft = self.empty_draft()

    # ---------------- Session ----------------
    @property
    def is_logged_in(self):
        return self.user is not None

    def restore(self):
        """Read the persisted session once at startup."""
        token = self.storage.get(TOKEN_KEY)
        username = self.storage.get(USERNAME_KEY)
        if not token or not username:
            return False
        self.token = token
        self.user = {"username": username}
        self.load_transactions()
        return True

    def login(self, username=None, password=None):
        """Log in, falling back to signup when the login is rejected."""
        username = username if username is not None else self.login_form["username"]
        password = password if password is not None else self.login_form["password"]
        if not username or not password:
            self.alert("Enter username and password")
            return False

        try:
            data = self.api.login(username, password)
        except ApiRequestError as e:
            if e.status_code is None:
                logger.error(f"Login error: {e.message}")
                self.alert(f"Login failed: {e.message}")
                return False
            try:
                data = self.api.signup(username, password)
            except ApiRequestError as e:
                self.alert(f"Signup failed: {e.message}")
                return False
        return self._start_session(data)

    def _start_session(self, data):
        if not isinstance(data, dict) or not data.get("token") or not data.get("user"):
            logger.error(f"Unexpected auth response: {data!r}")
            self.alert("Login response missing token or user data")
            return False

        self.token = data["token"]
        self.user = data["user"]
        self.storage.set(TOKEN_KEY, self.token)
        self.storage.set(USERNAME_KEY, self.user["username"])
        logger.info(f"Logged in as {self.user['username']}")
        self.load_transactions()
        return True

    def logout(self):
        self.user = None
        self.token = None
        self.transactions = []
        self.login_form = {"username": "", "password": ""}
        self.storage.remove(TOKEN_KEY)
        self.storage.remove(USERNAME_KEY)

    # ---------------- Server sync ----------------
    def load_transactions(self):
        if not self.token:
            return False
        try:
            data = self.api.list_transactions(self.token)
        except ApiRequestError as e:
            logger.error(f"Failed to load transactions: {e.message}")
            return False
        self.transactions = list(data or [])
        return True

    def add_transaction(self):
        if self.draft.get("amount") in (None, ""):
            self.alert("Enter amount")
            return None
        try:
            amount = float(self.draft["amount"])
        except (TypeError, ValueError):
            self.alert("Amount must be a number")
            return None

        body = {
            "type": self.draft["type"],
            "amount": amount,
            "description": self.draft.get("description", ""),
            "category": self.draft.get("category", ""),
            "date": self.draft["date"],
        }
        try:
            created = self.api.create_transaction(self.token, body)
        except ApiRequestError as e:
            self.alert(e.message)
            return None

        self.transactions = [created] + self.transactions
        self.reset_draft()
        return created

    def update_transaction(self, tx_id, fields):
        try:
            updated = self.api.update_transaction(self.token, tx_id, fields)
        except ApiRequestError as e:
            self.alert(e.message)
            return None
        # the date may have changed, so restore newest-first order
        self.transactions = aggregation.sort_newest_first(
            [updated if t.get("id") == tx_id else t for t in self.transactions]
        )
        return updated

    def delete_transaction(self, tx_id):
        try:
            self.api.delete_transaction(self.token, tx_id)
        except ApiRequestError as e:
            self.alert(e.message)
            return False
        self.transactions = [t for t in self.transactions if t.get("id") != tx_id]
        return True

    # ---------------- Local state ----------------
    def empty_draft(self):
        return {
            "type": "expense",
            "amount": "",
            "category": "Food",
            "description": "",
            "date": self._today().isoformat(),
        }

    def reset_draft(self):
        self.draft = self.empty_draft()

    def update_draft(self, **fields):
        self.draft.update(fields)
        # keep the category consistent with the selected type
        if "type" in fields and self.draft["category"] not in self.categories_for(self.draft["type"]):
            self.draft["category"] = self.categories_for(self.draft["type"])[0]

    def set_filters(self, **filters):
        self.filters.update(filters)

    def reset_filters(self):
        self.filters = aggregation.default_filters()

    @staticmethod
    def categories_for(tx_type):
        return CATEGORIES.get(tx_type, [])

    def category_options(self):
        """Every category known for the filter select box."""
        known = CATEGORIES["income"] + CATEGORIES["expense"]
        seen = [c for c in (t.get("category") for t in self.transactions) if c and c not in known]
        return known + sorted(set(seen))

    # ---------------- Derived views ----------------
    def visible_transactions(self):
        return aggregation.filter_transactions(self.transactions, self.filters)

    def summary(self):
        return aggregation.summarize(self.visible_transactions())

    def pie_data(self):
        return aggregation.pie_data(self.summary()["byCategory"])
