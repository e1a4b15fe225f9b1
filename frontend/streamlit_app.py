#frontend/streamlit_app.py

from datetime import date

import pandas as pd
import plotly.express as px
import streamlit as st

from frontend.api import ApiClient
from frontend.controller import ClientStateController
from frontend.storage import JsonFileStorage

# ---------------- Page config ----------------
st.set_page_config(page_title="Personal Finance Tracker", layout="wide", page_icon="💸")

TYPE_OPTIONS = ["all", "income", "expense"]
FORM_KEYS = ("tx_type", "tx_cat", "tx_amount", "tx_date", "tx_desc")


# ---------------- Session State Management ----------------
def get_controller():
    """One controller per browser session; the saved session is read once here.

    The session file is shared by every browser talking to this server, so a
    login in one tab is picked up by new sessions too. Point SESSION_FILE at a
    separate file per user when running a shared deployment.
    """
    if "controller" not in st.session_state:
        controller = ClientStateController(ApiClient(), JsonFileStorage(), alert=st.error)
        controller.restore()
        st.session_state.controller = controller
    controller = st.session_state.controller
    # rebind so alerts render in the current script run
    controller.alert = st.error
    return controller


# ---------------- CSS ----------------
st.markdown("""
<style>
body, .block-container {
    font-family: 'Segoe UI', sans-serif;
}

[data-testid="stSidebar"] {
    background: linear-gradient(180deg, #1d4ed8, #3b82f6);
    color: white;
}

.stButton>button {
    border-radius: 10px;
    border: none;
}

.stMetric {
    background: #eff6ff !important;
    padding: 15px;
    border-radius: 12px;
}
</style>
""", unsafe_allow_html=True)


# ---------------- Sidebar ----------------
def render_sidebar(controller):
    with st.sidebar:
        st.title("🔐 Account")

        if controller.is_logged_in:
            st.success(f"Logged in as **{controller.user['username']}**")
            if st.button("🚪 Logout", use_container_width=True, key="logout_btn"):
                controller.logout()
                st.rerun()
            return

        username = st.text_input("👤 Username", key="username_input")
        password = st.text_input("🔒 Password", type="password", key="password_input")
        st.caption("New usernames are registered automatically.")

        if st.button("Login / Sign up", use_container_width=True, key="auth_submit"):
            controller.login_form = {"username": username, "password": password}
            if controller.login():
                st.rerun()


# ---------------- Add Transaction ----------------
def render_add_form(controller):
    # keyed widgets ignore value= once set, so clear them before they render again
    added = st.session_state.pop("last_added_tx", None)
    if added:
        for key in FORM_KEYS:
            st.session_state.pop(key, None)
    draft = controller.draft
    with st.expander("➕ Add Transaction", expanded=False):
        if added:
            st.success(added)
        col_a, col_b = st.columns(2)
        with col_a:
            t_type = st.selectbox("🔸 Type", ["expense", "income"],
                                  index=["expense", "income"].index(draft["type"]), key="tx_type")
            categories = controller.categories_for(t_type)
            category = draft["category"] if draft["category"] in categories else categories[0]
            t_cat = st.selectbox("🏷️ Category", categories, index=categories.index(category), key="tx_cat")
            t_amount = st.text_input("💰 Amount", value=str(draft["amount"]), key="tx_amount")
        with col_b:
            t_date = st.date_input("📅 Date", value=date.fromisoformat(draft["date"]), key="tx_date")
            t_desc = st.text_input("📝 Description", value=draft["description"], key="tx_desc")

        if st.button("💾 Add Transaction", use_container_width=True, key="tx_submit"):
            controller.update_draft(type=t_type, category=t_cat, amount=t_amount.strip(),
                                    description=t_desc, date=t_date.isoformat())
            created = controller.add_transaction()
            if created:
                st.session_state.last_added_tx = f"✅ Added {created['type']} of {created['amount']:,.2f}"
                st.rerun()


# ---------------- Filters ----------------
def render_filters(controller):
    filters = controller.filters
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        f_type = st.selectbox("Type", TYPE_OPTIONS, index=TYPE_OPTIONS.index(filters["type"]), key="f_type")
    with col2:
        options = ["all"] + controller.category_options()
        current = filters["category"] if filters["category"] in options else "all"
        f_cat = st.selectbox("Category", options, index=options.index(current), key="f_cat")
    with col3:
        f_from = st.date_input("From", value=None, key="f_from")
    with col4:
        f_to = st.date_input("To", value=None, key="f_to")

    controller.set_filters(
        type=f_type,
        category=f_cat,
        **{"from": f_from.isoformat() if f_from else "", "to": f_to.isoformat() if f_to else ""}
    )


# ---------------- Summary ----------------
def render_summary(controller):
    summary = controller.summary()
    net = summary["totalIncome"] - summary["totalExpense"]

    col1, col2, col3 = st.columns(3)
    col1.metric("📈 Income", f"{summary['totalIncome']:,.2f}")
    col2.metric("📉 Expenses", f"{summary['totalExpense']:,.2f}")
    col3.metric("💵 Balance", f"{net:,.2f}")

    pie = controller.pie_data()
    if pie:
        fig_pie = px.pie(pd.DataFrame(pie), names='name', values='value',
                         title="Expenses by Category", hole=0.4)
        st.plotly_chart(fig_pie, use_container_width=True)
    else:
        st.info("No expense data for the current filters")


# ---------------- Transaction List ----------------
def render_transactions(controller):
    st.subheader("📋 Your Transactions")
    rows = controller.visible_transactions()
    if not rows:
        st.info("💳 No transactions found.")
        return

    for tx in rows:
        col1, col2, col3, col4 = st.columns([2, 3, 2, 1])
        col1.write(tx["date"])
        col2.write(f"**{tx.get('category') or 'Uncategorized'}** {tx.get('description', '')}")
        sign = "+" if tx["type"] == "income" else "-"
        col3.write(f"{sign}{tx['amount']:,.2f}")
        if col4.button("🗑️", key=f"del_{tx['id']}"):
            if controller.delete_transaction(tx["id"]):
                st.rerun()

    st.caption(f"Showing {len(rows)} of {len(controller.transactions)} transactions")


# ---------------- Main App ----------------
def main():
    controller = get_controller()

    st.title("💰 Personal Finance Tracker")
    render_sidebar(controller)

    if not controller.is_logged_in:
        st.info("🔐 Please login to manage transactions")
        return

    render_add_form(controller)
    render_filters(controller)
    render_summary(controller)
    render_transactions(controller)


if __name__ == "__main__":
    main()
