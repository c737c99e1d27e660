"""
Streamlit UI for theater billing.

Features:
- Invoice picker over the bundled invoices
- Rendered plain-text statement
- Line table with amounts and credits
- Per-line pricing trace
"""
import streamlit as st
import pandas as pd
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from theater_billing.engine import StatementBuilder, StatementError, format_currency
from theater_billing.config.settings import get_settings
from theater_billing.data.catalog import load_plays, load_invoices


st.set_page_config(
    page_title="Theater Billing",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_builder():
    """Get cached statement builder."""
    return StatementBuilder(currency=get_settings().currency)


@st.cache_data
def get_data():
    """Load bundled plays and invoices."""
    settings = get_settings()
    return load_plays(settings=settings), load_invoices(settings=settings)


try:
    builder = get_builder()
    plays, invoices = get_data()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()

# ============================================================================
# SIDEBAR: Invoice selection
# ============================================================================
with st.sidebar:
    st.header("Invoice")
    if not invoices:
        st.warning("No invoices found.")
        st.stop()
    labels = [f"{i + 1}. {inv.customer}" for i, inv in enumerate(invoices)]
    choice = st.selectbox("Customer", range(len(invoices)), format_func=lambda i: labels[i])
    st.caption(f"{len(plays)} plays loaded")

invoice = invoices[choice]

# ============================================================================
# MAIN: Statement
# ============================================================================
st.title(f"Statement for {invoice.customer}")

try:
    statement = builder.build(invoice, plays)
except StatementError as e:
    st.error(f"Cannot build statement: {e}")
    st.stop()

col1, col2 = st.columns(2)
col1.metric("Amount owed", format_currency(statement.total_amount, builder.currency))
col2.metric("Volume credits", statement.total_volume_credits)

df = pd.DataFrame([
    {
        "Play": line.play_name,
        "Type": line.play_type,
        "Seats": line.audience,
        "Amount": format_currency(line.amount, builder.currency),
        "Credits": line.volume_credits,
    }
    for line in statement.lines
])
st.dataframe(df, width="stretch", hide_index=True)

st.subheader("Text statement")
st.code(builder.render_text(statement), language=None)

st.subheader("Pricing trace")
for line in statement.lines:
    with st.expander(f"{line.play_name} ({line.audience} seats)"):
        st.text(line.get_trace_text())
