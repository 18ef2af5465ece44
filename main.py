"""
KiteDash — Main App
===================

Entry point of the KiteDash Streamlit app (accounting module of the kite
center).

Run:
    streamlit run main.py

Environment:
    KITEDASH_LOG_LEVEL   logging level (default INFO)
    KITEDASH_USER        operator name recorded by the actions (default "system")
"""

from __future__ import annotations

import importlib
import logging
import os

import streamlit as st

from kitedash_pages.common import get_repository

# ======================================================================================
# Logging + page config
# ======================================================================================
logging.basicConfig(
    level=os.getenv("KITEDASH_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("kitedash")

st.set_page_config(page_title="KiteDash", layout="wide")


# ======================================================================================
# Session state
# ======================================================================================
if "pagina_atual" not in st.session_state:
    st.session_state.pagina_atual = "📊 Dashboard"

# in-memory data of the session (mock fixtures on first run)
get_repository()


# ======================================================================================
# Routing helper: imports the module and calls its render function
# ======================================================================================
def _call_page(module_path: str) -> None:
    """
    Imports `module_path` and calls, in this order, the first function found:

    - `render_<tail>` where `page_<tail>` is the module name (ex.: render_bookings)
    - generic: render, page, main
    - fallback: first function starting with 'render_'

    Failures are shown with `st.error` instead of stopping the app.
    """
    try:
        mod = importlib.import_module(module_path)
    except Exception as e:
        logger.exception("import of %s failed", module_path)
        st.error(f"Failed to import module '{module_path}': {e}")
        return

    seg = module_path.rsplit(".", 1)[-1]               # ex.: 'page_bookings'
    tail = seg.split("_", 1)[1] if "_" in seg else seg  # ex.: 'bookings'

    candidates = [f"render_{tail}", "render", "page", "main"]
    candidates += [n for n, obj in vars(mod).items() if n.startswith("render_") and callable(obj)]

    for fn_name in candidates:
        fn = getattr(mod, fn_name, None)
        if not callable(fn):
            continue
        try:
            fn()
        except Exception as e:
            logger.exception("page %s.%s failed", module_path, fn_name)
            st.error(f"Error while rendering {module_path}.{fn_name}: {e}")
        return

    st.warning(f"Module '{module_path}' has no compatible function (render_*/render/page/main).")


# ======================================================================================
# Sidebar: navigation
# ======================================================================================
ROTAS = {
    "📊 Dashboard": "kitedash_pages.dashboard.page_dashboard",
    "🏄 Bookings": "kitedash_pages.bookings.page_bookings",
    "🪁 Instructors": "kitedash_pages.instructors.page_instructors",
    "🌴 Palmeiras": "kitedash_pages.palmeiras.page_palmeiras",
    "💧 Cash Flow": "kitedash_pages.cashflow.page_cashflow",
    "🧾 Expenses": "kitedash_pages.expenses.page_expenses",
}

st.sidebar.markdown("## 🧭 Accounting")
for _label in ROTAS:
    if st.sidebar.button(_label, use_container_width=True):
        st.session_state.pagina_atual = _label
        st.rerun()

st.sidebar.markdown("---")
st.sidebar.caption(f"👤 {os.getenv('KITEDASH_USER', 'system')}")


# ======================================================================================
# Main title + routing
# ======================================================================================
pagina = st.session_state.get("pagina_atual", "📊 Dashboard")
st.title("💼 Accounting")

if pagina in ROTAS:
    _call_page(ROTAS[pagina])
else:
    st.warning("Page not found.")
