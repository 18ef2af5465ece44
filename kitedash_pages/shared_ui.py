# ===================== UI: Cards =====================
"""
Visual components (CSS + cards) shared by the accounting tabs.
No business rules.

Notes:
    - `render_card_row(title, items)`: one card, one row, N cells.
    - `render_share_bars(title, items)`: horizontal share bars (label, amount, %).
    - Positive amounts use the accent colour, negative ones red.
"""

from __future__ import annotations

from html import escape
from typing import Iterable, Optional, Tuple

import streamlit as st

from utils.utils import fmt_eur

# ===================== CSS =====================
_CARD_TABLE_CSS = """
<style>
:root{
  --card:#13151A; --tile:#0F1115; --stroke:#20232B;
  --accent:#00FFA3; --negative:#FF5C70; --muted:#A6AABB;
}
.section-card{
  background:var(--card); border-radius:18px; padding:10px 14px; margin:1px 0 12px;
  box-shadow:0 10px 24px rgba(0,0,0,.22), inset 0 1px 0 rgba(255,255,255,.02);
}
.section-header{ font-weight:800; font-size:1.05rem; margin-bottom:8px; }
.section-row{ display:flex; flex-wrap:wrap; border:1px solid var(--stroke); border-radius:12px; overflow:hidden; background:var(--tile); }
.cell{ flex:1 1 0; min-width:140px; padding:8px 12px; display:flex; flex-direction:column; gap:6px; align-items:center; }
.cell + .cell{ border-left:1px solid var(--stroke); }
.cell-label{ color:#cfd3df; font-size:.85rem; font-weight:700; letter-spacing:.2px; }
.cell-value{ font-size:1.24rem; font-weight:900; color:var(--accent); }
.cell-value.neg{ color:var(--negative); }
.cell-sub{ font-size:.78rem; color:var(--muted); }
.share-line{ display:flex; align-items:center; gap:10px; margin:6px 0; }
.share-label{ width:130px; color:#cfd3df; font-size:.88rem; font-weight:700; }
.share-track{ flex:1; background:var(--tile); border-radius:999px; height:14px; overflow:hidden; }
.share-fill{ height:100%; background:var(--accent); border-radius:999px; }
.share-value{ width:150px; text-align:right; font-weight:800; font-size:.9rem; }
</style>
"""

CardItem = Tuple[str, float, Optional[str]]


def _cell(label: str, value: float, sub: Optional[str]) -> str:
    cls = "cell-value neg" if value < 0 else "cell-value"
    sub_html = f'<div class="cell-sub">{escape(sub)}</div>' if sub else ""
    return (
        f'<div class="cell"><div class="cell-label">{escape(label)}</div>'
        f'<div class="{cls}">{escape(fmt_eur(value))}</div>{sub_html}</div>'
    )


def render_card_row(title: str, items: Iterable[CardItem]) -> None:
    """Renders a card with a title and one cell per (label, amount, subtitle)."""
    st.markdown(_CARD_TABLE_CSS, unsafe_allow_html=True)
    cells = "".join(_cell(label, float(value or 0.0), sub) for label, value, sub in items)
    html = f"""
      <div class="section-card">
        <div class="section-header">{escape(title)}</div>
        <div class="section-row">{cells}</div>
      </div>
    """
    st.markdown(html, unsafe_allow_html=True)


def render_share_bars(title: str, items: Iterable[Tuple[str, float, float]]) -> None:
    """Renders horizontal bars: (label, amount, share 0..100)."""
    st.markdown(_CARD_TABLE_CSS, unsafe_allow_html=True)
    lines = []
    for label, amount, share in items:
        width = max(0.0, min(100.0, float(share or 0.0)))
        lines.append(
            '<div class="share-line">'
            f'<div class="share-label">{escape(label)}</div>'
            f'<div class="share-track"><div class="share-fill" style="width:{width:.1f}%"></div></div>'
            f'<div class="share-value">{escape(fmt_eur(amount))} · {width:.0f}%</div>'
            "</div>"
        )
    st.markdown(
        f'<div class="section-card"><div class="section-header">{escape(title)}</div>{"".join(lines)}</div>',
        unsafe_allow_html=True,
    )


__all__ = ["render_card_row", "render_share_bars"]
