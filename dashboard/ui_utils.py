from __future__ import annotations

import re

import numpy as np

_MARKDOWN_SPECIALS = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$])")


def _missing(x) -> bool:
    return x is None or (isinstance(x, float) and np.isnan(x))


def fmt_pct(x: float) -> str:
    # CTR is stored as a percentage already
    if _missing(x):
        return "—"
    return f"{x:.2f}%"


def fmt_num(x: float) -> str:
    if _missing(x):
        return "—"
    return f"{x:,.0f}"


def fmt_money(x: float, symbol: str = "₹") -> str:
    if _missing(x):
        return "—"
    return f"{symbol}{x:,.2f}"


def escape_markdown(text: str) -> str:
    """Render a user-entered name literally inside Streamlit markdown."""
    return _MARKDOWN_SPECIALS.sub(r"\\\1", text)
