"""passforge -- Streamlit web interface."""

import streamlit as st

from passforge.config import MAX_LENGTH, MIN_LENGTH, max_min_numeric, max_min_special
from passforge.session import GeneratorSession

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_KEY_ROUND = _LUCIDE.format(s=32, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

_LABEL_COLORS = {
    "Very Weak": "#d32f2f",
    "Weak": "#f57c00",
    "Fair": "#fbc02d",
    "Strong": "#388e3c",
    "Very Strong": "#1b5e20",
}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="centered",
)

# ── Custom CSS ────────────────────────────────────────────────────────────

st.markdown("""<style>
/* Always show copy-to-clipboard button on code blocks */
[data-testid="stCode"] button,
[data-testid="stCodeBlock"] button,
.stCode button,
.stCodeBlock button {
    opacity: 1 !important;
    visibility: visible !important;
    transition: none !important;
}
</style>""", unsafe_allow_html=True)

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_KEY_ROUND} Password Generator</h1>',
    unsafe_allow_html=True,
)

# One session per browser tab; Streamlit reruns this script on every edit.
if "generator" not in st.session_state:
    st.session_state.generator = GeneratorSession()
session: GeneratorSession = st.session_state.generator
opts = session.options

# ── Character sets ────────────────────────────────────────────────────────

st.subheader("Character Sets")
col1, col2 = st.columns(2)
with col1:
    lowercase = st.checkbox("lowercase (a-z)", value=opts.lowercase, disabled=opts.custom)
    numeric = st.checkbox("Numeric (0-9)", value=opts.numeric, disabled=opts.custom)
    custom = st.checkbox("Use Custom Input", value=opts.custom)
with col2:
    uppercase = st.checkbox("uppercase (A-Z)", value=opts.uppercase, disabled=opts.custom)
    special = st.checkbox("Special Characters", value=opts.special, disabled=opts.custom)

custom_chars = opts.custom_chars
if custom:
    custom_chars = st.text_input(
        "Custom Characters",
        value=opts.custom_chars,
        placeholder="e.g. abc123!@",
    )

# ── Length ────────────────────────────────────────────────────────────────

length = st.slider("Password Length", MIN_LENGTH, MAX_LENGTH, opts.length)

session.update(
    lowercase=lowercase,
    uppercase=uppercase,
    numeric=numeric,
    special=special,
    custom=custom,
    custom_chars=custom_chars,
    length=length,
)
opts = session.options

# ── Minimum requirements ──────────────────────────────────────────────────

if (opts.numeric or opts.special) and not opts.custom:
    st.subheader("Minimum Requirements")
    col1, col2 = st.columns(2)
    if opts.numeric:
        with col1:
            limit = max_min_numeric(opts)
            session.update(min_numeric=st.number_input(
                "Minimum Numbers",
                min_value=0,
                max_value=limit,
                value=min(opts.min_numeric, limit),
                step=1,
            ))
    if opts.special:
        with col2:
            limit = max_min_special(session.options)
            session.update(min_special=st.number_input(
                "Minimum Special Characters",
                min_value=0,
                max_value=limit,
                value=min(session.options.min_special, limit),
                step=1,
            ))

# ── Result ────────────────────────────────────────────────────────────────

if session.error:
    st.error(session.error)

st.markdown("**Generated Password**")
if session.password:
    st.code(session.password, language=None)
    color = _LABEL_COLORS[session.result["label"]]
    st.markdown(
        f"<span style='color:{color}'>{session.result['label']}</span>"
        f" &nbsp;\u00b7&nbsp; {session.result['entropy']} bits of entropy",
        unsafe_allow_html=True,
    )
else:
    st.caption("Your password will appear here")

if st.button("Regenerate", type="primary"):
    session.regenerate()
    st.rerun()
