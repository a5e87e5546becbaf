# client/components.py
import streamlit as st
import pandas as pd

FRAMEWORK_COLORS = {"DPDPA": "blue", "IT Act 2000": "orange", "IT Act 2008": "violet"}
IMPACT_COLORS = {"critical": "red", "high": "orange", "medium": "gray"}


def badge(label: str, color: str = "green") -> str:
    """Streamlit markdown colour badge."""
    return f":{color}-background[{label}]"

def framework_badge(fw: str) -> str:
    for key, color in FRAMEWORK_COLORS.items():
        if key.lower() in (fw or "").lower():
            return badge(fw, color)
    return badge(fw or "General", "gray")

def impact_badge(level: str | None) -> str:
    return badge(level or "N/A", IMPACT_COLORS.get((level or "").lower(), "green"))


def show_answer(answer: dict, frameworks: list[str]):
    """Render one NormalizedAnswer from /chat. Every field is guaranteed present."""
    if frameworks:
        st.markdown(" ".join(framework_badge(f) for f in frameworks))
    st.markdown(answer["answer"])

    sources = answer["sources"]
    if sources:
        with st.expander(f"Source Citations ({len(sources)})"):
            for src in sources:
                st.markdown(f"{framework_badge(src['act'])} **{src['section']}**: {src['description']}")
    if answer["cross_framework_analysis"]:
        with st.expander("Cross-Framework Analysis"):
            st.markdown(answer["cross_framework_analysis"])
    if answer["precedence_notes"]:
        with st.expander("Precedence Notes"):
            st.markdown(answer["precedence_notes"])
    steps = answer["compliance_steps"]
    if steps:
        with st.expander(f"Compliance Steps ({len(steps)})", expanded=True):
            st.markdown("\n".join(f"{i}. {s}" for i, s in enumerate(steps, 1)))


def show_update(update: dict, reviewed: bool):
    """Timeline card. Missing fields get their display sentinels here, not in the backend."""
    title = update.get("title") or "Untitled Update"
    header = " ".join([
        badge(update.get("date") or "N/A", "gray"),
        framework_badge(update.get("framework") or "Unknown"),
        impact_badge(update.get("impact_level")),
        badge("Reviewed", "gray") if reviewed else badge("New", "orange"),
    ])
    with st.expander(title):
        st.markdown(header)
        if update.get("summary"):
            st.markdown(update["summary"])
        provisions = update.get("affected_provisions") or []
        if provisions:
            st.markdown("**Affected provisions**")
            st.markdown("\n".join(f"- {p}" for p in provisions))
        if update.get("source_url"):
            st.markdown(f"[View source]({update['source_url']})")


def show_table(rows, caption: str | None = None):
    """Render a list[dict] as a dataframe; otherwise show JSON."""
    if caption:
        st.caption(caption)
    if isinstance(rows, list) and rows and isinstance(rows[0], dict):
        st.dataframe(pd.DataFrame(rows))
    else:
        st.write(rows)
