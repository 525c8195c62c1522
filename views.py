# views.py
"""Streamlit rendering for a single AnalysisResult."""
import pandas as pd
import streamlit as st

from composition import (
    AMINO_ACID_NAMES,
    GROUP_DESCRIPTIONS,
    GROUPS,
    AnalysisResult,
    members,
)
from plots import plot_amino_acid_frequency, plot_group_counts
from processors import DETAIL_COLUMNS, result_rows

# (text color, background) per classification
CLASSIFICATION_COLORS = {
    "Glucogenic": ("#2563eb", "#eff6ff"),
    "Amphibolic": ("#9333ea", "#faf5ff"),
    "Ketogenic": ("#dc2626", "#fef2f2"),
}
_FALLBACK_COLORS = ("#4b5563", "#f9fafb")


def classification_css(classification: str) -> str:
    fg, bg = CLASSIFICATION_COLORS.get(classification, _FALLBACK_COLORS)
    return f"color: {fg}; background-color: {bg}; font-weight: 500"


def classification_badge(classification: str) -> str:
    fg, bg = CLASSIFICATION_COLORS.get(classification, _FALLBACK_COLORS)
    return (
        f"<span style='color:{fg};background-color:{bg};padding:2px 8px;"
        f"border-radius:9999px;font-size:0.75rem;font-weight:500'>{classification}</span>"
    )


def render_error(result: AnalysisResult) -> bool:
    """Show the error for an invalid result. Returns True when something was shown."""
    if result.is_valid:
        return False
    st.error(f"**Error**  \n{result.error}")
    return True


def render_summary(result: AnalysisResult) -> None:
    st.subheader("Analysis Summary")
    counts = result.group_counts
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Total Amino Acids", result.total_count)
    with c2:
        st.metric("Glucogenic", counts.glucogenic)
    with c3:
        st.metric("Amphibolic", counts.amphibolic)
    with c4:
        st.metric("Ketogenic", counts.ketogenic)

    st.success(
        f"Dominant Classification: **{result.dominant_group}**  \n"
        f"This sequence contains more {result.dominant_group.lower()} amino acids than other types."
    )


def render_chart(result: AnalysisResult) -> None:
    st.subheader("Amino Acid Frequency Chart")
    st.caption("Visual representation of amino acid counts in the sequence")
    left, right = st.columns([3, 1])
    with left:
        fig = plot_amino_acid_frequency(result)
        if fig:
            st.plotly_chart(fig, use_container_width=True)
    with right:
        fig = plot_group_counts(result)
        if fig:
            st.plotly_chart(fig, use_container_width=True)


def render_table(result: AnalysisResult, file_name: str = "amino_acid_analysis.csv") -> None:
    st.subheader("Detailed Analysis")
    st.caption("Complete breakdown of amino acids in the sequence")
    df = pd.DataFrame(result_rows(result), columns=DETAIL_COLUMNS)
    st.dataframe(
        df.style.map(classification_css, subset=["Classification"]).format({"Percentage": "{:.1f}%"}),
        use_container_width=True,
        hide_index=True,
    )

    csv = df.to_csv(index=False).encode("utf-8")
    st.download_button(
        label="⬇️ Download Table (CSV)",
        data=csv,
        file_name=file_name,
        key=f"download-{file_name}",
        mime="text/csv",
    )


def render_classification_info() -> None:
    st.subheader("Classification Information")
    for group in GROUPS:
        names = ", ".join(AMINO_ACID_NAMES[code] for code in members(group))
        st.markdown(
            f"{classification_badge(group)} {GROUP_DESCRIPTIONS[group]}: {names}",
            unsafe_allow_html=True,
        )


def render_result(result: AnalysisResult, file_name: str = "amino_acid_analysis.csv") -> None:
    """Error box for invalid results, otherwise every analytical panel."""
    if render_error(result):
        return
    render_summary(result)
    st.markdown("---")
    render_chart(result)
    render_table(result, file_name=file_name)
    st.markdown("---")
    render_classification_info()
