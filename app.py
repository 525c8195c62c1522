# app.py
import time

import streamlit as st
import pandas as pd

from app_logging import get_logger
from composition import analyze_sequence
from plots import plot_dominant_groups, plot_length_distribution
from processors import process_protein_file
from settings import settings
from views import render_result

log = get_logger("app")

st.set_page_config(page_title=settings.page_title, page_icon="🧬", layout="wide")
st.title(settings.app_title)

# ---- Sidebar: controls ----
st.sidebar.header("⚙️ Options")

input_mode = st.sidebar.selectbox(
    "Input Mode",
    ["Single Sequence", "Sequence File"]
)

max_records = st.sidebar.number_input(
    "Max records to load (Sequence File mode)",
    min_value=1, max_value=settings.max_records_limit, value=settings.max_records, step=50
)

st.session_state.setdefault("sequence", "")
st.session_state.setdefault("result", None)
st.session_state.setdefault("batch", None)


def _load_example() -> None:
    st.session_state["sequence"] = settings.example_sequence
    st.session_state["result"] = None


def _clear() -> None:
    st.session_state["sequence"] = ""
    st.session_state["result"] = None


# =========================
# Mode 1: Single Sequence
# =========================
if input_mode == "Single Sequence":
    st.caption("Enter an amino acid sequence to analyze its composition and metabolic classification")

    sequence = st.text_area(
        "Amino Acid Sequence",
        key="sequence",
        placeholder=f"Enter amino acid sequence (e.g., {settings.example_sequence})",
        height=120,
        help="Use single letter amino acid codes. Spaces will be ignored.",
    )

    b1, b2, b3 = st.columns([4, 1, 1])
    with b1:
        analyze = st.button("🔬 Analyze Sequence", type="primary",
                            disabled=not sequence.strip(), use_container_width=True)
    with b2:
        st.button("Example", on_click=_load_example, use_container_width=True)
    with b3:
        st.button("Clear", on_click=_clear,
                  disabled=not sequence and st.session_state["result"] is None,
                  use_container_width=True)

    if analyze:
        with st.spinner("Analyzing..."):
            if settings.analysis_delay_seconds > 0:
                time.sleep(settings.analysis_delay_seconds)
            result = analyze_sequence(sequence)
        log.info("Analyzed sequence: valid=%s total=%d", result.is_valid, result.total_count)
        st.session_state["result"] = result

    result = st.session_state["result"]
    if result is not None:
        st.markdown("---")
        render_result(result)


# =========================
# Mode 2: Sequence File
# =========================
else:
    uploaded_file = st.file_uploader(
        "Upload protein FASTA/GenPept/plain text (optionally .gz/.bz2)",
        type=["fa", "fasta", "faa", "pep", "gb", "gbk", "gp", "gpt", "txt", "seq", "gz", "bz2"]
    )

    if uploaded_file is None:
        st.session_state["batch"] = None
        st.info("Upload a file to begin.")
        st.stop()

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Filename", uploaded_file.name)
    with col2:
        st.metric("File Size", f"{uploaded_file.size / 1024:.2f} KB")

    if st.button("🚀 Process File", type="primary"):
        try:
            with st.spinner("Processing sequences..."):
                st.session_state["batch"] = process_protein_file(
                    uploaded_file.getvalue(), uploaded_file.name,
                    max_records=int(max_records)
                )
        except ValueError as exc:
            log.warning("Could not process %s: %s", uploaded_file.name, exc)
            st.session_state["batch"] = None
            st.error(f"Could not process file: {exc}")
            st.stop()
        st.success("✅ Done!")

    # kept across reruns so the Details selectbox doesn't drop the results
    batch = st.session_state["batch"]
    if batch is None or batch["filename"] != uploaded_file.name:
        st.stop()

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Format", batch["format"].upper())
    with c2:
        st.metric("Sequences", batch["total_sequences"])
    with c3:
        st.metric("Invalid", batch["invalid_sequences"])
    with c4:
        st.metric("Total Residues", f"{batch['total_residues']:,}")

    records = batch["records"]
    df = pd.DataFrame(records)

    tab1, tab2, tab3, tab4 = st.tabs(["📄 Records", "🧪 Pooled Composition", "🔎 Details", "⬇️ Export"])

    # ---- Tab 1: per-record summary ----
    with tab1:
        st.dataframe(df.drop(columns=["Sequence"]), use_container_width=True, height=450, hide_index=True)
        v1, v2 = st.columns(2)
        with v1:
            fig = plot_dominant_groups(records)
            if fig:
                st.plotly_chart(fig, use_container_width=True)
        with v2:
            fig = plot_length_distribution(records)
            if fig:
                st.plotly_chart(fig, use_container_width=True)

    # ---- Tab 2: all valid records as one sequence ----
    with tab2:
        st.caption("All valid records joined into one sequence")
        render_result(batch["pooled"], file_name=f"{uploaded_file.name}_pooled.csv")

    # ---- Tab 3: one record ----
    with tab3:
        idx = st.selectbox(
            "Select sequence to view",
            options=list(range(len(records))),
            format_func=lambda i: records[i]["ID"],
        )
        selected = records[idx]
        st.markdown(f"**ID:** {selected['ID']}")
        st.markdown(f"**Description:** {selected['Description'] or 'N/A'}")
        st.markdown(f"**Length:** {selected['Length']} aa")

        seq_str = selected["Sequence"]
        if len(seq_str) > settings.preview_length:
            st.text_area(f"Sequence (first {settings.preview_length} aa)",
                         seq_str[:settings.preview_length] + "...", height=150, disabled=True)
        else:
            st.text_area("Sequence", seq_str, height=150, disabled=True)

        render_result(analyze_sequence(seq_str), file_name=f"{selected['ID']}_analysis.csv")

    # ---- Tab 4: Export ----
    with tab4:
        csv = df.to_csv(index=False).encode("utf-8")
        st.download_button(
            label="⬇️ Download Record Summary (CSV)",
            data=csv,
            file_name=f"{uploaded_file.name}_summary.csv",
            mime="text/csv",
        )
