# plots.py
from __future__ import annotations
from typing import List, Dict
import pandas as pd
import plotly.express as px

from composition import AnalysisResult, GROUPS

GROUP_COLORS = {
    "Glucogenic": "#2563eb",
    "Amphibolic": "#9333ea",
    "Ketogenic": "#dc2626",
}


def plot_amino_acid_frequency(result: AnalysisResult):
    if not result.is_valid or not result.amino_acids:
        return None
    df = pd.DataFrame([
        {
            "Code": aa.code,
            "Name": aa.name,
            "Count": aa.count,
            "Percentage": aa.percentage,
            "Classification": aa.classification,
        }
        for aa in result.amino_acids
    ])
    fig = px.bar(
        df, x="Code", y="Count", title="Amino Acid Frequency",
        hover_name="Name",
        hover_data={"Code": False, "Count": True, "Percentage": ":.1f", "Classification": True},
        category_orders={"Code": list(df["Code"])},
    )
    fig.update_xaxes(tickangle=-45, type="category")
    return fig


def plot_group_counts(result: AnalysisResult):
    if not result.is_valid:
        return None
    counts = result.group_counts.as_dict()
    df = pd.DataFrame({"Group": list(GROUPS), "Count": [counts[g] for g in GROUPS]})
    return px.bar(
        df, x="Group", y="Count", color="Group", title="Metabolic Classification",
        color_discrete_map=GROUP_COLORS,
    )


def plot_dominant_groups(records: List[Dict]):
    df = pd.DataFrame(records)
    if "Dominant_group" not in df.columns or "Valid" not in df.columns:
        return None
    valid = df[df["Valid"]]
    if valid.empty:
        return None
    counts = valid["Dominant_group"].value_counts().reindex(list(GROUPS), fill_value=0).reset_index()
    counts.columns = ["Group", "Sequences"]
    return px.bar(
        counts, x="Group", y="Sequences", color="Group", title="Dominant Group per Sequence",
        color_discrete_map=GROUP_COLORS,
    )


def plot_length_distribution(records: List[Dict]):
    """Lengths of the valid records, stacked by their dominant group."""
    df = pd.DataFrame(records)
    if not {"Length", "Valid", "Dominant_group"}.issubset(df.columns):
        return None
    valid = df[df["Valid"]]
    if valid.empty:
        return None
    return px.histogram(
        valid, x="Length", color="Dominant_group", nbins=30,
        title="Sequence Length by Dominant Group",
        labels={"Length": "Length (aa)", "Dominant_group": "Dominant group"},
        category_orders={"Dominant_group": list(GROUPS)},
        color_discrete_map=GROUP_COLORS,
    )
