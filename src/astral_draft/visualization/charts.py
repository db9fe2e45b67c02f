"""
Plotly Chart Generators

Interactive charts for trade analysis.
All charts return HTML strings for embedding or standalone use.
"""

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from astral_draft.models.league import LeagueSettings
from astral_draft.models.player import Player, TradeBundle
from astral_draft.models.trade import TradeAnalysis
from astral_draft.services.impact import TRACKED_POSITIONS
from astral_draft.services.valuation import describe_bundle


DARK_THEME = {
    "paper_bgcolor": "#0f1024",
    "plot_bgcolor": "#171a3a",
    "font_color": "#e8e8f0",
    "gridcolor": "#2c2f5a",
    "colorway": [
        "#7c5cff",
        "#00d9ff",
        "#ff6b9d",
        "#ffd166",
        "#06d6a0",
        "#f97316",
    ],
}

GRADE_COLORS = {
    "A": "#06d6a0",
    "B": "#00d9ff",
    "C": "#ffd166",
    "D": "#f97316",
    "F": "#ef4444",
}


def _apply_dark_theme(fig: go.Figure) -> go.Figure:
    """Apply dark theme styling to a figure."""
    fig.update_layout(
        paper_bgcolor=DARK_THEME["paper_bgcolor"],
        plot_bgcolor=DARK_THEME["plot_bgcolor"],
        font={"color": DARK_THEME["font_color"], "family": "Inter, sans-serif"},
        colorway=DARK_THEME["colorway"],
        margin={"l": 60, "r": 40, "t": 80, "b": 60},
    )
    fig.update_xaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    fig.update_yaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    return fig


def trade_value_chart(
    initiator_gives: TradeBundle,
    initiator_receives: TradeBundle,
    analysis: TradeAnalysis,
    settings: LeagueSettings,
    title: str = "Trade Breakdown",
) -> str:
    """
    Create a stacked bar of each side's asset values next to a fairness gauge.

    Args:
        initiator_gives: Assets the initiator sends away
        initiator_receives: Assets the initiator takes on
        analysis: Result of analyzing the same trade
        settings: League snapshot the assets were valued against
        title: Chart title

    Returns:
        HTML string containing the chart
    """
    fig = make_subplots(
        rows=1,
        cols=2,
        column_widths=[0.65, 0.35],
        subplot_titles=("Value by Asset", "Fairness"),
        specs=[[{"type": "bar"}, {"type": "indicator"}]],
        horizontal_spacing=0.1,
    )

    sides = [
        (f"Initiator receives ({analysis.initiator_grade.value})", initiator_receives),
        (f"Partner receives ({analysis.partner_grade.value})", initiator_gives),
    ]

    for side_label, bundle in sides:
        for asset in describe_bundle(bundle, settings).assets:
            fig.add_trace(
                go.Bar(
                    x=[side_label],
                    y=[asset.value],
                    name=asset.name,
                    text=[asset.name],
                    textposition="inside",
                    hovertemplate=(
                        f"<b>{asset.name}</b><br>"
                        "Value: %{y}<br>"
                        "<extra></extra>"
                    ),
                ),
                row=1,
                col=1,
            )

    fig.add_trace(
        go.Indicator(
            mode="gauge+number",
            value=round(analysis.fairness_score, 1),
            gauge={
                "axis": {"range": [0, 100]},
                "bar": {"color": GRADE_COLORS[analysis.initiator_grade.value[0]]},
                "steps": [
                    {"range": [0, 30], "color": "#3b1b2b"},
                    {"range": [30, 50], "color": "#3b2f1b"},
                    {"range": [50, 70], "color": "#1b2f3b"},
                    {"range": [70, 100], "color": "#1b3b2f"},
                ],
            },
        ),
        row=1,
        col=2,
    )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        barmode="stack",
        height=450,
        showlegend=False,
    )

    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")


def position_depth_chart(
    analysis: TradeAnalysis,
    initiator_roster: list[Player],
    partner_roster: list[Player],
    title: str = "Positional Depth Before and After",
) -> str:
    """
    Create grouped bars of each team's depth per position before and after.

    Returns:
        HTML string containing the chart
    """
    fig = make_subplots(
        rows=1,
        cols=2,
        subplot_titles=("Initiator", "Partner"),
        shared_yaxes=True,
    )

    labels = [pos.value for pos in TRACKED_POSITIONS]
    teams = [
        (initiator_roster, analysis.position_impact.initiator, 1),
        (partner_roster, analysis.position_impact.partner, 2),
    ]

    for roster, impact, col in teams:
        before = [sum(1 for p in roster if p.position == pos) for pos in TRACKED_POSITIONS]
        after = [impact.depth.get(pos, 0) for pos in TRACKED_POSITIONS]

        fig.add_trace(
            go.Bar(
                x=labels,
                y=before,
                name="Before",
                marker_color=DARK_THEME["colorway"][0],
                showlegend=col == 1,
            ),
            row=1,
            col=col,
        )
        fig.add_trace(
            go.Bar(
                x=labels,
                y=after,
                name="After",
                marker_color=DARK_THEME["colorway"][1],
                showlegend=col == 1,
            ),
            row=1,
            col=col,
        )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        barmode="group",
        height=400,
        legend={"orientation": "h", "yanchor": "bottom", "y": -0.2},
    )

    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")
