"""
Visualization module for Plotly charts.
Builds pie and bar figures from daily summaries and category totals.
Figures are returned to the caller; no chart state is kept here.
"""

import plotly.graph_objects as go
from typing import Sequence

from ..config import CATEGORY_COLORS, DEFAULT_CHART_HEIGHT
from ..export import summaries_to_dataframe
from ..models import Category, CategoryTotals, DaySummary

# Display order used by every chart
CATEGORY_ORDER = [Category.PRODUCTIVE, Category.NEUTRAL, Category.WASTE]


def create_category_pie(totals: CategoryTotals, title: str = 'Time Distribution') -> go.Figure:
    """
    Create a pie chart of minutes per category.

    Args:
        totals: Minutes per category
        title: Chart title

    Returns:
        Plotly Figure with the pie chart
    """
    minutes = {
        Category.PRODUCTIVE: totals.productive,
        Category.NEUTRAL: totals.neutral,
        Category.WASTE: totals.waste,
    }
    labels = [c.value for c in CATEGORY_ORDER]

    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=[minutes[c] for c in CATEGORY_ORDER],
        marker=dict(
            colors=[CATEGORY_COLORS[label] for label in labels],
            line=dict(color='#ffffff', width=2),
        ),
        sort=False,
        hovertemplate='<b>%{label}</b><br>%{value} minutes<br>%{percent}<extra></extra>'
    )])

    fig.update_layout(
        title=title,
        height=DEFAULT_CHART_HEIGHT,
        legend=dict(orientation='h', yanchor='top', y=-0.05),
    )

    return fig


def create_day_pie(summary: DaySummary) -> go.Figure:
    """Pie chart for a single day."""
    totals = CategoryTotals(
        productive=summary.productive_minutes,
        waste=summary.waste_minutes,
        neutral=summary.neutral_minutes,
    )
    return create_category_pie(totals, title=f'Time Distribution {summary.date}')


def create_history_bar(summaries: Sequence[DaySummary]) -> go.Figure:
    """
    Create a stacked bar chart of minutes per category per day.

    Args:
        summaries: History in ascending date order

    Returns:
        Plotly Figure with one bar per day
    """
    df = summaries_to_dataframe(summaries)

    fig = go.Figure()
    for category in CATEGORY_ORDER:
        column = f'{category.value.lower()}_minutes'
        fig.add_trace(go.Bar(
            x=df['date'],
            y=df[column],
            name=category.value,
            marker_color=CATEGORY_COLORS[category.value],
            hovertemplate='%{x}<br>%{y} minutes<extra>' + category.value + '</extra>'
        ))

    fig.update_layout(
        barmode='stack',
        title='Daily History',
        xaxis_title='Date',
        yaxis_title='Minutes',
        height=DEFAULT_CHART_HEIGHT,
    )

    return fig
