"""
Visualization package - Plotly figures built from daily summaries.
"""

from .charts import create_category_pie, create_day_pie, create_history_bar

__all__ = ['create_category_pie', 'create_day_pie', 'create_history_bar']
