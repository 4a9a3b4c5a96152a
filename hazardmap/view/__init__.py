"""Marker layer, stats panel, and the synchronizer that drives both."""
from .markers import Marker, MarkerLayer, MarkerStyle, marker_style, build_marker, popup_html
from .stats import StatsPanel, category_counts, stats_rows
from .sync import ViewSynchronizer
