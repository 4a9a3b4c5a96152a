"""
Marker encoding and the marker layer model.

The layer mirrors the client's cluster layer: it is cleared and refilled as a
whole, never patched, so it can never hold a marker from an older filter state.
"""
from __future__ import annotations

import html
from dataclasses import dataclass, asdict
from typing import Iterable

from hazardmap.config import CATEGORIES, CATCH_ALL_CATEGORY, SEVERITY_MIN, SEVERITY_MAX
from hazardmap.data.schemas import Point


@dataclass(frozen=True)
class MarkerStyle:
    label: str
    category_class: str
    severity_class: str

    @property
    def css(self) -> str:
        return f"marker-dot {self.category_class} {self.severity_class}"


@dataclass(frozen=True)
class Marker:
    id: str
    lat: float
    lng: float
    css: str
    title: str
    popup_html: str

    def to_dict(self) -> dict:
        return asdict(self)


def category_meta(code: str) -> tuple[str, str]:
    """(label, class) for a code; unknown codes get the catch-all entry."""
    return CATEGORIES.get(code, CATEGORIES[CATCH_ALL_CATEGORY])


def marker_style(category: str, severity: int) -> MarkerStyle:
    """Visual encoding for (category, severity). Defined for every input."""
    label, cls = category_meta(category)
    try:
        tier = max(SEVERITY_MIN, min(SEVERITY_MAX, int(severity)))
    except (TypeError, ValueError):
        tier = SEVERITY_MIN
    return MarkerStyle(label=label, category_class=cls, severity_class=f"sev-{tier}")


def _is_web_url(url: str) -> bool:
    return url.lower().startswith(("http://", "https://"))


def popup_html(p: Point) -> str:
    """Popup body for one point. All user text is escaped."""
    label, _ = category_meta(p.category)
    e = html.escape
    lines = []
    if p.block or p.school:
        place = " / ".join(s for s in (p.block, p.school) if s)
        lines.append(f'<div class="text-xs text-gray-500">{e(place)}</div>')
    lines.append(f'<div class="font-semibold">{e(label)} (severity {p.severity})</div>')
    if p.description:
        lines.append(f'<div class="mt-1 text-sm whitespace-pre-wrap">{e(p.description)}</div>')
    if p.photo_url and _is_web_url(p.photo_url):
        lines.append(
            f'<div class="mt-2"><a target="_blank" rel="noopener" class="text-blue-600 underline" '
            f'href="{e(p.photo_url)}">View photo</a></div>'
        )
    if p.status:
        lines.append(f'<div class="mt-2 text-xs">Status: {e(p.status)}</div>')
    if p.timestamp:
        lines.append(f'<div class="mt-2 text-xs text-gray-500">Reported: {e(p.timestamp)}</div>')
    return f'<div class="p-1">{"".join(lines)}</div>'


def build_marker(p: Point) -> Marker:
    style = marker_style(p.category, p.severity)
    return Marker(
        id=p.id,
        lat=p.lat,
        lng=p.lng,
        css=style.css,
        title=style.label,
        popup_html=popup_html(p),
    )


class MarkerLayer:
    """Server-side model of the clustered marker layer."""

    def __init__(self) -> None:
        self._markers: list[Marker] = []

    def clear(self) -> None:
        self._markers = []

    def add(self, marker: Marker) -> None:
        self._markers.append(marker)

    def add_many(self, markers: Iterable[Marker]) -> None:
        for m in markers:
            self.add(m)

    @property
    def markers(self) -> list[Marker]:
        return list(self._markers)

    def __len__(self) -> int:
        return len(self._markers)
