"""Shared visual theme for the HTML presentation and chart pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.config.settings import ThemeSettings

TAILWIND_CDN = "https://cdn.tailwindcss.com"
PLOTLY_CDN = "https://cdn.plot.ly/plotly-2.35.2.min.js"
GOOGLE_FONTS_BASE = "https://fonts.googleapis.com/css2"


@dataclass
class PresentationTheme:
    """Colours, fonts and slide geometry.

    Slides are fixed-size 16:9 panels; the CSS lives in a Tailwind
    ``@layer utilities`` block so slide markup can keep using utility classes.
    """

    primary_color: str = "#1B365D"
    secondary_color: str = "#2C5F7F"
    accent_color: str = "#D4AF37"
    text_color: str = "#2D3748"
    background_color: str = "#FAFBFC"
    heading_font: str = "Sorts Mill Goudy"
    body_font: str = "Oranienbaum"
    slide_width_px: int = 992
    slide_height_px: int = 558

    @classmethod
    def from_settings(cls, settings: Optional[ThemeSettings] = None) -> "PresentationTheme":
        settings = settings or ThemeSettings()
        return cls(
            primary_color=settings.primary_color,
            secondary_color=settings.secondary_color,
            accent_color=settings.accent_color,
            text_color=settings.text_color,
            background_color=settings.background_color,
            heading_font=settings.heading_font,
            body_font=settings.body_font,
        )

    @property
    def fonts_url(self) -> str:
        families = "&".join(
            f"family={font.replace(' ', '+')}"
            for font in dict.fromkeys([self.heading_font, self.body_font])
        )
        return f"{GOOGLE_FONTS_BASE}?{families}&display=swap"

    def build_base_css(self) -> str:
        return (
            "@layer utilities { .ppt-slide { "
            f"@apply relative w-[{self.slide_width_px}px] h-[{self.slide_height_px}px] "
            "mx-auto p-[30px] box-border overflow-hidden mb-[40px] "
            f"bg-[{self.background_color}]; }} }}"
        )

    def heading_style(self) -> str:
        return f"font-family: '{self.heading_font}', serif;"

    def body_style(self) -> str:
        return f"font-family: '{self.body_font}', serif;"
