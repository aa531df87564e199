from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

@dataclass(frozen=True)
class Theme:
    key: str
    accent: str
    background: str
    header_from: str
    header_to: str
    badge_bg: str
    badge_text: str
    pattern: str

def _theme(key, accent, background, header_from, header_to, badge_bg, badge_text, pattern):
    return key, Theme(key, accent, background, header_from, header_to, badge_bg, badge_text, pattern)

# Checked top to bottom; the first key that matches wins.
CUISINE_THEMES: Tuple[Tuple[str, Theme], ...] = (
    _theme("italian", "#D4380D", "#FFFBEB", "#7F1D1D", "#78350F", "#FEE2E2", "#B91C1C", "\U0001F35D"),
    _theme("indian", "#D97706", "#FFF7ED", "#7C2D12", "#7F1D1D", "#FFEDD5", "#C2410C", "\U0001F35B"),
    _theme("chinese", "#DC2626", "#FEF2F2", "#7F1D1D", "#4C0519", "#FEE2E2", "#B91C1C", "\U0001F962"),
    _theme("japanese", "#0F766E", "#F8FAFC", "#0F172A", "#1E293B", "#CCFBF1", "#0F766E", "\U0001F363"),
    _theme("sushi", "#0F766E", "#F8FAFC", "#0F172A", "#1E293B", "#CCFBF1", "#0F766E", "\U0001F363"),
    _theme("mexican", "#CA8A04", "#FEFCE8", "#14532D", "#7F1D1D", "#DCFCE7", "#15803D", "\U0001F32E"),
    _theme("thai", "#9333EA", "#FAF5FF", "#581C87", "#831843", "#F3E8FF", "#7E22CE", "\U0001F35C"),
    _theme("american", "#2563EB", "#EFF6FF", "#1E3A8A", "#0F172A", "#DBEAFE", "#1D4ED8", "\U0001F354"),
    _theme("burger", "#2563EB", "#EFF6FF", "#1E3A8A", "#0F172A", "#DBEAFE", "#1D4ED8", "\U0001F354"),
    _theme("mediterranean", "#0369A1", "#ECFEFF", "#164E63", "#1E3A8A", "#CFFAFE", "#0E7490", "\U0001FAD2"),
    _theme("french", "#7C3AED", "#F5F3FF", "#2E1065", "#0F172A", "#EDE9FE", "#6D28D9", "\U0001F950"),
    _theme("korean", "#E11D48", "#FFF1F2", "#881337", "#0F172A", "#FFE4E6", "#BE123C", "\U0001F356"),
)

DEFAULT_THEME = Theme("default", "#7C3AED", "#F9FAFB", "#111827", "#1F2937", "#EDE9FE", "#7C3AED", "\U0001F37D\uFE0F")


def resolve_theme(cuisine: Optional[str], themes: Sequence[Tuple[str, Theme]] = CUISINE_THEMES) -> Theme:
    """Pick a theme whose key and the cuisine contain one another."""
    needle = (cuisine or "").strip().lower()
    if not needle:
        return DEFAULT_THEME
    for key, theme in themes:
        if key in needle or needle in key:
            return theme
    return DEFAULT_THEME
