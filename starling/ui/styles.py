"""
Centralized styles module for the Starling UI.

Colors, fonts and stylesheet builders shared by the control panel, the
numeric displays and the Frank-Starling chart.
"""

# =============================================================================
# COLORS
# =============================================================================

COLORS = {
    # Core UI surfaces
    'background': '#0B0F14',
    'background_alt': '#0F141C',
    'card': '#1C2431',

    # Borders & Dividers
    'border': '#2A3341',

    # Text
    'text': '#E7ECF4',
    'text_secondary': '#C1CAD8',
    'text_dim': '#7E8A9C',

    # Controls
    'control': '#1A2230',

    # Accent Colors
    'primary': '#4C86F7',

    # Curves (one per regime)
    'baseline': '#0EA5E9',
    'inotropy': '#22C55E',
    'afterload': '#EF4444',
}

# =============================================================================
# FONTS
# =============================================================================

FONTS = {
    'family': 'Arial',
    'size_small': '11px',
    'size_normal': '12px',
    'size_medium': '13px',
    'size_title': '16px',
    'size_numeric': '28px',
    'size_numeric_small': '18px',
}

# =============================================================================
# STYLE BUILDERS
# =============================================================================

def get_base_widget_style():
    """Base style for all widgets."""
    return f"""
        QWidget {{
            background-color: {COLORS['background']};
            color: {COLORS['text']};
            font-family: {FONTS['family']};
            font-size: {FONTS['size_normal']};
        }}
        QLabel {{
            background-color: transparent;
            background: none;
            color: {COLORS['text']};
        }}
    """

def get_groupbox_style():
    """Style for QGroupBox."""
    return f"""
        QGroupBox {{
            font-weight: 600;
            font-size: {FONTS['size_medium']};
            color: {COLORS['text']};
            border: 1px solid {COLORS['border']};
            border-radius: 10px;
            margin-top: 14px;
            padding: 10px 12px 12px 12px;
            background-color: {COLORS['card']};
        }}
        QGroupBox::title {{
            subcontrol-origin: margin;
            subcontrol-position: top left;
            left: 12px;
            padding: 0 6px;
            background-color: {COLORS['card']};
            color: {COLORS['text_secondary']};
        }}
    """

def get_slider_style(accent_color):
    """Horizontal QSlider with a colored handle and filled groove."""
    return f"""
        QSlider::groove:horizontal {{
            height: 6px;
            background: {COLORS['control']};
            border: 1px solid {COLORS['border']};
            border-radius: 3px;
        }}
        QSlider::sub-page:horizontal {{
            background: {get_rgba(accent_color, 0.5)};
            border-radius: 3px;
        }}
        QSlider::handle:horizontal {{
            background: {accent_color};
            width: 14px;
            margin: -5px 0;
            border-radius: 7px;
        }}
    """

def get_button_style(base=COLORS['primary'], padding="8px 16px", radius=8):
    """Style for a filled accent QPushButton."""
    text = "white"
    hover_bg = get_rgba(base, 0.9)
    pressed_bg = get_rgba(base, 0.8)

    return f"""
        QPushButton {{
            background-color: {base};
            color: {text};
            padding: {padding};
            border-radius: {radius}px;
            font-size: {FONTS['size_medium']};
            font-weight: 600;
            border: 1px solid transparent;
        }}
        QPushButton:hover {{
            background-color: {hover_bg};
        }}
        QPushButton:pressed {{
            background-color: {pressed_bg};
        }}
        QPushButton:disabled {{
            background-color: {COLORS['background_alt']};
            color: {COLORS['text_dim']};
        }}
    """

def get_tinted_frame_style(color, alpha=0.06, radius=8):
    """Subtle tinted frame for numeric panels."""
    return f"""
        QFrame {{
            background-color: {get_rgba(color, alpha)};
            border: 1px solid {COLORS['border']};
            border-radius: {radius}px;
        }}
    """

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def hex_to_rgb(hex_color):
    """Convert hex color to r, g, b string for rgba()."""
    hex_color = hex_color.lstrip('#')
    r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
    return f"{r}, {g}, {b}"

def get_rgba(hex_color, alpha):
    """Get rgba string from hex color and alpha value (0-1)."""
    return f"rgba({hex_to_rgb(hex_color)}, {alpha})"


STYLE_GROUPBOX = get_groupbox_style()
