"""
Render an ordered palette for the terminal or as an HTML report.

Centroids are floats; every renderer converts them to 8-bit by clamping to
[0, 255] and truncating toward zero.
"""

from html import escape
from typing import Sequence

from color_vector import ColorVector


def _color_of(item) -> ColorVector:
    return item.color if hasattr(item, 'color') else item


def to_rgb8(item) -> tuple[int, int, int]:
    """Clamp to [0, 255] and truncate each component to an int."""
    return tuple(int(min(255.0, max(0.0, v))) for v in _color_of(item))


def to_hex(item) -> str:
    r, g, b = to_rgb8(item)
    return f"#{r:02x}{g:02x}{b:02x}"


def text_color_for_background(item) -> str:
    """Return black or white text color based on background brightness."""
    return "#000" if sum(to_rgb8(item)) > 3 * 127 else "#fff"


# =============================================================================
# Terminal
# =============================================================================

def swatch(item) -> str:
    """Two-cell block with a 24-bit ANSI background."""
    r, g, b = to_rgb8(item)
    return f"\x1b[48;2;{r};{g};{b}m  \x1b[0m"


def render_terminal(palette: Sequence, ansi: bool = True) -> str:
    lines = []
    for i, item in enumerate(palette, 1):
        block = f"{swatch(item)} " if ansi else ""
        lines.append(f"Color {i}: {block}{to_hex(item)}")
    return '\n'.join(lines)


# =============================================================================
# HTML
# =============================================================================

CSS = """
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body {
            font-family: system-ui, -apple-system, sans-serif;
            background: #f5f5f5;
            color: #333;
            line-height: 1.5;
            padding: 2rem;
            max-width: 900px;
            margin: 0 auto;
        }
        h1 { font-size: 1.5rem; margin-bottom: 0.5rem; }
        h2 { font-size: 1.2rem; margin: 2rem 0 1rem; border-bottom: 1px solid #ddd; padding-bottom: 0.5rem; }
        .meta { color: #666; font-size: 0.9rem; margin-bottom: 1rem; }
        .palette-strip {
            display: flex;
            height: 80px;
            border-radius: 8px;
            overflow: hidden;
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
            margin: 1.5rem 0;
        }
        .palette-strip .swatch {
            flex: 1;
            display: flex;
            align-items: flex-end;
            justify-content: center;
            padding: 0.5rem;
            font-size: 0.7rem;
            font-weight: 500;
        }
        .color-card {
            background: #fff;
            border-radius: 8px;
            padding: 1rem;
            margin-bottom: 1rem;
            box-shadow: 0 1px 3px rgba(0,0,0,0.08);
            display: grid;
            grid-template-columns: 60px 1fr;
            gap: 1rem;
        }
        .color-card .swatch {
            width: 60px;
            height: 60px;
            border-radius: 6px;
        }
        .color-card .info { font-size: 0.85rem; }
        .color-card .values { font-family: monospace; color: #555; font-size: 0.8rem; }
"""


def render_html(palette: Sequence, image_path: str, k: int, iterations: int) -> str:
    """Render the palette as a standalone HTML page."""
    safe_path = escape(image_path)

    lines = [
        '<!DOCTYPE html>',
        '<html lang="en">',
        '<head>',
        '<meta charset="utf-8">',
        f'<title>Palette: {safe_path}</title>',
        f'<style>{CSS}</style>',
        '</head>',
        '<body>',
        '<h1>Color Palette</h1>',
        f'<p class="meta">{safe_path} · k={k} · {iterations} iterations</p>',
    ]

    lines.append('<div class="palette-strip">')
    for item in palette:
        hex_val = to_hex(item)
        fg = text_color_for_background(item)
        lines.append(f'  <div class="swatch" style="background:{hex_val}; color:{fg}">{hex_val}</div>')
    lines.append('</div>')

    lines.append('<h2>Colors</h2>')
    for i, item in enumerate(palette, 1):
        color = _color_of(item)
        hex_val = to_hex(item)
        r, g, b = to_rgb8(item)
        lines.append('<div class="color-card">')
        lines.append(f'  <div class="swatch" style="background:{hex_val}"></div>')
        lines.append('  <div class="info">')
        lines.append(f'    <div><strong>Color {i}</strong></div>')
        lines.append(f'    <div class="values">{hex_val} · RGB({r}, {g}, {b})</div>')
        lines.append(f'    <div class="values">centroid ({color.r:.2f}, {color.g:.2f}, {color.b:.2f})</div>')
        lines.append('  </div>')
        lines.append('</div>')

    lines.append('</body>')
    lines.append('</html>')

    return '\n'.join(lines)
