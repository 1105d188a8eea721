"""Standalone HTML page showing a live preview of one config."""
from __future__ import annotations

from html import escape

from animkit.animation.binder import PreviewBinder
from animkit.animation.element import StyledElement
from animkit.animation.keyframes import preview_stylesheet
from animkit.animation.schema import AnimationConfig

PAGE_STYLE = """
        body {
            background: #1a1a2e;
            display: flex;
            justify-content: center;
            align-items: center;
            min-height: 100vh;
            margin: 0;
        }
        .animatable-element {
            padding: 24px 32px;
            border-radius: 8px;
            background: #60a5fa;
            color: #0f172a;
            font-family: Inter, ui-sans-serif, system-ui, sans-serif;
        }
"""


def render_preview_html(config: AnimationConfig, text: str = "Animate Me!") -> str:
    """Bind `config` to a sample element and return a full HTML document."""
    element = StyledElement(tag="div", text=text)
    element.add_class("animatable-element")
    with PreviewBinder() as binder:
        binder.bind(config, element)
        body = element.to_html()
        title = escape(config.name or f"{config.type_name} animation")

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>{PAGE_STYLE}
{preview_stylesheet()}
    </style>
</head>
<body>
    {body}
</body>
</html>
"""
