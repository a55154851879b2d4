"""Dashboard renderer — substitutes the report into a static HTML template."""

from breakwatch.render.dashboard import (
    PLACEHOLDERS,
    load_template,
    render_dashboard,
    render_to_file,
)

__all__ = ["PLACEHOLDERS", "load_template", "render_dashboard", "render_to_file"]
