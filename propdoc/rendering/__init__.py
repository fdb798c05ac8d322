from .markdown import format_type, render_declaration, render_prop_table

__all__ = ["format_type", "render_declaration", "render_prop_table"]
