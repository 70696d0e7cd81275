from .meta import inject_ui_meta, ui_meta_for_entry, ui_meta_for_tool

__all__ = ["inject_ui_meta", "ui_meta_for_entry", "ui_meta_for_tool"]
