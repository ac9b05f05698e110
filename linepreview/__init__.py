from linepreview.preview import MAX_LINES, OpenOutcome, iter_lines, open_for_preview, preview

__all__ = ["MAX_LINES", "OpenOutcome", "iter_lines", "open_for_preview", "preview"]
