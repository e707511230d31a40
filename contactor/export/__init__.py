"""Export destinations for rendered contacts."""
from contactor.export.sinks import ensure_output_dir, write_excel, write_text

__all__ = ["ensure_output_dir", "write_excel", "write_text"]
