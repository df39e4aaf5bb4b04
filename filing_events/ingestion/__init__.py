"""Filing retrieval and the end-to-end extraction pipeline."""

from .edgar_client import SECEdgarClient
from .filing_text import html_to_text, prepare_content
from .pipeline import FilingPipeline, PipelineResult

__all__ = [
    "SECEdgarClient",
    "html_to_text",
    "prepare_content",
    "FilingPipeline",
    "PipelineResult",
]
