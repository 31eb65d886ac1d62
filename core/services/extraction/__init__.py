"""Answer extraction from unstructured model replies."""
from core.services.extraction.json_extractor import (
    extract_json_string,
    parse_structured_answer,
    strip_citation_markers,
)

__all__ = ["extract_json_string", "parse_structured_answer", "strip_citation_markers"]
