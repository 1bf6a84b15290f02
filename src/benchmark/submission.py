"""
Request handling for the comparison endpoint.

A transport layer (HTTP or otherwise) passes the decoded request body here and
sends back the returned status code and body. Nothing is kept between calls.
"""

from typing import Any, Dict, Optional, Tuple

from ..algorithms.algorithm import InvalidInputError
from .benchmark import BenchmarkReport, BenchmarkRunner

Response = Tuple[int, Dict[str, Any]]


def handle_compare_request(
    payload: Any, runner: Optional[BenchmarkRunner] = None
) -> Response:
    """
    Validate a {"text", "pattern"} body and compare all algorithms on it.

    Returns:
        (400, {"error": message}) for a malformed request, otherwise
        (200, {"naive": ..., "kmp": ..., "rabinKarp": ...})
    """
    if not isinstance(payload, dict):
        return 400, {"error": "Request body must be a JSON object"}

    text = payload.get("text")
    pattern = payload.get("pattern")
    if not text or pattern is None:
        return 400, {"error": "Text and pattern are required"}
    if not isinstance(text, str) or not isinstance(pattern, str):
        return 400, {"error": "Text and pattern must be strings"}

    if runner is None:
        runner = BenchmarkRunner()
    try:
        report = runner.compare(text, pattern)
    except InvalidInputError:
        # An empty pattern has no match set; answer with the zeroed report
        report = BenchmarkReport.empty()

    return 200, report.to_dict()
