from .base import RequestWorkflow
from .detail import DetailWorkflow, parse_job_detail
from .search import SearchWorkflow, parse_search_results

__all__ = [
    "RequestWorkflow", "SearchWorkflow", "DetailWorkflow",
    "parse_search_results", "parse_job_detail",
]
