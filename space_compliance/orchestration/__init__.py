from .aggregator import UnifiedAssessor, parse_status_maps

__all__ = ["UnifiedAssessor", "parse_status_maps"]
