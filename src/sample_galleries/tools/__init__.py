"""Tool operations exposed to the calling agent."""

from sample_galleries.tools.samples import SamplesTools, SearchSamplesError

__all__ = ["SamplesTools", "SearchSamplesError"]
