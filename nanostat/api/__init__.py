"""
nanostat.api - User-Friendly Facade
===================================

Compare a control sample against one or more experiments without touching the
individual statistical components.

Examples
--------
>>> from nanostat.api.compare import ComparisonConfig, compare_samples
>>> config = ComparisonConfig(confidence=99.0)
>>> results = compare_samples([1.0, 1.1, 0.9], {"new": [1.4, 1.5, 1.6]}, config)

Architecture
------------
This facade delegates to:
- nanostat.core: summaries, results and errors
- nanostat.stats: the Welch and pooled t-tests
"""
