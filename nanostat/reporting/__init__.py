"""
nanostat.reporting
==================

Presentation of comparison results: text lines for terminals
(`nanostat.reporting.text`) and box plots of the raw samples
(`nanostat.reporting.boxplot`).
"""
