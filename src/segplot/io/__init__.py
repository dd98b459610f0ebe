"""
segplot.io
==========

Inputs, configuration and logging setup.
"""
