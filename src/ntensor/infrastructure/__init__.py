"""
Infrastructure layer: NumPy-backed tensors, views, matrix-multiplication
kernels and the logging-based diagnostics adapter.
"""
