"""
Behaviour mixins composed into the concrete `Tensor` class.
"""
