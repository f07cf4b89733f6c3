"""
Property-based tests for ordered_float.

Hypothesis проверяет инварианты порядка, равенства и хеша на произвольных
float, включая NaN с любым payload, бесконечности, нули и субнормальные.
"""
