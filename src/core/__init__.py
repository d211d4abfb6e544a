"""
Core numerics and digit representations.

This package contains the exact arithmetic building blocks (arbitrary
precision unsigned integers, integer square root) and the base-N digit
representations of integers and rationals built on top of them.
"""
