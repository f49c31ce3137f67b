"""
Core alphabets and the genetic code.
"""
