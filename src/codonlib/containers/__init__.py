"""
This module contains the containers for sequences of alphabet symbols and the codons read from them.
"""
