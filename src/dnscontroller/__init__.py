"""DNS record/answer control plane over a relational store"""

__version__ = "0.1.0"
