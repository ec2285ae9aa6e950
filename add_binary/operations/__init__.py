"""
Binary conversion strategies.

Each strategy is implemented as a separate module in this directory and is
discovered by the operation registry.
"""
