"""
Utilities: physical constants, the sample solar system catalog and plotting.
"""
