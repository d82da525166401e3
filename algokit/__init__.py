"""Classic searching, sorting, bit-manipulation, subarray and bracket-matching algorithms."""

__version__ = "0.1.0"
__all__ = ["searching", "sorting", "bits", "subarrays", "brackets", "basics"]