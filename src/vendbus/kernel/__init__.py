"""Kernel – error hierarchy and DDD building blocks shared by every layer."""
