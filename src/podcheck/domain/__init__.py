"""Pod phase aggregation and threshold evaluation."""
