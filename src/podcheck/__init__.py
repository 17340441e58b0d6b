"""Kubernetes pod phase monitoring check."""
